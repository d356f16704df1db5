from __future__ import annotations

import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from reactor.cli import main
from reactor.reboot import (
    RebootConfig,
    VerificationError,
    count_voxels,
    initialization_steps,
    reboot,
    solve,
)
from reactor.steps import parse_steps

EXAMPLE = [
    "on x=10..12,y=10..12,z=10..12",
    "on x=11..13,y=11..13,z=11..13",
    "off x=9..11,y=9..11,z=9..11",
    "on x=10..10,y=10..10,z=10..10",
]

MIXED = EXAMPLE + [
    "on x=100..109,y=0..9,z=0..9",
    "off x=105..200,y=0..9,z=0..9",
]


def test_reboot_worked_example():
    region = reboot(parse_steps(EXAMPLE))
    assert region.active_cell_count() == 39


def test_count_voxels_matches_example():
    assert count_voxels(parse_steps(EXAMPLE)) == 39


def test_initialization_steps_filter():
    steps = parse_steps(MIXED)
    assert len(initialization_steps(steps)) == 4


def test_solve_both_parts():
    result = solve(parse_steps(MIXED), RebootConfig(verify=True))
    assert result.part1 == 39
    assert result.part2 == 39 + 500
    assert result.steps_total == 6
    assert result.steps_init_area == 4
    assert result.verified is True
    assert result.to_dict()["part2"] == 539


def test_solve_verification_mismatch(monkeypatch):
    monkeypatch.setattr("reactor.reboot.count_voxels", lambda steps, bound: -1)
    with pytest.raises(VerificationError):
        solve(parse_steps(EXAMPLE), RebootConfig(verify=True))


def test_config_rejects_negative_bound():
    with pytest.raises(ValueError):
        RebootConfig(init_bound=-1)


def test_cli_end_to_end(tmp_path: Path, capsys):
    infile = tmp_path / "input.txt"
    infile.write_text("\n".join(MIXED + ["toggle x=1..2,y=1..2,z=1..2"]) + "\n")
    reject_log = tmp_path / "rejected.jsonl"
    main(["--infile", str(infile), "--verify", "--summary", "--reject-log", str(reject_log)])
    out = capsys.readouterr().out
    assert "Part 1: 39" in out
    assert "Part 2: 539" in out
    assert "Skipping line 7" in out

    entries = [json.loads(line) for line in reject_log.read_text().splitlines()]
    assert entries[0]["line_number"] == 7
    assert entries[0]["line"].startswith("toggle")

    summary = json.loads((tmp_path / "input.summary.json").read_text())
    assert summary["part1"] == 39
    assert summary["rejected_lines"] == 1


def test_cli_no_valid_steps(tmp_path: Path):
    infile = tmp_path / "empty.txt"
    infile.write_text("\n")
    with pytest.raises(SystemExit):
        main(["--infile", str(infile)])


def test_cli_missing_file(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(["--infile", str(tmp_path / "nope.txt")])


def test_cli_describe_dumps_region(tmp_path: Path, capsys):
    infile = tmp_path / "input.txt"
    infile.write_text("on x=0..1,y=0..1,z=0..1\n")
    main(["--infile", str(infile), "--describe", "--reject-log", str(tmp_path / "rejected.jsonl")])
    out = capsys.readouterr().out.splitlines()
    assert "total cells: 8" in out
    assert "0: x=0..2,y=0..2,z=0..2 [cells: 8]" in out


def test_cli_directory_path(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(["--infile", str(tmp_path)])
