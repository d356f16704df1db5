"""reactor.cli
=============

Command-line entry point: read reboot instructions, print both answers and
optionally write a JSON summary next to the input.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List

from .constants import INIT_AREA_BOUND, REJECT_LOG, SUMMARY_SUFFIX
from .logging_utils import log_rejected
from .reboot import RebootConfig, VerificationError, solve
from .steps import ParseError, parse_steps


def _read_lines(infile: str) -> List[str]:
    if infile == "-":
        return sys.stdin.read().splitlines()
    path = Path(infile)
    if not path.is_file():
        raise SystemExit(f"Input file not found: {infile}")
    return path.read_text().splitlines()


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the reboot."""

    parser = argparse.ArgumentParser("reactor-reboot")
    parser.add_argument("--infile", default="-", help="Instruction file ('-' reads stdin)")
    parser.add_argument(
        "--init-bound",
        type=int,
        default=INIT_AREA_BOUND,
        help="Half-width of the initialization area used for part 1",
    )
    parser.add_argument("--verify", action="store_true", help="Cross-check part 1 with a dense voxel grid")
    parser.add_argument("--reject-log", default=REJECT_LOG, help="JSONL file collecting skipped lines")
    parser.add_argument("--summary", action="store_true", help="Write a JSON summary next to the input file")
    parser.add_argument("--describe", action="store_true", help="Dump the final region fragments")
    args = parser.parse_args(argv)

    if args.init_bound < 0:
        parser.error("--init-bound must be non-negative")

    rejected = 0

    def on_error(line_number: int, line: str, error: ParseError) -> None:
        nonlocal rejected
        rejected += 1
        print(f"Skipping line {line_number}: {error}")
        log_rejected(line_number, line, error, path=args.reject_log)

    steps = parse_steps(_read_lines(args.infile), on_error=on_error)
    if rejected:
        print(f"{rejected} malformed line(s) logged to {args.reject_log}")
    if not steps:
        raise SystemExit("No valid reboot steps found.")

    config = RebootConfig(init_bound=args.init_bound, verify=args.verify)
    try:
        result = solve(steps, config)
    except VerificationError as exc:
        raise SystemExit(f"Verification failed: {exc}") from exc

    print(f"Part 1: {result.part1}")
    print(f"Part 2: {result.part2}")
    if result.verified:
        print("   -> Part 1 verified against voxel grid.")
    if args.describe:
        print(result.regions["part2"].describe())

    if args.summary:
        base = Path("reboot") if args.infile == "-" else Path(args.infile)
        summary_path = base.with_suffix(SUMMARY_SUFFIX)
        payload = result.to_dict()
        payload["rejected_lines"] = rejected
        summary_path.write_text(json.dumps(payload, indent=2))
        print(f"Summary saved to {summary_path}")


__all__ = ["main"]
