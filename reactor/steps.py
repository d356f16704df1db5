"""reactor.steps
================

Parsing of reboot instructions such as ``on x=10..12,y=10..12,z=10..12``.

Ranges in the text are inclusive on both ends; :class:`~reactor.geometry.Cuboid`
is half-open, so the upper bounds are bumped by one during parsing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from .constants import INIT_AREA_BOUND
from .geometry import Cuboid

CUBOID_PATTERN = re.compile(
    r"^x=(?P<x1>-?[0-9]+)\.\.(?P<x2>-?[0-9]+),"
    r"y=(?P<y1>-?[0-9]+)\.\.(?P<y2>-?[0-9]+),"
    r"z=(?P<z1>-?[0-9]+)\.\.(?P<z2>-?[0-9]+)$"
)
COMMANDS = {"on": True, "off": False}


class ParseError(ValueError):
    """Raised when an instruction line cannot be turned into a :class:`Step`."""


@dataclass(frozen=True)
class Step:
    """Single reboot instruction."""

    turn_on: bool
    cuboid: Cuboid

    def in_initialization_area(self, bound: int = INIT_AREA_BOUND) -> bool:
        return self.cuboid.contained_in_bounds(bound)

    def __str__(self) -> str:
        lo, hi = self.cuboid.lo, self.cuboid.hi
        command = "on" if self.turn_on else "off"
        return (
            f"{command} x={lo.x}..{hi.x - 1},"
            f"y={lo.y}..{hi.y - 1},"
            f"z={lo.z}..{hi.z - 1}"
        )


def parse_cuboid(text: str) -> Cuboid:
    """Parse ``x=a..b,y=c..d,z=e..f`` into a half-open cuboid.

    Raises
    ------
    ParseError
        If the text does not match the expected format or a range is inverted.
    """

    match = CUBOID_PATTERN.match(text.strip())
    if match is None:
        raise ParseError(
            f"invalid cuboid format {text!r}, expected 'x=10..12,y=10..12,z=10..12'"
        )
    lo = tuple(int(match.group(name)) for name in ("x1", "y1", "z1"))
    hi = tuple(int(match.group(name)) for name in ("x2", "y2", "z2"))
    try:
        return Cuboid.from_inclusive(lo, hi)
    except ValueError as exc:
        raise ParseError(f"invalid range in {text!r}: {exc}") from exc


def parse_step(line: str) -> Step:
    """Parse a full instruction line (``on ...`` or ``off ...``)."""

    command, sep, rest = line.strip().partition(" ")
    if not sep:
        raise ParseError(f"invalid step format {line!r}")
    if command not in COMMANDS:
        raise ParseError(f"invalid step format {line!r}: unknown command {command!r}")
    return Step(COMMANDS[command], parse_cuboid(rest))


def parse_steps(
    lines: Iterable[str],
    on_error: Optional[Callable[[int, str, ParseError], None]] = None,
) -> List[Step]:
    """Parse every non-blank line, skipping the malformed ones.

    Parameters
    ----------
    lines:
        Raw input lines, e.g. an open file.
    on_error:
        Optional callback invoked as ``on_error(line_number, line, error)`` for
        every skipped line. Line numbers start at 1.
    """

    steps: List[Step] = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            steps.append(parse_step(line))
        except ParseError as exc:
            if on_error is not None:
                on_error(line_number, line.rstrip("\n"), exc)
    return steps


__all__ = ["ParseError", "Step", "parse_cuboid", "parse_step", "parse_steps"]
