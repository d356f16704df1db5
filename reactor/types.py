"""reactor.types
=================

Foundational type aliases and lightweight value types shared by the geometry,
region and parsing modules. Centralising these definitions keeps
inter-module dependencies predictable: every file imports the exact same
aliases and nothing here pulls in the heavier modules.

The module intentionally stays minimal. Importing it never triggers runtime
side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

# ---------------------------------------------------------------------------
# Core representations
# ---------------------------------------------------------------------------
Triple = Tuple[int, int, int]

AXES = ("x", "y", "z")


@dataclass(frozen=True, order=True)
class Point3:
    """Integer point in 3-D space.

    Parameters
    ----------
    x, y, z:
        Coordinates. Python integers are unbounded so no range checks are
        needed here; geometry invariants live on :class:`~reactor.geometry.Cuboid`.

    Notes
    -----
    The class is frozen so cuboid corners can be shared freely between
    fragments produced by a cut without any risk of aliasing bugs.
    """

    x: int
    y: int
    z: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.z

    def with_axis(self, axis: int, value: int) -> "Point3":
        """Return a copy with coordinate ``axis`` (0, 1 or 2) replaced."""

        coords = list(self)
        coords[axis] = value
        return Point3(*coords)

    def __str__(self) -> str:
        return f"[{self.x}/{self.y}/{self.z}]"


__all__ = [
    "AXES",
    "Point3",
    "Triple",
]
