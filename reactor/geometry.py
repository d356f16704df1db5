"""reactor.geometry
==================

Axis-aligned cuboids in 3-D integer space. Every cuboid is half-open on each
axis: ``lo`` is the inclusive lower corner and ``hi`` the exclusive upper
corner, so a cuboid spanning ``x=10..12`` in the puzzle text is stored as
``lo.x == 10`` and ``hi.x == 13``. The half-open convention means volumes of
adjacent fragments add up without double counting boundary cells.

The only non-trivial operation is :meth:`Cuboid.cut`, which removes the volume
of another cuboid and returns the remainder as a set of disjoint fragments. The
region engine in :mod:`reactor.region` is built entirely on top of it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .types import AXES, Point3, Triple


@dataclass(frozen=True)
class Cuboid:
    """Half-open box ``[lo, hi)`` on every axis.

    Parameters
    ----------
    lo:
        Inclusive lower corner.
    hi:
        Exclusive upper corner.

    Raises
    ------
    ValueError
        If ``lo`` exceeds ``hi`` on any axis. Zero extent is allowed and simply
        yields a cuboid with no cells.
    """

    lo: Point3
    hi: Point3

    def __post_init__(self) -> None:
        for axis, (low, high) in enumerate(zip(self.lo, self.hi)):
            if low > high:
                raise ValueError(
                    f"inverted range on axis {AXES[axis]}: {low} > {high}"
                )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_inclusive(cls, lo: Triple, hi_inclusive: Triple) -> "Cuboid":
        """Build a cuboid from inclusive bounds as written in the puzzle text."""

        return cls(Point3(*lo), Point3(*(value + 1 for value in hi_inclusive)))

    # ------------------------------------------------------------------
    # Measurements and predicates
    # ------------------------------------------------------------------
    def volume(self) -> int:
        """Number of unit cells inside the cuboid."""

        return (
            (self.hi.x - self.lo.x)
            * (self.hi.y - self.lo.y)
            * (self.hi.z - self.lo.z)
        )

    def overlaps(self, other: "Cuboid") -> bool:
        """Return ``True`` when the boxes share at least one cell.

        Empty cuboids share no cells with anything. Otherwise this is the
        separating-axis test on the half-open bounds.
        """

        if self.volume() == 0 or other.volume() == 0:
            return False
        return (
            self.lo.x < other.hi.x
            and other.lo.x < self.hi.x
            and self.lo.y < other.hi.y
            and other.lo.y < self.hi.y
            and self.lo.z < other.hi.z
            and other.lo.z < self.hi.z
        )

    def fully_covered_by(self, other: "Cuboid") -> bool:
        """Return ``True`` when every cell of ``self`` also lies in ``other``."""

        return (
            other.lo.x <= self.lo.x
            and self.hi.x <= other.hi.x
            and other.lo.y <= self.lo.y
            and self.hi.y <= other.hi.y
            and other.lo.z <= self.lo.z
            and self.hi.z <= other.hi.z
        )

    def intersection(self, other: "Cuboid") -> Optional["Cuboid"]:
        """Common volume of both cuboids, or ``None`` when they do not overlap."""

        if not self.overlaps(other):
            return None
        lo = Point3(*(max(a, b) for a, b in zip(self.lo, other.lo)))
        hi = Point3(*(min(a, b) for a, b in zip(self.hi, other.hi)))
        return Cuboid(lo, hi)

    def contained_in_bounds(self, bound: int) -> bool:
        """Whether all cells lie within ``[-bound, bound]`` on every axis."""

        return all(low >= -bound for low in self.lo) and all(high <= bound + 1 for high in self.hi)

    # ------------------------------------------------------------------
    # Splitting
    # ------------------------------------------------------------------
    def _cut_planes(self, other: "Cuboid", axis: int) -> List[int]:
        low, high = tuple(self.lo)[axis], tuple(self.hi)[axis]
        other_low, other_high = tuple(other.lo)[axis], tuple(other.hi)[axis]
        planes: List[int] = []
        if low < other_low < high:
            planes.append(other_low)
        if low < other_high < high:
            planes.append(other_high)
        return planes

    def split(self, axis: int, planes: Sequence[int]) -> List["Cuboid"]:
        """Slice the cuboid along ``axis`` at each coordinate in ``planes``.

        ``planes`` must be sorted and lie strictly inside the cuboid's extent
        on that axis; the slabs returned tile the cuboid exactly.
        """

        bounds = [tuple(self.lo)[axis], *planes, tuple(self.hi)[axis]]
        return [
            Cuboid(self.lo.with_axis(axis, start), self.hi.with_axis(axis, stop))
            for start, stop in zip(bounds, bounds[1:])
        ]

    def cut(self, other: "Cuboid") -> List["Cuboid"]:
        """Return ``self`` minus the volume covered by ``other``.

        The result is a list of pairwise-disjoint cuboids whose union is exactly
        ``self \\ other``. Neither operand is modified.

        The cuboid is split along the faces of ``other`` that fall strictly
        inside it, first on x, then y, then z. That yields at most three slabs
        per axis and 27 pieces in total; the single piece lying inside
        ``other`` is discarded.
        """

        if not self.overlaps(other):
            return [self]
        if self.fully_covered_by(other):
            return []

        pieces = [self]
        for axis in range(3):
            planes = self._cut_planes(other, axis)
            if not planes:
                continue
            pieces = [slab for piece in pieces for slab in piece.split(axis, planes)]
        return [piece for piece in pieces if not piece.fully_covered_by(other)]

    def __str__(self) -> str:
        return (
            f"x={self.lo.x}..{self.hi.x},"
            f"y={self.lo.y}..{self.hi.y},"
            f"z={self.lo.z}..{self.hi.z}"
        )


__all__ = ["Cuboid"]
