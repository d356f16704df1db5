"""reactor.region
================

A :class:`Region` is the set of active unit cells, stored as a list of
pairwise-disjoint cuboids. Disjointness is what lets
:meth:`Region.active_cell_count` be a plain sum of volumes.

Every mutation goes through :meth:`Region.apply`, which first cuts the incoming
cuboid out of every member and only then (for ``on`` instructions) appends it.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

from .geometry import Cuboid

logger = logging.getLogger(__name__)


class Region:
    """Disjoint union of :class:`~reactor.geometry.Cuboid` fragments."""

    def __init__(self, cuboids: Iterable[Cuboid] = ()) -> None:
        self.cuboids: List[Cuboid] = []
        for cuboid in cuboids:
            self.turn_on(cuboid)

    def apply(self, cuboid: Cuboid, turn_on: bool) -> None:
        """Switch every cell of ``cuboid`` on or off.

        Parameters
        ----------
        cuboid:
            Box affected by the instruction.
        turn_on:
            ``True`` for an ``on`` instruction, ``False`` for ``off``.

        Notes
        -----
        The cut runs for both kinds of instruction. For ``on`` it removes the
        volume the new cuboid is about to re-cover, so later overlapping ``on``
        instructions are never double counted.
        """

        self.cuboids = [fragment for member in self.cuboids for fragment in member.cut(cuboid)]
        if turn_on:
            self.cuboids.append(cuboid)
        logger.debug(
            "%s %s -> %d fragments", "on" if turn_on else "off", cuboid, len(self.cuboids)
        )

    def turn_on(self, cuboid: Cuboid) -> None:
        self.apply(cuboid, True)

    def turn_off(self, cuboid: Cuboid) -> None:
        self.apply(cuboid, False)

    def active_cell_count(self) -> int:
        """Total number of active cells."""

        return sum(cuboid.volume() for cuboid in self.cuboids)

    def describe(self) -> str:
        """Multi-line dump: the total followed by each fragment and its cells."""

        lines = [f"total cells: {self.active_cell_count()}"]
        for index, cuboid in enumerate(self.cuboids):
            lines.append(f"{index}: {cuboid} [cells: {cuboid.volume()}]")
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self.cuboids)

    def __iter__(self) -> Iterator[Cuboid]:
        return iter(self.cuboids)

    def __repr__(self) -> str:
        return f"Region(fragments={len(self.cuboids)}, cells={self.active_cell_count()})"


__all__ = ["Region"]
