"""reactor.reboot
================

Folds a parsed instruction sequence into :class:`~reactor.region.Region`
values and produces the two puzzle answers.

Instructions are always applied strictly in input order: each one must observe
the region left behind by the previous ones.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np

from .constants import INIT_AREA_BOUND
from .region import Region
from .steps import Step


class VerificationError(RuntimeError):
    """Raised when the region engine disagrees with the dense voxel count."""


@dataclass
class RebootConfig:
    """Runtime options for :func:`solve`.

    Parameters
    ----------
    init_bound:
        Half-width of the initialization area used for part 1. Only
        instructions whose cuboid lies entirely within
        ``[-init_bound, init_bound]`` on every axis take part.
    verify:
        Recount part 1 with a dense numpy grid and compare. Memory grows with
        ``(2 * init_bound + 1) ** 3`` so keep the bound small when enabled.
    """

    init_bound: int = INIT_AREA_BOUND
    verify: bool = False

    def __post_init__(self) -> None:
        if self.init_bound < 0:
            raise ValueError(f"init_bound must be non-negative, got {self.init_bound}")


@dataclass
class RebootResult:
    """Answers plus a handful of statistics gathered while solving."""

    part1: int
    part2: int
    steps_total: int
    steps_init_area: int
    fragments_part1: int
    fragments_part2: int
    elapsed: float
    verified: Optional[bool] = None
    regions: Dict[str, Region] = field(default_factory=dict, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "part1": self.part1,
            "part2": self.part2,
            "steps_total": self.steps_total,
            "steps_init_area": self.steps_init_area,
            "fragments_part1": self.fragments_part1,
            "fragments_part2": self.fragments_part2,
            "elapsed": self.elapsed,
            "verified": self.verified,
        }


def reboot(steps: Iterable[Step], region: Optional[Region] = None) -> Region:
    """Apply ``steps`` in order to ``region`` (a fresh one by default)."""

    region = Region() if region is None else region
    for step in steps:
        region.apply(step.cuboid, step.turn_on)
    return region


def initialization_steps(steps: Iterable[Step], bound: int = INIT_AREA_BOUND) -> List[Step]:
    """Keep only the steps lying entirely inside the initialization area."""

    return [step for step in steps if step.in_initialization_area(bound)]


def count_voxels(steps: Iterable[Step], bound: int = INIT_AREA_BOUND) -> int:
    """Reference count of active cells using a dense boolean grid.

    Cells outside ``[-bound, bound]`` are clipped away, so the result only
    matches :func:`reboot` for steps that lie inside the area.
    """

    size = 2 * bound + 1
    grid = np.zeros((size, size, size), dtype=bool)
    for step in steps:
        lo = [max(value + bound, 0) for value in step.cuboid.lo]
        hi = [min(value + bound, size) for value in step.cuboid.hi]
        if any(start >= stop for start, stop in zip(lo, hi)):
            continue
        grid[lo[0]:hi[0], lo[1]:hi[1], lo[2]:hi[2]] = step.turn_on
    return int(np.count_nonzero(grid))


def solve(steps: Sequence[Step], config: Optional[RebootConfig] = None) -> RebootResult:
    """Compute both answers for ``steps``.

    Raises
    ------
    VerificationError
        When ``config.verify`` is set and the voxel recount disagrees.
    """

    config = config or RebootConfig()
    start = perf_counter()
    init_steps = initialization_steps(steps, config.init_bound)
    region1 = reboot(init_steps)
    region2 = reboot(steps)
    part1 = region1.active_cell_count()

    verified: Optional[bool] = None
    if config.verify:
        expected = count_voxels(init_steps, config.init_bound)
        if expected != part1:
            raise VerificationError(
                f"part 1 mismatch: region engine counted {part1}, voxel grid counted {expected}"
            )
        verified = True

    return RebootResult(
        part1=part1,
        part2=region2.active_cell_count(),
        steps_total=len(steps),
        steps_init_area=len(init_steps),
        fragments_part1=len(region1),
        fragments_part2=len(region2),
        elapsed=perf_counter() - start,
        verified=verified,
        regions={"part1": region1, "part2": region2},
    )


__all__ = [
    "RebootConfig",
    "RebootResult",
    "VerificationError",
    "count_voxels",
    "initialization_steps",
    "reboot",
    "solve",
]
