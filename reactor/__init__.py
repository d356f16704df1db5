"""Public package interface for the reactor reboot engine."""

from .cli import main
from .geometry import Cuboid
from .reboot import RebootConfig, solve
from .region import Region
from .steps import ParseError, Step, parse_steps
from .types import Point3

__all__ = [
    "Cuboid",
    "ParseError",
    "Point3",
    "RebootConfig",
    "Region",
    "Step",
    "main",
    "parse_steps",
    "solve",
]
