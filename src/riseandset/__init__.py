"""riseandset public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .equation import (
    HORIZON_ANGLES,
    J2000_JD,
    horizon_angle,
    times,
    trace,
)
from .grid import day_length_grid, times_grid
from .core.errors import OptionalDependencyError, RiseAndSetError, UnknownHorizonError
from .core.types import SolarTrace

__all__ = [
    "times",
    "trace",
    "times_grid",
    "day_length_grid",
    "horizon_angle",
    "HORIZON_ANGLES",
    "J2000_JD",
    "SolarTrace",
    "RiseAndSetError",
    "UnknownHorizonError",
    "OptionalDependencyError",
]
