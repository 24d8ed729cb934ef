"""
riseandset.grid
---------------
Vectorized sunrise equation over numpy arrays.

All inputs broadcast against each other, so a column of dates against a row
of latitudes gives a full (date x latitude) table in one call.
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from .equation import (
    H0_DEG,
    ecliptic_longitude_deg,
    hour_angle_deg,
    julian_offset,
    mean_solar_anomaly_deg,
    mean_solar_noon,
    rise_and_set,
)

LOGGER = logging.getLogger(__name__)


def times_grid(
    dates,
    longitude,
    latitude,
    altitude,
    *,
    h0_deg: float = H0_DEG,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Elementwise :func:`riseandset.equation.times` over broadcast arrays.

    Returns (rise_jd, set_jd) as float64 arrays of the broadcast shape.
    Cells with no sunrise/sunset (polar day/night, negative altitude) are NaN.
    """
    dates = np.asarray(dates, dtype=np.float64)
    longitude = np.asarray(longitude, dtype=np.float64)
    latitude = np.asarray(latitude, dtype=np.float64)
    altitude = np.asarray(altitude, dtype=np.float64)

    with np.errstate(invalid="ignore"):
        noon = mean_solar_noon(julian_offset(dates), longitude)
        M = mean_solar_anomaly_deg(noon)
        lam = ecliptic_longitude_deg(M)
        H = hour_angle_deg(altitude, latitude, lam, h0_deg)
        rise, set_ = rise_and_set(noon, M, lam, H)

    shape = np.broadcast_shapes(dates.shape, longitude.shape, latitude.shape, altitude.shape)
    rise = np.broadcast_to(rise, shape).astype(np.float64)
    set_ = np.broadcast_to(set_, shape).astype(np.float64)

    if LOGGER.isEnabledFor(logging.DEBUG):
        n_nan = int(np.count_nonzero(np.isnan(rise)))
        LOGGER.debug("times_grid: %d of %d cells have no rise/set", n_nan, rise.size)

    return rise, set_


def day_length_grid(
    dates,
    longitude,
    latitude,
    altitude,
    *,
    h0_deg: float = H0_DEG,
) -> np.ndarray:
    """Day length (set - rise) in days, NaN where the sun does not rise or set."""
    rise, set_ = times_grid(dates, longitude, latitude, altitude, h0_deg=h0_deg)
    return set_ - rise
