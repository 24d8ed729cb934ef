from __future__ import annotations

import math

import numpy as np


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

DEG_TO_RAD = (2.0 * math.pi) / 360.0

def deg_to_rad(deg):
    """Degrees -> radians, scalar or array."""
    return deg * DEG_TO_RAD

def rad_to_deg(rad):
    """Radians -> degrees, scalar or array."""
    return rad / DEG_TO_RAD

def wrap_deg(x_deg):
    """Wrap degrees to [0,360). Floor-modulo, so negative inputs wrap upward."""
    return np.mod(x_deg, 360.0)


# ------------------------------------------------------------
# Julian date clock helpers
# ------------------------------------------------------------

def jd_to_utc_hours(jd: float) -> float:
    """
    Hour of the UTC day for a Julian date.

    Julian days start at noon, so JD 2451545.0 is 12:00 and
    JD 2451544.5 is 00:00.
    """
    with np.errstate(invalid="ignore"):
        return float(np.mod(jd - 0.5, 1.0) * 24.0)


def format_hours(h: float, *, wrap: bool = True) -> str:
    """
    Fractional hours -> HH:MM:SS. NaN renders as --:--:--.

    With wrap=False the value is a duration and 24h stays 24:00:00.
    """
    if math.isnan(h):
        return "--:--:--"
    total = int(round(h * 3600.0))
    if wrap:
        total %= 86400
    hh, rem = divmod(total, 3600)
    mm, ss = divmod(rem, 60)
    return f"{hh:02d}:{mm:02d}:{ss:02d}"
