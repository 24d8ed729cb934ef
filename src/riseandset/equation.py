"""
riseandset.equation
-------------------
Sunrise and sunset from the closed-form sunrise equation.

Based on https://en.wikipedia.org/wiki/Sunrise_equation

The pipeline is a straight chain of pure stages:

    JDN -> offset from J2000 -> mean solar noon -> mean anomaly M
        -> equation of center C -> ecliptic longitude lambda
        -> declination delta -> hour angle H -> transit -> rise / set

Every stage accepts Python scalars or numpy arrays. Units are carried in the
names: ``_deg`` degrees, ``_rad`` radians, ``_m`` meters, ``_jd`` Julian days.
Invalid numeric operations (sqrt of a negative altitude, acos outside
[-1, 1] in polar day/night) yield NaN; they are never clamped or raised.
"""

from __future__ import annotations

from typing import Dict, Tuple

import numpy as np

from .angles import deg_to_rad, rad_to_deg, wrap_deg
from .core.errors import UnknownHorizonError
from .core.types import SolarTrace


J2000_JD = 2451545.0        # 2000-01-01 12:00
JD_CORRECTION = 0.0008      # fractional-day correction (leap seconds / TT-UT)

M0_DEG = 357.5291           # mean anomaly at J2000
M1_DEG_PER_DAY = 0.98560028

CENTER_COEFFS_DEG = (1.9148, 0.02, 0.0003)
PERIHELION_DEG = 102.9372   # argument of perihelion

OBLIQUITY_DEG = 23.43713

TRANSIT_M_COEFF = 0.0053
TRANSIT_LAMBDA_COEFF = 0.0069

ALTITUDE_DIP_COEFF = -2.076  # deg * sqrt(m) / 60

H0_DEG = -0.83              # refraction + solar disc

HORIZON_ANGLES: Dict[str, float] = {
    "official": H0_DEG,
    "civil": -6.0,
    "nautical": -12.0,
    "astronomical": -18.0,
}


def horizon_angle(name: str) -> float:
    """Resolve a named horizon (twilight) definition to h0 in degrees."""
    try:
        return HORIZON_ANGLES[name]
    except KeyError:
        raise UnknownHorizonError(
            f"Unknown horizon '{name}'. Available: {sorted(HORIZON_ANGLES)}"
        ) from None


# ============================================================
# Stages
# ============================================================

def julian_offset(date):
    """Days since J2000 for an integer Julian day, plus the fixed correction."""
    return (date - J2000_JD) + JD_CORRECTION


def mean_solar_noon(jd_offset, longitude_deg):
    """Mean solar noon (days since J2000). Longitude is west-positive."""
    return (longitude_deg / 360.0) + jd_offset


def mean_solar_anomaly_deg(noon):
    return wrap_deg(M0_DEG + M1_DEG_PER_DAY * noon)


def equation_of_center_deg(mean_anomaly_deg):
    """Equation of center C (degrees) from the mean anomaly (degrees)."""
    M_rad = deg_to_rad(mean_anomaly_deg)
    c1, c2, c3 = CENTER_COEFFS_DEG
    return (
        c1 * np.sin(M_rad)
        + c2 * np.sin(2.0 * M_rad)
        + c3 * np.sin(3.0 * M_rad)
    )


def ecliptic_longitude_deg(mean_anomaly_deg):
    """Sun's ecliptic longitude lambda in [0,360)."""
    return wrap_deg(
        mean_anomaly_deg
        + equation_of_center_deg(mean_anomaly_deg)
        + 180.0
        + PERIHELION_DEG
    )


def altitude_correction_deg(altitude_m):
    """
    Horizon dip for an elevated observer (degrees, <= 0).

    Negative altitudes have no real square root and give NaN.
    """
    return ALTITUDE_DIP_COEFF * (np.sqrt(altitude_m) / 60.0)


def solar_declination_deg(ecliptic_longitude_deg):
    # sin delta = sin lambda * sin eps
    return rad_to_deg(np.arcsin(
        np.sin(deg_to_rad(ecliptic_longitude_deg)) * np.sin(deg_to_rad(OBLIQUITY_DEG))
    ))


def hour_angle_deg(altitude_m, latitude_deg, ecliptic_longitude_deg, h0_deg=H0_DEG):
    """
    Hour angle H0 (degrees) at which the sun's centre reaches h0 + dip.

    cos H0 = (sin h - sin phi sin delta) / (cos phi cos delta)

    When |cos H0| > 1 the sun never rises or never sets that day and the
    result is NaN.
    """
    h_rad = deg_to_rad(h0_deg + altitude_correction_deg(altitude_m))
    lat_rad = deg_to_rad(latitude_deg)
    delta_rad = deg_to_rad(solar_declination_deg(ecliptic_longitude_deg))

    cos_H0 = (np.sin(h_rad) - np.sin(lat_rad) * np.sin(delta_rad)) / (
        np.cos(lat_rad) * np.cos(delta_rad)
    )
    return rad_to_deg(np.arccos(cos_H0))


def solar_transit(noon, mean_anomaly_deg, ecliptic_longitude_deg):
    """Solar transit (days since J2000): mean noon plus the equation of time."""
    return (
        noon
        + (TRANSIT_M_COEFF * np.sin(deg_to_rad(mean_anomaly_deg)))
        - (TRANSIT_LAMBDA_COEFF * np.sin(deg_to_rad(2.0 * ecliptic_longitude_deg)))
    )


def rise_and_set(noon, mean_anomaly_deg, ecliptic_longitude_deg, hour_angle_deg):
    """Sunrise and sunset as Julian days."""
    transit = solar_transit(noon, mean_anomaly_deg, ecliptic_longitude_deg)
    h_days = hour_angle_deg / 360.0
    return J2000_JD + (transit - h_days), J2000_JD + (transit + h_days)


# ============================================================
# Public API
# ============================================================

def times(
    date: int,
    longitude: float,
    latitude: float,
    altitude: float,
    *,
    h0_deg: float = H0_DEG,
) -> Tuple[float, float]:
    """
    Sunrise and sunset for a Julian day number, as Julian days.

    Longitude and latitude are in degrees north and west (longitude is
    west-positive: larger values move solar noon later in UT).
    Altitude is in meters above the horizon reference, and must be >= 0
    for a real result.

    Never raises for degenerate inputs: negative altitude, polar day or
    polar night, and non-finite coordinates all give (nan, nan).
    """
    with np.errstate(invalid="ignore"):
        noon = mean_solar_noon(julian_offset(date), longitude)
        M = mean_solar_anomaly_deg(noon)
        lam = ecliptic_longitude_deg(M)
        H = hour_angle_deg(altitude, latitude, lam, h0_deg)
        rise, set_ = rise_and_set(noon, M, lam, H)
    return float(rise), float(set_)


def trace(
    date: int,
    longitude: float,
    latitude: float,
    altitude: float,
    *,
    h0_deg: float = H0_DEG,
) -> SolarTrace:
    """Same evaluation as :func:`times`, keeping every intermediate value."""
    with np.errstate(invalid="ignore"):
        offset = julian_offset(date)
        noon = mean_solar_noon(offset, longitude)
        M = mean_solar_anomaly_deg(noon)
        C = equation_of_center_deg(M)
        lam = ecliptic_longitude_deg(M)
        delta = solar_declination_deg(lam)
        H = hour_angle_deg(altitude, latitude, lam, h0_deg)
        transit = solar_transit(noon, M, lam)
        rise, set_ = rise_and_set(noon, M, lam, H)

    return SolarTrace(
        jd_offset=float(offset),
        mean_solar_noon=float(noon),
        mean_anomaly_deg=float(M),
        center_deg=float(C),
        ecliptic_longitude_deg=float(lam),
        declination_deg=float(delta),
        hour_angle_deg=float(H),
        transit_jd=float(J2000_JD + transit),
        rise_jd=float(rise),
        set_jd=float(set_),
        h0_deg=float(h0_deg),
    )
