from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class SolarTrace:
    """Every intermediate value of one sunrise-equation evaluation."""
    jd_offset: float             # days since J2000, incl. the 0.0008 correction
    mean_solar_noon: float       # days since J2000, longitude adjusted
    mean_anomaly_deg: float      # [0,360)
    center_deg: float
    ecliptic_longitude_deg: float  # [0,360)
    declination_deg: float
    hour_angle_deg: float
    transit_jd: float
    rise_jd: float
    set_jd: float
    h0_deg: float                # horizon angle used for rise/set

    @property
    def day_length_days(self) -> float:
        return self.set_jd - self.rise_jd
