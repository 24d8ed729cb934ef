#!/usr/bin/env python3
"""
Compare sunrise-equation rise/set times against skyfield's almanac search
on a JPL DE ephemeris. Residuals are reported in minutes (equation - skyfield).

Requires:
  pip install "riseandset[ephemeris]"
The ephemeris file is downloaded into --data-dir on first use.
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Tuple

import numpy as np

from riseandset.ephemeris import require_ephemeris
from riseandset.equation import J2000_JD, trace

LOGGER = logging.getLogger(__name__)

MINUTES_PER_DAY = 1440.0


def _events_near(almanac, ts, eph, location, center_jd: float) -> Tuple[float, float]:
    """Skyfield rise and set (JD UT1) in the day window around center_jd."""
    f = almanac.sunrise_sunset(eph, location)
    t0 = ts.ut1_jd(center_jd - 0.5)
    t1 = ts.ut1_jd(center_jd + 0.5)
    t, y = almanac.find_discrete(t0, t1, f)

    rise = set_ = float("nan")
    for ti, yi in zip(t.ut1, y):
        if yi and ti <= center_jd:
            rise = float(ti)
        elif not yi and ti >= center_jd and np.isnan(set_):
            set_ = float(ti)
    return rise, set_


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate sunrise-equation times against skyfield.")
    p.add_argument("--jdn-start", type=int, default=int(J2000_JD))
    p.add_argument("--days", type=int, default=365)
    p.add_argument("--step-days", type=int, default=7)
    p.add_argument("--lat", type=float, default=51.5, help="Latitude in degrees (positive North)")
    p.add_argument("--lon", type=float, default=0.0, help="Longitude in degrees (positive West)")
    p.add_argument("--alt", type=float, default=0.0, help="Observer altitude in meters")
    p.add_argument("--eph", default="de421.bsp")
    p.add_argument("--data-dir", default=".")
    args = p.parse_args(argv)

    require_ephemeris()
    from skyfield import almanac
    from skyfield.api import Loader, wgs84

    loader = Loader(args.data_dir)
    ts = loader.timescale()
    eph = loader(args.eph)
    # skyfield is east-positive
    location = wgs84.latlon(args.lat, -args.lon, elevation_m=args.alt)

    jdns = range(args.jdn_start, args.jdn_start + args.days, args.step_days)
    LOGGER.info("Validating %d days at lat=%.4f lon(W)=%.4f", len(jdns), args.lat, args.lon)

    d_rise: List[float] = []
    d_set: List[float] = []
    skipped = 0
    for jdn in jdns:
        tr = trace(jdn, args.lon, args.lat, args.alt)
        if np.isnan(tr.rise_jd):
            skipped += 1
            continue
        sky_rise, sky_set = _events_near(almanac, ts, eph, location, tr.transit_jd)
        if np.isnan(sky_rise) or np.isnan(sky_set):
            LOGGER.warning("JDN %d: skyfield found no rise/set, skipping", jdn)
            skipped += 1
            continue
        d_rise.append((tr.rise_jd - sky_rise) * MINUTES_PER_DAY)
        d_set.append((tr.set_jd - sky_set) * MINUTES_PER_DAY)

    if not d_rise:
        print("No comparable days (polar day/night throughout).")
        return 0

    r = np.asarray(d_rise)
    s = np.asarray(d_set)
    print(f"Compared {len(r)} days ({skipped} skipped)")
    print("Residuals (minutes, equation - skyfield):")
    print(f"  rise: mean {r.mean():+.3f}  rms {np.sqrt(np.mean(r * r)):.3f}  max|.| {np.abs(r).max():.3f}")
    print(f"  set : mean {s.mean():+.3f}  rms {np.sqrt(np.mean(s * s)):.3f}  max|.| {np.abs(s).max():.3f}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
