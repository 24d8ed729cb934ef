#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from riseandset.equation import H0_DEG, HORIZON_ANGLES, J2000_JD, horizon_angle
from riseandset.grid import day_length_grid

LOGGER = logging.getLogger(__name__)

DEFAULT_LATITUDES = "0,20,40,51.5,60,66,70"


def parse_latitudes(arg: str) -> List[float]:
    """
    Parse a comma separated list of latitudes in degrees.
    Example:
      --lats "0,45,-33.9"
    """
    return [float(x) for x in arg.split(",") if x.strip()]


def day_length_table(
    jdn_start: int,
    days: int,
    latitudes: Sequence[float],
    *,
    longitude: float = 0.0,
    altitude: float = 0.0,
    h0_deg: float = H0_DEG,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Day length in hours for `days` consecutive Julian day numbers.

    Returns (jdns, hours) with hours shaped (days, len(latitudes)).
    Polar day/night cells are NaN.
    """
    jdns = np.arange(jdn_start, jdn_start + days)
    lats = np.asarray(latitudes, dtype=float)
    hours = day_length_grid(jdns[:, None], longitude, lats[None, :], altitude, h0_deg=h0_deg) * 24.0
    return jdns, hours


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot sunrise-equation day length over a run of Julian days.")
    p.add_argument("--jdn-start", type=int, default=int(J2000_JD), help="First Julian day number (default: 2451545)")
    p.add_argument("--days", type=int, default=366)
    p.add_argument("--lats", default=DEFAULT_LATITUDES, help="Comma separated latitudes in degrees")
    p.add_argument("--lon", type=float, default=0.0, help="Longitude in degrees (positive West)")
    p.add_argument("--alt", type=float, default=0.0, help="Observer altitude in meters")
    p.add_argument("--twilight", choices=sorted(HORIZON_ANGLES), default="official", help="Horizon definition")
    p.add_argument("--out-png", default="day_length.png")
    args = p.parse_args(argv)

    from riseandset.diagnostics import need_matplotlib
    plt = need_matplotlib()

    lats = parse_latitudes(args.lats)
    jdns, hours = day_length_table(
        args.jdn_start, args.days, lats,
        longitude=args.lon, altitude=args.alt, h0_deg=horizon_angle(args.twilight),
    )
    LOGGER.info("Computed %d days x %d latitudes", len(jdns), len(lats))

    print(f"{'lat':>7}  {'min h':>7}  {'max h':>7}  {'no rise/set':>11}")
    for j, lat in enumerate(lats):
        col = hours[:, j]
        n_nan = int(np.count_nonzero(np.isnan(col)))
        if n_nan == len(col):
            print(f"{lat:7.2f}  {'--':>7}  {'--':>7}  {n_nan:11d}")
            continue
        print(f"{lat:7.2f}  {np.nanmin(col):7.3f}  {np.nanmax(col):7.3f}  {n_nan:11d}")

    day_index = jdns - jdns[0]
    fig, ax = plt.subplots(figsize=(12, 6))
    for j, lat in enumerate(lats):
        ax.plot(day_index, hours[:, j], label=f"{lat:g} deg")
    ax.set_title(f"Day length from JDN {jdns[0]} ({args.twilight} horizon)")
    ax.set_xlabel("Days since start")
    ax.set_ylabel("Day length (hours)")
    ax.set_ylim(0, 24)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right", fontsize=8)

    plt.tight_layout()
    plt.savefig(args.out_png, dpi=150)
    print(f"Plot saved to {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
