from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import math
import sys

from .angles import format_hours, jd_to_utc_hours
from .equation import HORIZON_ANGLES, J2000_JD, horizon_angle, times, trace


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _location_parser(prog: str, description: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("--jdn", type=int, default=int(J2000_JD), help="Julian day number (default: 2451545 = 2000-01-01)")
    p.add_argument("--lon", type=float, default=0.0, help="Observer longitude in degrees (positive West)")
    p.add_argument("--lat", type=float, default=51.5, help="Observer latitude in degrees (positive North)")
    p.add_argument("--alt", type=float, default=0.0, help="Observer altitude in meters")
    p.add_argument("--twilight", choices=sorted(HORIZON_ANGLES), default="official", help="Horizon definition")
    return p


def cmd_times(argv: list[str]) -> int:
    p = _location_parser("riseandset times", "Sunrise and sunset (Julian days and UTC clock).")
    args = p.parse_args(argv)

    rise, set_ = times(args.jdn, args.lon, args.lat, args.alt, h0_deg=horizon_angle(args.twilight))

    print(f"JDN = {args.jdn}  lon(W) = {args.lon:g}  lat(N) = {args.lat:g}  alt = {args.alt:g} m  ({args.twilight})")
    print(f"  Sunrise: JD {rise:.6f}  UTC {format_hours(jd_to_utc_hours(rise))}")
    print(f"  Sunset : JD {set_:.6f}  UTC {format_hours(jd_to_utc_hours(set_))}")
    if math.isnan(rise):
        print("  Sun does not rise or set (or altitude is negative).")
    return 0


def cmd_trace(argv: list[str]) -> int:
    p = _location_parser("riseandset trace", "Print every stage of the sunrise equation.")
    args = p.parse_args(argv)

    tr = trace(args.jdn, args.lon, args.lat, args.alt, h0_deg=horizon_angle(args.twilight))

    print(f"Input:")
    print(f"  JDN = {args.jdn}  lon(W) = {args.lon:g}  lat(N) = {args.lat:g}  alt = {args.alt:g} m")
    print(f"  h0  = {tr.h0_deg:g} deg ({args.twilight})")
    print()
    print("Days since J2000:")
    print(f"  offset          = {tr.jd_offset:.6f}")
    print(f"  mean solar noon = {tr.mean_solar_noon:.6f}")
    print()
    print("Solar position (degrees):")
    print(f"  Mean anomaly       (M)      = {tr.mean_anomaly_deg:.6f}")
    print(f"  Equation of center (C)      = {tr.center_deg:.6f}")
    print(f"  Ecliptic longitude (lambda) = {tr.ecliptic_longitude_deg:.6f}")
    print(f"  Declination        (delta)  = {tr.declination_deg:.6f}")
    print(f"  Hour angle         (H0)     = {tr.hour_angle_deg:.6f}")
    print()
    print("Events (JD / UTC):")
    print(f"  Transit: {tr.transit_jd:.6f}  {format_hours(jd_to_utc_hours(tr.transit_jd))}")
    print(f"  Sunrise: {tr.rise_jd:.6f}  {format_hours(jd_to_utc_hours(tr.rise_jd))}")
    print(f"  Sunset : {tr.set_jd:.6f}  {format_hours(jd_to_utc_hours(tr.set_jd))}")
    print(f"  Day length: {format_hours(tr.day_length_days * 24.0, wrap=False)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="riseandset", description="Sunrise equation toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("times", help="Sunrise and sunset for a Julian day number.")
    sub.add_parser("trace", help="Print every intermediate stage of the sunrise equation.")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument("tool", choices=["day-length"], help="Which diagnostic to run")

    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate-skyfield"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "times":
        return cmd_times(rest)

    if args.cmd == "trace":
        return cmd_trace(rest)

    if args.cmd == "diag":
        tool_map = {
            "day-length": "riseandset.diagnostics.day_length",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate-skyfield": "riseandset.diagnostics.ephem.validate_skyfield",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
