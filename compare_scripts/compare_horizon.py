"""
Horizon position comparison: cosmic_core.locate vs pyswisseph azalt.

Feeds identical RA/Dec to both sides, so the only expected difference is
mean (cosmic_core) vs apparent (Swiss Ephemeris) sidereal time.
"""

import sys

import swisseph as swe

import cosmic_core as cosmic
from comparison_utils import (
    ALL_SUBJECTS,
    HorizonResult,
    TestStatistics,
    Tolerances,
    format_coord,
    format_diff,
    format_status,
    parse_args,
    print_header,
    subject_datetime,
    swe_horizon,
)

# Targets: (Name, RA hours, Dec degrees)
TARGETS = [
    ("Vega", 18.6156, 38.7837),
    ("Sirius", 6.7525, -16.7161),
    ("Polaris", 2.5303, 89.2641),
    ("Canopus", 6.3992, -52.6957),
    ("Sgr A*", cosmic.SGR_A_RA_HOURS, cosmic.SGR_A_DEC_DEG),
    ("Gal. N. Pole", cosmic.GALACTIC_NORTH_POLE_RA_HOURS, cosmic.GALACTIC_NORTH_POLE_DEC_DEG),
]

# Every fixed-target catalog level as well
TARGETS += [
    (level.name, level.target.ra_hours, level.target.dec_deg)
    for level in cosmic.COSMIC_LEVELS
    if level.target is not None
]


def compare_target(instant, jd, lat, lon, target) -> HorizonResult:
    _, ra_hours, dec_deg = target
    result = HorizonResult()

    try:
        result.az_swe, result.alt_swe = swe_horizon(
            jd, lat, lon, swe.EQU2HOR, (ra_hours * 15.0, dec_deg, 1.0)
        )
    except Exception as e:
        result.error_swe = str(e)

    try:
        alt, az = cosmic.calc_star_location(lat, lon, ra_hours, dec_deg, instant)
        result.az_py, result.alt_py = az, alt
    except Exception as e:
        result.error_py = str(e)

    if not result.error_swe and not result.error_py:
        result.calculate_diffs()
    result.check_passed(Tolerances.HORIZON)
    return result


def run_comparisons(verbose: bool = False) -> TestStatistics:
    print_header("FIXED TARGET HORIZON POSITIONS (cosmic_core vs Swiss Ephemeris)")
    stats = TestStatistics()

    for subject, year, month, day, hour, lat, lon in ALL_SUBJECTS:
        instant = subject_datetime(year, month, day, hour)
        jd = swe.julday(year, month, day, hour)

        for target in TARGETS:
            result = compare_target(instant, jd, lat, lon, target)
            error = bool(result.error_swe or result.error_py)
            stats.add_result(result.passed, result.max_diff, error=error)

            if verbose or not result.passed:
                print(
                    f"[{subject:<20}] {target[0]:<32} "
                    f"AZ {format_coord(result.az_py)} ALT {format_coord(result.alt_py)} "
                    f"dAZ {format_diff(result.diff_az)} dALT {format_diff(result.diff_alt)} "
                    f"{format_status(result.passed)}"
                )
                if error:
                    print(f"    errors: swe={result.error_swe} py={result.error_py}")

    stats.print_summary("HORIZON SUMMARY")
    return stats


def main():
    args = parse_args(sys.argv[1:])
    stats = run_comparisons(verbose=args["verbose"])
    sys.exit(0 if stats.failed == 0 and stats.errors == 0 else 1)


if __name__ == "__main__":
    main()
