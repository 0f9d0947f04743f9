"""
Sun and Moon horizon positions: cosmic_core (skyfield, JPL kernel) vs pyswisseph.

The skyfield source is topocentric and Swiss Ephemeris geocentric here, so
the Moon may differ by up to one degree of parallax.
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

BODIES = [
    (swe.SUN, "Sun", "position_of_sun"),
    (swe.MOON, "Moon", "position_of_moon"),
]


def swe_body_horizon(jd, lat, lon, body):
    xx, _ = swe.calc_ut(jd, body)
    return swe_horizon(jd, lat, lon, swe.ECL2HOR, (xx[0], xx[1], xx[2]))


def compare_body(source, method, instant, jd, lat, lon, body, tolerance):
    result = HorizonResult()

    try:
        result.az_swe, result.alt_swe = swe_body_horizon(jd, lat, lon, body)
    except Exception as e:
        result.error_swe = str(e)

    try:
        direction = cosmic.to_north_referenced(getattr(source, method)(instant, lat, lon))
        result.az_py, result.alt_py = direction.azimuth_deg, direction.altitude_deg
    except Exception as e:
        result.error_py = str(e)

    if not result.error_swe and not result.error_py:
        result.calculate_diffs()
        if body == swe.MOON:
            # Moon is judged on great-circle separation
            separation = cosmic.angle_between_points(
                result.az_py, result.alt_py, result.az_swe, result.alt_swe
            )
            result.diff_az = result.diff_alt = separation
    result.check_passed(tolerance)
    return result


def run_source(label, source, tolerances, verbose=False) -> TestStatistics:
    print_header(f"SUN/MOON HORIZON POSITIONS ({label} vs Swiss Ephemeris)")
    stats = TestStatistics()

    for subject, year, month, day, hour, lat, lon in ALL_SUBJECTS:
        instant = subject_datetime(year, month, day, hour)
        jd = swe.julday(year, month, day, hour)

        for body, name, method in BODIES:
            result = compare_body(
                source, method, instant, jd, lat, lon, body, tolerances[name]
            )
            error = bool(result.error_swe or result.error_py)
            stats.add_result(result.passed, result.max_diff, error=error)

            if verbose or not result.passed:
                print(
                    f"[{subject:<20}] {name:<5} "
                    f"AZ {format_coord(result.az_py)} ({format_coord(result.az_swe)}) "
                    f"ALT {format_coord(result.alt_py)} ({format_coord(result.alt_swe)}) "
                    f"diff {format_diff(result.max_diff)} {format_status(result.passed)}"
                )
                if error:
                    print(f"    errors: swe={result.error_swe} py={result.error_py}")

    stats.print_summary(f"{label.upper()} SUMMARY")
    return stats


def run_comparisons(verbose: bool = False) -> TestStatistics:
    return run_source(
        "Skyfield",
        cosmic.SkyfieldEphemeris(),
        {"Sun": Tolerances.SUN, "Moon": Tolerances.MOON},
        verbose,
    )


def main():
    args = parse_args(sys.argv[1:])
    if args["help"]:
        print("Usage: python compare_sun_moon.py [--verbose]")
        sys.exit(0)
    stats = run_comparisons(verbose=args["verbose"])
    sys.exit(0 if stats.failed == 0 and stats.errors == 0 else 1)


if __name__ == "__main__":
    main()
