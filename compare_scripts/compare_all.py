"""
Run every cosmic_core vs pyswisseph comparison.

Usage:
    python compare_all.py [--verbose]
"""

import sys

import compare_horizon
import compare_sun_moon
from comparison_utils import TestStatistics, parse_args, print_header


def main():
    args = parse_args(sys.argv[1:])
    if args["help"]:
        print(__doc__)
        sys.exit(0)

    total = TestStatistics()
    total.merge(compare_horizon.run_comparisons(verbose=args["verbose"]))
    print()
    total.merge(compare_sun_moon.run_comparisons(verbose=args["verbose"]))

    print()
    print_header("OVERALL")
    total.print_summary("ALL COMPARISONS")
    sys.exit(0 if total.failed == 0 and total.errors == 0 else 1)


if __name__ == "__main__":
    main()
