import argparse
import logging
import sys

from .experiment import run
from .pointset import TourError
from .utils import DEFAULT_OUTPUT_FILE


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="sensor_tour",
        description="Nearest-neighbor travelling-salesman path over points read from a file.",
    )
    parser.add_argument("input", help="file with one comma-separated point per line")
    parser.add_argument("-o", "--output", default=DEFAULT_OUTPUT_FILE, help="where to write the tour")
    parser.add_argument("--start", type=int, default=None, help="input line (0-based) to start from")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random start point")
    parser.add_argument("--plot", action="store_true", help="show the tour projected on the first two axes")
    parser.add_argument("--quiet", action="store_true", help="do not print phase timings")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        tour = run(args.input, args.output, start_index=args.start, seed=args.seed, verbose=not args.quiet)
    except (TourError, ValueError, OSError) as e:
        print(f"sensor_tour: error: {e}", file=sys.stderr)
        return 1

    if args.plot:
        from .plotting import show_tour
        show_tour(tour)
    return 0


if __name__ == "__main__":
    sys.exit(main())
