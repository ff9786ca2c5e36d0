"""Entry point for termtimer."""

import argparse
import sys
from datetime import timedelta

from termtimer.config import DEFAULT_CONFIG
from termtimer.durations import DurationError, format_duration, parse_duration
from termtimer.engine import CountdownEngine
from termtimer.terminal import TerminalScreen


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termtimer",
        description="Count down to zero, then ring the terminal bell.",
        epilog="duration is written like '1h20m15s' (units: h, m, s, ms, us, ns)",
        add_help=False,
    )
    parser.add_argument(
        "duration",
        nargs="?",
        help=f"Time to count down (default: {format_duration(DEFAULT_CONFIG.default_duration)})",
    )
    parser.add_argument("--help", "-h", action="store_true", help="Show this message and exit")
    parser.add_argument("--version", "-v", action="store_true", help="Show version")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # An explicit usage request exits like a usage error.
    if args.help:
        parser.print_help(sys.stderr)
        sys.exit(2)

    if args.version:
        from termtimer import __version__
        print(f"termtimer {__version__}")
        sys.exit(0)

    total = DEFAULT_CONFIG.default_duration
    if args.duration is not None:
        try:
            total = parse_duration(args.duration)
        except DurationError as exc:
            parser.error(str(exc))
        if total < timedelta(0):
            parser.error(f"duration must not be negative: {args.duration!r}")

    engine = CountdownEngine(TerminalScreen(), DEFAULT_CONFIG)
    engine.run(total)
    sys.exit(0)


if __name__ == "__main__":
    main()
