"""
CLI entry point for the ROSBag Checker.

Usage:
    python -m rosbag_checker <bag> --topic-list topics.yaml [options]
    python -m rosbag_checker <bag> --topics '/camera/.*' [options]
"""

import argparse
import json
import os
import sys

from .benchmark import format_benchmark, time_check_bag
from .constants import DEFAULT_MAX_HZ, DEFAULT_MIN_HZ, DEFAULT_NUM_RUNS
from .errors import CheckerError
from .models import CheckConfig, RateRange, SinglePattern, StructuredList
from .pipeline import run_check
from .report_generator import generate_json_report, render_summary, render_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rosbag_checker",
        description="Check the contents of a rosbag against expected topics "
                    "and frequency requirements",
    )
    parser.add_argument(
        "bag_file",
        help="Path to rosbag: a rosbag2 directory, or a .db3/.mcap file inside one "
             "(its directory must hold metadata.yaml), or a ROS1 .bag",
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--topic-list", "-l",
        help="YAML file listing topics and optional hz_range requirements",
    )
    source.add_argument(
        "--topics", "-t",
        help="Topic name or regular expression to check (alternative to --topic-list)",
    )

    parser.add_argument(
        "--no-check-frequency",
        dest="check_frequency",
        action="store_false",
        help="Only check topic presence, not frequency requirements",
    )
    parser.add_argument(
        "--default-frequency-requirements", "-f",
        nargs=2,
        type=float,
        metavar=("MIN_HZ", "MAX_HZ"),
        default=[DEFAULT_MIN_HZ, DEFAULT_MAX_HZ],
        help="Default frequency range for topics without hz_range "
             "(default: -1 to maximum float)",
    )
    parser.add_argument(
        "--time-check-bag",
        action="store_true",
        help="Run a speed test of the check instead of a single check",
    )
    parser.add_argument(
        "--num-runs", "-n",
        type=int,
        default=DEFAULT_NUM_RUNS,
        help=f"Number of runs for the speed test (default: {DEFAULT_NUM_RUNS})",
    )
    parser.add_argument(
        "--json",
        dest="json_path",
        default=None,
        help="Also write the report as JSON to this path",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        help="Disable coloured output",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 unless every topic passes",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print detailed progress",
    )
    return parser


def _make_config(args, parser: argparse.ArgumentParser) -> CheckConfig:
    try:
        default_range = RateRange(*args.default_frequency_requirements)
    except ValueError as e:
        parser.error(f"--default-frequency-requirements: {e}")

    if args.topic_list is not None:
        topic_source = StructuredList(args.topic_list)
    else:
        topic_source = SinglePattern(args.topics)

    return CheckConfig(
        bag_file=args.bag_file,
        topic_source=topic_source,
        check_frequency=args.check_frequency,
        default_range=default_range,
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _make_config(args, parser)

    if not os.path.exists(args.bag_file):
        print(f"Error: Bag not found: {args.bag_file}", file=sys.stderr)
        return 1

    try:
        if args.time_check_bag:
            result = time_check_bag(config, args.num_runs)
            report = result.report
        else:
            result = None
            report = run_check(config, verbose=args.verbose)
    except CheckerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Results: \n{render_text(report, color=args.color)}", end="")
    print(render_summary(report))
    if result is not None:
        print(format_benchmark(result))

    if args.json_path:
        data = generate_json_report(report)
        if result is not None:
            data["benchmark"] = result.to_dict()
        with open(args.json_path, "w") as f:
            json.dump(data, f, indent=2)
        if args.verbose:
            print(f"  JSON report: {args.json_path}")

    if args.strict and not report.healthy:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
