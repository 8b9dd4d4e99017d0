"""
Command-line interface.

Reads a concept table (CSV on stdin by default), prints diagnostics to
stderr and the DOT graph to stdout:

    conceptmap concepts.csv > concepts.dot
    cat concepts.csv | python -m conceptmap | dot -Tpdf > concepts.pdf
"""

import argparse
import logging
import sys

from .config import configure_logging
from .exceptions import ConceptMapError
from .input_parser import read_records
from .render import render_dot
from .report import build_report

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="conceptmap",
        description="Build an annotated prerequisite graph (DOT) from a concept table",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="CSV, JSON or Excel file with concept and dependencies columns (default: CSV on stdin)",
    )
    parser.add_argument("-o", "--output", help="write DOT here instead of stdout")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="log progress (-v) or per-concept detail (-vv)",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.input:
            records = read_records(args.input)
        else:
            records = read_records(sys.stdin, name="stdin.csv")
        report = build_report(records)

        errors = report.errors()
        if errors:
            sys.stderr.write(f"Errors in csv file:\n{errors}")

        dot = render_dot(report)
    except (ConceptMapError, ValueError, OSError) as e:
        logger.error("%s", e)
        return 1

    if args.output:
        with open(args.output, "w") as f:
            f.write(dot)
    else:
        sys.stdout.write(dot)
    return 0
