"""
ABCU Computer Science Advising Assistant - command line

Loads a course catalog file and prints either the full course list or one
course with its prerequisites.

Usage:
    python app.py list                        # Use the configured catalog
    python app.py --file courses.csv list
    python app.py --file courses.csv show csci300
"""

import argparse
import logging
import sys

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

import config  # noqa: E402
from logic.formatting import format_course_detail, format_course_list, format_load_result  # noqa: E402
from logic.session import AdvisingSession  # noqa: E402

logger = logging.getLogger(__name__)


def print_lines(lines):
    for line in lines:
        print(line)


def run_list(session: AdvisingSession) -> int:
    print_lines(format_course_list(session.list_sorted(), config.settings.COURSE_LIST_HEADING))
    return 0


def run_show(session: AdvisingSession, course_id: str) -> int:
    detail = session.describe(course_id)
    print_lines(format_course_detail(detail))
    return 0 if detail.found else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ABCU Computer Science Advising Assistant"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Course catalog file (CourseID, Title, Prereq1, ...). Defaults to CATALOG_PATH."
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="Print all courses in alphanumeric order")
    show = subparsers.add_parser("show", help="Print one course and its prerequisites")
    show.add_argument("course_id", help="Course ID, e.g. CSCI300 (case-insensitive)")

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=config.settings.LOG_LEVEL.upper())

    path = args.file if args.file is not None else config.settings.CATALOG_PATH
    logger.debug(f"Loading course catalog from {path}")

    session = AdvisingSession()
    result = session.load(path)
    print_lines(format_load_result(path, result))
    if not session.loaded:
        return 1

    print()
    if args.command == "list":
        return run_list(session)
    return run_show(session, args.course_id)


if __name__ == "__main__":
    sys.exit(main())
