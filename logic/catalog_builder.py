"""
Catalog assembly from course catalog files.

File format: one course per line,
    CourseID, Title, Prereq1, Prereq2, ...

Key concepts:
- Course IDs are uppercased once, here, and used as catalog keys
- Titles keep their original case
- A prerequisite that has no line of its own still gets an entry
  (a placeholder with an empty title), so every prerequisite ID resolves
- Bad lines produce warnings; they never abort the load
"""

import logging

from logic.record_parser import parse_line
from models.data_models import Course

logger = logging.getLogger(__name__)


def normalize_course_id(raw: str) -> str:
    """Canonical form of a course ID: trimmed and uppercased."""
    return raw.strip().upper()


def build_catalog(lines) -> tuple:
    """
    Build a course catalog from an iterable of raw text lines.

    Args:
        lines: Iterable of strings (an open file works). Line terminators
               are tolerated.

    Returns:
        tuple: (catalog, warnings) where catalog is {course_id: Course}
               and warnings is a list of messages in line order.

    Example:
        >>> catalog, warnings = build_catalog(["CSCI200,Data Structures,CSCI101"])
        >>> catalog['CSCI200'].prerequisites
        ['CSCI101']
        >>> catalog['CSCI101'].is_placeholder
        True
    """
    catalog = {}
    warnings = []

    for line_num, line in enumerate(lines, start=1):
        # Blank lines are skipped silently
        if not line.strip():
            continue

        fields = parse_line(line.rstrip("\r\n"))
        if len(fields) < 2:
            warnings.append(f"Line {line_num} skipped: fewer than 2 fields")
            continue

        course_id = normalize_course_id(fields[0])
        title = fields[1]

        if not course_id:
            warnings.append(f"Line {line_num} skipped: empty course ID")
            continue
        if not title:
            warnings.append(f"Line {line_num} has empty title for course {course_id}")

        # Reuse a placeholder created by an earlier forward reference
        course = catalog.get(course_id)
        if course is None:
            course = Course(course_id=course_id)
            catalog[course_id] = course
        if title:
            course.title = title

        for raw_prereq in fields[2:]:
            prereq_id = normalize_course_id(raw_prereq)
            if not prereq_id:
                continue
            course.prerequisites.append(prereq_id)
            if prereq_id not in catalog:
                catalog[prereq_id] = Course(course_id=prereq_id)

    return catalog, warnings


def load_catalog_file(path: str) -> tuple:
    """
    Load a course catalog from a file on disk.

    Args:
        path: Path to the catalog file

    Returns:
        tuple: (catalog, warnings), see build_catalog()

    Raises:
        OSError: If the file cannot be opened
    """
    # Undecodable bytes become U+FFFD so any file that opens also loads
    with open(path, "r", encoding="utf-8-sig", errors="replace") as f:
        catalog, warnings = build_catalog(f)

    for warning in warnings:
        logger.warning(f"{path}: {warning}")

    defined = sum(1 for course in catalog.values() if not course.is_placeholder)
    logger.info(
        f"Loaded {defined} courses from {path} "
        f"({len(catalog) - defined} placeholders, {len(warnings)} warnings)"
    )

    return catalog, warnings
