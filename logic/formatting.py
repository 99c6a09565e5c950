"""Text rendering of load results and query results for the console."""

from models.data_models import CourseDetail, LoadResult, LookupStatus

UNKNOWN_TITLE = "Title unknown"


def format_course_list(listings: list, heading: str) -> list:
    """Heading, a rule under it, then one 'ID, Title' line per course."""
    lines = [heading, "-" * len(heading)]
    for listing in listings:
        lines.append(f"{listing.course_id}, {listing.title}")
    return lines


def format_course_detail(detail: CourseDetail) -> list:
    """
    Render a describe() result.

    Args:
        detail: Result from describe()

    Returns:
        list: Output lines
    """
    if detail.status is LookupStatus.EMPTY_QUERY:
        return ["Error: empty course ID."]
    if detail.status is LookupStatus.NOT_FOUND:
        return [f"Course not found: {detail.course_id}"]

    lines = [f"{detail.course_id}: {detail.title}"]
    if not detail.prerequisites:
        lines.append("Prerequisites: None")
        return lines

    lines.append("Prerequisites:")
    for prereq in detail.prerequisites:
        title = prereq.title if prereq.title is not None else UNKNOWN_TITLE
        lines.append(f"  - {prereq.course_id}: {title}")
    return lines


def format_load_result(path: str, result: LoadResult) -> list:
    if not result.ok:
        return [f"Error: Could not open file: {path}"]

    lines = [f"Data loaded successfully from {path}"]
    if result.warnings:
        lines.append("Note: Some lines were skipped or had issues:")
        lines.extend(f"  - {warning}" for warning in result.warnings)
    return lines
