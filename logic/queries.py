"""
Read-only queries over a loaded course catalog.

Placeholders (entries with no title) never show up as courses of their
own: they are left out of the listing and reported as not found on direct
lookup. When another course lists one as a prerequisite it is shown with
an unknown title.
"""

from logic.catalog_builder import normalize_course_id
from models.data_models import CourseDetail, CourseListing, LookupStatus, PrerequisiteEntry


def list_sorted(catalog: dict) -> list:
    """
    List every defined course, sorted by course ID.

    Args:
        catalog: {course_id: Course} from build_catalog()

    Returns:
        list: CourseListing entries in plain string order of the ID
    """
    return [
        CourseListing(course_id=course.course_id, title=course.title)
        for course_id, course in sorted(catalog.items())
        if not course.is_placeholder
    ]


def describe(catalog: dict, raw_query: str) -> CourseDetail:
    """
    Look up one course and resolve its prerequisites to titles.

    The query is trimmed and uppercased before lookup. Prerequisites are
    returned in file order, one level deep, duplicates included.

    Args:
        catalog: {course_id: Course} from build_catalog()
        raw_query: Course ID as typed by the user (any case)

    Returns:
        CourseDetail: status is EMPTY_QUERY for a blank query, NOT_FOUND
                      for an unknown or placeholder ID, FOUND otherwise
    """
    query = normalize_course_id(raw_query)
    if not query:
        return CourseDetail(status=LookupStatus.EMPTY_QUERY)

    course = catalog.get(query)
    if course is None or course.is_placeholder:
        return CourseDetail(status=LookupStatus.NOT_FOUND, course_id=query)

    prerequisites = []
    for prereq_id in course.prerequisites:
        prereq = catalog.get(prereq_id)
        if prereq is not None and not prereq.is_placeholder:
            prerequisites.append(PrerequisiteEntry(course_id=prereq.course_id, title=prereq.title))
        else:
            prerequisites.append(PrerequisiteEntry(course_id=prereq_id, title=None))

    return CourseDetail(
        status=LookupStatus.FOUND,
        course_id=course.course_id,
        title=course.title,
        prerequisites=prerequisites,
    )
