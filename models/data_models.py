from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass
class Course:
    course_id: str
    title: str = ""
    prerequisites: List[str] = field(default_factory=list)

    @property
    def is_placeholder(self) -> bool:
        """True when the course was only ever referenced, never given a title."""
        return not self.title


@dataclass(frozen=True)
class CourseListing:
    course_id: str
    title: str


@dataclass(frozen=True)
class PrerequisiteEntry:
    course_id: str
    title: Optional[str]  # None means the title is unknown


class LookupStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    EMPTY_QUERY = "empty_query"


@dataclass
class CourseDetail:
    status: LookupStatus
    course_id: str = ""
    title: str = ""
    prerequisites: List[PrerequisiteEntry] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


@dataclass
class LoadResult:
    ok: bool
    warnings: List[str] = field(default_factory=list)
