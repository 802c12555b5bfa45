"""Domain models for chef-menu."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Course(str, Enum):
    """The fixed set of menu courses."""

    STARTER = "Starter"
    MAIN = "Main"
    DESSERT = "Dessert"


class CourseFilter(str, Enum):
    """Selector for the filtered menu view."""

    ALL = "All"
    STARTER = "Starter"
    MAIN = "Main"
    DESSERT = "Dessert"

    @property
    def course(self) -> Course | None:
        """The course this selector narrows to, or None for All."""
        if self is CourseFilter.ALL:
            return None
        return Course(self.value)


@dataclass(frozen=True)
class MenuEntry:
    """A single dish recorded on the menu."""

    id: str
    name: str
    description: str
    course: Course
    price: float


@dataclass(frozen=True)
class EntryCandidate:
    """Raw add-form fields, price kept as typed."""

    name: str
    description: str = ""
    course: Course | str = Course.STARTER
    price_text: str = ""


@dataclass(frozen=True)
class CourseSummary:
    count: int = 0
    price_sum: float = 0.0
    average: float = 0.0


@dataclass(frozen=True)
class MenuAggregates:
    """Totals derived from the current menu entries."""

    total_count: int
    per_course: dict[Course, CourseSummary]

    def for_course(self, course: Course) -> CourseSummary:
        return self.per_course.get(course, CourseSummary())


@dataclass(frozen=True)
class StoreChange:
    """Notification emitted after a successful store mutation."""

    kind: str
    entry: MenuEntry


CHANGE_ADDED = "added"
CHANGE_REMOVED = "removed"
