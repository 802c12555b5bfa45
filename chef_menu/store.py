"""In-memory menu store with derived views."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Callable
from uuid import uuid4

from chef_menu.errors import MenuValidationError, ValidationReason
from chef_menu.models import (
    CHANGE_ADDED,
    CHANGE_REMOVED,
    Course,
    CourseFilter,
    CourseSummary,
    EntryCandidate,
    MenuAggregates,
    MenuEntry,
    StoreChange,
)

ChangeListener = Callable[[StoreChange], None]

_CENT = Decimal("0.01")
# Keeps every per-course sum far inside float range.
MAX_PRICE = Decimal("1000000000")


def _new_entry_id() -> str:
    return uuid4().hex


def round_cents(value: float | Decimal) -> float:
    """Round half-up to two decimal places."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return float(value.quantize(_CENT, rounding=ROUND_HALF_UP))


def parse_price(price_text: str) -> float:
    """Parse typed price text into a non-negative amount rounded to cents."""
    raw = price_text.strip()
    if not raw:
        raise MenuValidationError(ValidationReason.MISSING_PRICE)

    try:
        parsed = Decimal(raw)
    except InvalidOperation:
        raise MenuValidationError(ValidationReason.INVALID_PRICE) from None

    if not parsed.is_finite() or parsed < 0 or parsed > MAX_PRICE:
        raise MenuValidationError(ValidationReason.INVALID_PRICE)

    # abs() folds "-0" into 0.0.
    return abs(round_cents(parsed))


def _coerce_course(value: Course | str) -> Course:
    try:
        return Course(value)
    except ValueError:
        raise MenuValidationError(ValidationReason.INVALID_COURSE) from None


def coerce_filter(selector: CourseFilter | Course | str) -> CourseFilter:
    """Normalize a selector to CourseFilter, raising ValueError if unknown."""
    if isinstance(selector, CourseFilter):
        return selector
    if isinstance(selector, Course):
        return CourseFilter(selector.value)
    return CourseFilter(selector)


class MenuStore:
    """Ordered collection of menu entries for one session.

    Entries are appended by ``add`` and deleted by ``remove``; nothing is
    mutated in place. Every read returns a fresh list so callers never hold
    the canonical sequence. Subscribers are told about each successful
    mutation after it has been applied.
    """

    def __init__(self, id_factory: Callable[[], str] = _new_entry_id) -> None:
        self._entries: list[MenuEntry] = []
        self._id_factory = id_factory
        self._listeners: list[ChangeListener] = []

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, candidate: EntryCandidate) -> MenuEntry:
        """Validate candidate fields and append a new entry."""
        name = candidate.name.strip()
        if not name:
            raise MenuValidationError(ValidationReason.MISSING_NAME)

        price = parse_price(candidate.price_text)
        course = _coerce_course(candidate.course)

        entry = MenuEntry(
            id=self._unique_id(),
            name=name,
            description=candidate.description.strip(),
            course=course,
            price=price,
        )
        self._entries.append(entry)
        self._notify(StoreChange(kind=CHANGE_ADDED, entry=entry))
        return entry

    def remove(self, entry_id: str) -> bool:
        """Delete the entry with this id; unknown ids are a no-op."""
        for idx, entry in enumerate(self._entries):
            if entry.id == entry_id:
                del self._entries[idx]
                self._notify(StoreChange(kind=CHANGE_REMOVED, entry=entry))
                return True
        return False

    def get(self, entry_id: str) -> MenuEntry | None:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def list(self) -> list[MenuEntry]:
        """Return all entries in insertion order."""
        return list(self._entries)

    def filtered_list(self, selector: CourseFilter | Course | str) -> list[MenuEntry]:
        """Return entries matching the selector, keeping insertion order."""
        course = coerce_filter(selector).course
        if course is None:
            return self.list()
        return [entry for entry in self._entries if entry.course is course]

    def aggregates(self) -> MenuAggregates:
        """Recompute per-course counts, sums and averages."""
        prices: dict[Course, list[float]] = {course: [] for course in Course}
        for entry in self._entries:
            prices[entry.course].append(entry.price)

        per_course: dict[Course, CourseSummary] = {}
        for course, course_prices in prices.items():
            count = len(course_prices)
            price_sum = math.fsum(course_prices)
            average = round_cents(price_sum / count) if count else 0.0
            per_course[course] = CourseSummary(count=count, price_sum=price_sum, average=average)

        return MenuAggregates(total_count=len(self._entries), per_course=per_course)

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _unique_id(self) -> str:
        taken = {entry.id for entry in self._entries}
        entry_id = self._id_factory()
        while entry_id in taken:
            entry_id = self._id_factory()
        return entry_id

    def _notify(self, change: StoreChange) -> None:
        for listener in list(self._listeners):
            listener(change)
