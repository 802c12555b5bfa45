"""Rendering helpers for menu entries and summaries."""

from __future__ import annotations

from rich.text import Text

from chef_menu.constant import (
    COURSE_BADGE_STYLES,
    COURSE_PLURAL_LABELS,
    CURRENCY_PREFIX,
    EMPTY_DESCRIPTION_PLACEHOLDER,
)
from chef_menu.models import Course, CourseFilter, MenuAggregates, MenuEntry


def format_price(value: float) -> str:
    """Format a plain amount for display, e.g. R120.00."""
    return f"{CURRENCY_PREFIX}{value:.2f}"


def description_text(entry: MenuEntry) -> str:
    return entry.description or EMPTY_DESCRIPTION_PLACEHOLDER


def badge_style(course: Course) -> str:
    """Return a consistent badge style for course tags."""
    return COURSE_BADGE_STYLES.get(Course(course).value, "bold")


def format_entry_card(entry: MenuEntry, selected: bool = False) -> Text:
    """Render one dish as a name/price line, description and course badge."""
    text = Text()
    text.append("➤ " if selected else "  ")
    text.append(entry.name, style="bold")
    text.append("  ")
    text.append(format_price(entry.price), style="bold #7ba6a1")
    text.append("\n    ")
    text.append(description_text(entry), style="italic" if entry.description else "dim italic")
    text.append("\n    ")
    text.append(f" {entry.course.value} ", style=badge_style(entry.course))
    return text


def format_entry_list(entries: list[MenuEntry], selected_index: int | None, empty_message: str) -> Text | str:
    if not entries:
        return empty_message

    lines = Text()
    for idx, entry in enumerate(entries):
        if idx > 0:
            lines.append("\n\n")
        lines.append_text(format_entry_card(entry, selected=idx == selected_index))
    return lines


def format_summary(aggregates: MenuAggregates) -> Text:
    """Render the total count and per-course average prices."""
    text = Text()
    text.append("Total items: ")
    text.append(str(aggregates.total_count), style="bold")
    text.append("\n\nAverage prices", style="bold underline")
    for course in Course:
        label = COURSE_PLURAL_LABELS[course.value]
        average = aggregates.for_course(course).average
        text.append(f"\n{label}: ")
        text.append(format_price(average), style="bold" if average else "dim")
    return text


def format_filter_count(selector: CourseFilter, count: int) -> str:
    noun = "item" if count == 1 else "items"
    return f"Showing {count} {noun} ({selector.value})"
