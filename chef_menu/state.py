"""View state objects and the pure command handlers that update them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from chef_menu.models import Course, CourseFilter, EntryCandidate, MenuEntry
from chef_menu.store import MenuStore, coerce_filter


class View(str, Enum):
    """Which top-level view is showing; exactly one at a time."""

    HOME = "home"
    ADD = "add"
    FILTER = "filter"


@dataclass(frozen=True)
class FormState:
    """Add-form fields as currently typed."""

    name: str = ""
    description: str = ""
    course: Course = Course.STARTER
    price_text: str = ""

    def to_candidate(self) -> EntryCandidate:
        return EntryCandidate(
            name=self.name,
            description=self.description,
            course=self.course,
            price_text=self.price_text,
        )


@dataclass(frozen=True)
class ViewState:
    view: View = View.HOME
    form: FormState = field(default_factory=FormState)
    filter: CourseFilter = CourseFilter.ALL


def navigate(state: ViewState, view: View) -> ViewState:
    return replace(state, view=View(view))


def set_filter(state: ViewState, selector: CourseFilter | Course | str) -> ViewState:
    return replace(state, filter=coerce_filter(selector))


def update_form(state: ViewState, **fields: object) -> ViewState:
    """Return state with the given form fields replaced."""
    if "course" in fields:
        fields["course"] = Course(fields["course"])
    return replace(state, form=replace(state.form, **fields))


def clear_form(state: ViewState) -> ViewState:
    return replace(state, form=FormState())


def submit_form(state: ViewState, store: MenuStore) -> tuple[ViewState, MenuEntry]:
    """Add the form's dish to the store, then reset the form and go home.

    MenuValidationError propagates unchanged; the caller keeps its current
    state so the typed inputs survive for correction.
    """
    entry = store.add(state.form.to_candidate())
    return replace(state, view=View.HOME, form=FormState()), entry
