"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from functools import partial
from pathlib import Path

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Button, ContentSwitcher, Footer, Header, Input, Select, Static

from chef_menu.alert_modal import AlertModal
from chef_menu.config import DEBUG_LOG_PATH, FLASH_IN_SECONDS, FLASH_OUT_SECONDS
from chef_menu.confirm_modal import ConfirmModal
from chef_menu.constant import (
    APP_SUB_TITLE,
    APP_TITLE,
    CLEAR_CONFIRM_LABEL,
    CLEAR_CONFIRM_MESSAGE,
    CLEAR_CONFIRM_TITLE,
    EMPTY_FILTER_MESSAGE,
    EMPTY_MENU_MESSAGE,
    FLASH_MESSAGE,
    REMOVE_CONFIRM_LABEL,
    REMOVE_CONFIRM_MESSAGE,
    REMOVE_CONFIRM_TITLE,
    VALIDATION_TITLE,
)
from chef_menu.errors import MenuValidationError
from chef_menu.models import Course, CourseFilter, MenuEntry, StoreChange
from chef_menu.rendering import format_entry_list, format_filter_count, format_summary
from chef_menu.state import View, ViewState, clear_form, navigate, set_filter, submit_form, update_form
from chef_menu.store import MenuStore

_NAV_LABELS: tuple[tuple[str, View, str], ...] = (
    ("F1", View.HOME, "Home"),
    ("F2", View.ADD, "Add"),
    ("F3", View.FILTER, "Filter"),
)

_FORM_INPUT_FIELDS: dict[str, str] = {
    "name-input": "name",
    "description-input": "description",
    "price-input": "price_text",
}


class ChefMenuApp(App):
    """A Textual app for recording dishes and reviewing the menu by course."""

    TITLE = APP_TITLE
    SUB_TITLE = APP_SUB_TITLE

    CSS = """
    Screen {
        layout: vertical;
    }

    #nav-bar {
        height: 1;
        padding: 0 1;
        background: $boost;
    }

    #views {
        height: 1fr;
    }

    #flash {
        dock: top;
        width: auto;
        height: 1;
        padding: 0 2;
        margin: 0 2;
        background: #7ba6a1;
        color: white;
        text-style: bold;
        opacity: 0;
    }

    #home-layout {
        height: 1fr;
    }

    #summary-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #entries-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
        overflow-y: auto;
    }

    #add {
        padding: 1 2;
    }

    #filter {
        padding: 1 2;
    }

    #filtered-pane {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
        overflow-y: auto;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }

    .field-label {
        text-style: bold;
        margin-top: 1;
    }

    #form-buttons {
        height: auto;
        margin-top: 1;
    }

    #form-buttons Button {
        margin-right: 2;
    }
    """

    BINDINGS = [
        ("f1", "show_view('home')", "Home"),
        ("f2", "show_view('add')", "Add"),
        ("f3", "show_view('filter')", "Filter"),
        Binding("ctrl+s", "save_entry", "Save dish", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, store: MenuStore | None = None, debug_log_path: str | Path = DEBUG_LOG_PATH) -> None:
        super().__init__()
        self.store = store if store is not None else MenuStore()
        self.view_state = ViewState()
        self.selected_index: int | None = None
        self.last_change: StoreChange | None = None
        self.flash_count = 0
        self._unsubscribe = None
        self._debug_log_path = Path(debug_log_path)
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="nav-bar")
        with ContentSwitcher(initial=View.HOME.value, id="views"):
            with Vertical(id=View.HOME.value):
                yield Static(FLASH_MESSAGE, id="flash")
                with Horizontal(id="home-layout"):
                    with Vertical(id="summary-pane"):
                        yield Static("Summary", classes="pane-title")
                        yield Static(id="summary")
                    with Vertical(id="entries-pane"):
                        yield Static("Menu", classes="pane-title")
                        yield Static(id="entries-list")
            with VerticalScroll(id=View.ADD.value):
                yield Static("Dish Name", classes="field-label")
                yield Input(placeholder="e.g. Lemon Chicken", id="name-input")
                yield Static("Description", classes="field-label")
                yield Input(placeholder="Short description", id="description-input")
                yield Static("Course", classes="field-label")
                yield Select(
                    [(course.value, course) for course in Course],
                    value=Course.STARTER,
                    allow_blank=False,
                    id="course-select",
                )
                yield Static("Price (R)", classes="field-label")
                yield Input(placeholder="e.g. 120.00", id="price-input")
                with Horizontal(id="form-buttons"):
                    yield Button("Save Dish", variant="primary", id="save-button")
                    yield Button("Clear", id="clear-button")
            with Vertical(id=View.FILTER.value):
                yield Static("Filter by Course", classes="pane-title")
                yield Select(
                    [(selector.value, selector) for selector in CourseFilter],
                    value=CourseFilter.ALL,
                    allow_blank=False,
                    id="filter-select",
                )
                yield Static(id="filter-count", classes="field-label")
                with Vertical(id="filtered-pane"):
                    yield Static(id="filtered-list")
        yield Footer()

    def on_mount(self) -> None:
        self._unsubscribe = self.store.subscribe(self._on_store_change)
        self._log_debug(f"on_mount entries={len(self.store)}")
        self._refresh_all()

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.view_state.view is not View.HOME:
            return

        if event.key in {"j", "down"}:
            self._move_selection(1)
            event.stop()
            return

        if event.key in {"k", "up"}:
            self._move_selection(-1)
            event.stop()
            return

        if event.key in {"d", "delete"}:
            self.action_remove_selected()
            event.stop()

    def action_show_view(self, view: str) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        self._apply_state(navigate(self.view_state, View(view)))

    def action_save_entry(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        if self.view_state.view is not View.ADD:
            return

        try:
            new_state, entry = submit_form(self.view_state, self.store)
        except MenuValidationError as exc:
            self._log_debug(f"save_rejected reason={exc.reason.value}")
            self.push_screen(AlertModal(VALIDATION_TITLE, exc.message))
            return

        self._log_debug(f"save_added id={entry.id} course={entry.course.value} price={entry.price:.2f}")
        self._apply_state(new_state)
        self._sync_form_inputs()

    def action_remove_selected(self) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        entry = self._selected_entry()
        if entry is None:
            return

        def _confirmed(confirmed: bool | None) -> None:
            if not confirmed:
                self._log_debug(f"remove_cancelled id={entry.id}")
                return
            removed = self.store.remove(entry.id)
            self._log_debug(f"remove_done id={entry.id} removed={removed}")

        self.push_screen(ConfirmModal(REMOVE_CONFIRM_TITLE, REMOVE_CONFIRM_MESSAGE, REMOVE_CONFIRM_LABEL), _confirmed)

    def action_clear_form(self) -> None:
        def _confirmed(confirmed: bool | None) -> None:
            if not confirmed:
                return
            self.view_state = clear_form(self.view_state)
            self._sync_form_inputs()

        self.push_screen(ConfirmModal(CLEAR_CONFIRM_TITLE, CLEAR_CONFIRM_MESSAGE, CLEAR_CONFIRM_LABEL), _confirmed)

    @on(Button.Pressed, "#save-button")
    def _on_save_pressed(self) -> None:
        self.action_save_entry()

    @on(Button.Pressed, "#clear-button")
    def _on_clear_pressed(self) -> None:
        self.action_clear_form()

    def on_input_changed(self, event: Input.Changed) -> None:
        field_name = _FORM_INPUT_FIELDS.get(event.input.id or "")
        if field_name is None:
            return
        self.view_state = update_form(self.view_state, **{field_name: event.value})

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "course-select" and isinstance(event.value, Course):
            self.view_state = update_form(self.view_state, course=event.value)
            return

        if event.select.id == "filter-select" and isinstance(event.value, CourseFilter):
            self.view_state = set_filter(self.view_state, event.value)
            self._log_debug(f"filter_set selector={event.value.value}")
            self._refresh_filter()

    def _on_store_change(self, change: StoreChange) -> None:
        self.last_change = change
        self._log_debug(f"store_changed kind={change.kind} id={change.entry.id} total={len(self.store)}")
        self._clamp_selection()
        self._refresh_home()
        self._refresh_filter()
        self._flash()

    def _apply_state(self, state: ViewState) -> None:
        previous = self.view_state.view
        self.view_state = state
        if state.view is previous:
            return

        self._log_debug(f"view_changed from={previous.value} to={state.view.value}")
        self.query_one("#views", ContentSwitcher).current = state.view.value
        self._refresh_all()
        if state.view is View.ADD:
            self.query_one("#name-input", Input).focus()
        elif state.view is View.FILTER:
            self.query_one("#filter-select", Select).focus()
        else:
            self.set_focus(None)

    def _sync_form_inputs(self) -> None:
        form = self.view_state.form
        self.query_one("#name-input", Input).value = form.name
        self.query_one("#description-input", Input).value = form.description
        self.query_one("#price-input", Input).value = form.price_text
        self.query_one("#course-select", Select).value = form.course

    def _flash(self) -> None:
        try:
            flash = self.query_one("#flash", Static)
        except NoMatches:
            return
        self.flash_count += 1
        # A new fade-in starts from the current opacity and replaces any running one.
        flash.styles.animate(
            "opacity",
            value=1.0,
            duration=FLASH_IN_SECONDS,
            on_complete=partial(self._fade_flash, self.flash_count),
        )

    def _fade_flash(self, flash_id: int) -> None:
        if flash_id != self.flash_count:
            return
        try:
            flash = self.query_one("#flash", Static)
        except NoMatches:
            return
        flash.styles.animate("opacity", value=0.0, duration=FLASH_OUT_SECONDS)

    def _selected_entry(self) -> MenuEntry | None:
        if self.selected_index is None:
            return None
        entries = self.store.list()
        if not (0 <= self.selected_index < len(entries)):
            return None
        return entries[self.selected_index]

    def _move_selection(self, delta: int) -> None:
        total = len(self.store)
        if not total:
            return

        if self.selected_index is None:
            self.selected_index = 0 if delta > 0 else total - 1
        else:
            self.selected_index = (self.selected_index + delta) % total
        self._refresh_home()

    def _clamp_selection(self) -> None:
        total = len(self.store)
        if not total:
            self.selected_index = None
        elif self.selected_index is not None and self.selected_index >= total:
            self.selected_index = total - 1

    def _refresh_all(self) -> None:
        self._refresh_nav()
        self._refresh_home()
        self._refresh_filter()

    def _refresh_nav(self) -> None:
        text = Text()
        for idx, (key, view, label) in enumerate(_NAV_LABELS):
            if idx > 0:
                text.append("  ")
            style = "bold reverse" if view is self.view_state.view else "dim"
            text.append(f" {key} {label} ", style=style)
        self.query_one("#nav-bar", Static).update(text)

    def _refresh_home(self) -> None:
        try:
            summary = self.query_one("#summary", Static)
            entries_widget = self.query_one("#entries-list", Static)
        except NoMatches:
            return
        summary.update(format_summary(self.store.aggregates()))
        entries_widget.update(format_entry_list(self.store.list(), self.selected_index, EMPTY_MENU_MESSAGE))

    def _refresh_filter(self) -> None:
        try:
            count_widget = self.query_one("#filter-count", Static)
            list_widget = self.query_one("#filtered-list", Static)
        except NoMatches:
            return
        selector = self.view_state.filter
        entries = self.store.filtered_list(selector)
        count_widget.update(format_filter_count(selector, len(entries)))
        list_widget.update(format_entry_list(entries, None, EMPTY_FILTER_MESSAGE))
