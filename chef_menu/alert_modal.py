"""Blocking alert modal for validation problems."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static


class AlertModal(ModalScreen[None]):
    """Centered modal showing one message until acknowledged."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("enter", "close", "OK"),
        ("q", "close", "Close"),
    ]

    CSS = """
    AlertModal {
        align: center middle;
        background: $background 60%;
    }

    #alert-dialog {
        width: 52;
        height: auto;
        border: round $warning;
        background: $panel;
        padding: 1 2;
    }

    #alert-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #alert-message {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #alert-help {
        color: #dddddd;
    }
    """

    def __init__(self, title: str, message: str) -> None:
        super().__init__()
        self.title_text = title
        self.message = message

    def compose(self) -> ComposeResult:
        with Container(id="alert-dialog"):
            yield Static(self.title_text, id="alert-title")
            yield Static(self.message, id="alert-message")
            yield Static("Enter / Esc to close", id="alert-help")

    def action_close(self) -> None:
        self.dismiss()
