"""Start order screen."""

from __future__ import annotations

from typing import Callable

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Header, Static


class StartOrderScreen(Screen[None]):
    """Welcome screen with a single Start Order action."""

    BINDINGS = [
        ("enter", "start_order", "Start Order"),
        ("space", "start_order", "Start Order"),
    ]

    CSS = """
    StartOrderScreen {
        align: center middle;
    }

    #start-dialog {
        width: 48;
        height: auto;
        border: round $primary;
        background: $panel;
        padding: 1 2;
    }

    #start-banner {
        text-style: bold;
        content-align: center middle;
        width: 100%;
        margin-bottom: 1;
    }

    #start-button {
        border: heavy $secondary;
        content-align: center middle;
        width: 100%;
        text-style: bold;
    }

    #start-help {
        margin-top: 1;
        color: $text-muted;
    }
    """

    def __init__(self, on_start_order: Callable[[], None]) -> None:
        super().__init__()
        self.on_start_order = on_start_order

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="start-dialog"):
            yield Static("Lunch Tray", id="start-banner")
            yield Static("Start Order", id="start-button")
            yield Static("Enter start. Ctrl+Q quit.", id="start-help")

    def action_start_order(self) -> None:
        self.on_start_order()
