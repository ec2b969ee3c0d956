"""Checkout summary screen."""

from __future__ import annotations

from typing import Callable

from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Header, Static

from lunch_tray.models import OrderState
from lunch_tray.rendering import format_checkout_summary


class CheckoutScreen(Screen[None]):
    """Order summary with Submit and Cancel actions."""

    BINDINGS = [
        ("s", "submit", "Submit"),
        ("enter", "submit", "Submit"),
        ("c", "cancel", "Cancel"),
    ]

    CSS = """
    CheckoutScreen {
        align: center middle;
    }

    #checkout-back {
        dock: top;
        color: $text-muted;
        height: auto;
    }

    #checkout-dialog {
        width: 48;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #checkout-help {
        margin-top: 1;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        order_state: OrderState,
        on_next: Callable[[], None],
        on_cancel: Callable[[], None],
        show_back: bool = False,
    ) -> None:
        super().__init__()
        self.order_state = order_state
        self.on_next = on_next
        self.on_cancel = on_cancel
        self.show_back = show_back

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("← Back (Esc)" if self.show_back else "", id="checkout-back")
        with Container(id="checkout-dialog"):
            yield Static(id="checkout-summary")
            yield Static("S/Enter submit. C cancel.", id="checkout-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def show_order(self, state: OrderState) -> None:
        self.order_state = state
        if self.is_mounted:
            self._refresh_content()

    def action_submit(self) -> None:
        self.on_next()

    def action_cancel(self) -> None:
        self.on_cancel()

    def _refresh_content(self) -> None:
        self.query_one("#checkout-summary", Static).update(format_checkout_summary(self.order_state))
