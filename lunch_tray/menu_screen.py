"""Menu selection screens."""

from __future__ import annotations

from typing import Callable, Sequence

from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Header, Static

from lunch_tray.models import MenuItem, OrderState
from lunch_tray.rendering import format_menu_options, format_running_total


class MenuScreen(Screen[None]):
    """Radio list of menu options with Cancel and Next actions."""

    BINDINGS = [
        ("j", "move_cursor(1)", "Next option"),
        ("k", "move_cursor(-1)", "Previous option"),
        ("down", "move_cursor(1)", "Next option"),
        ("up", "move_cursor(-1)", "Previous option"),
        ("enter", "select_current", "Select"),
        ("space", "select_current", "Select"),
        ("n", "next", "Next"),
        ("c", "cancel", "Cancel"),
    ]

    CSS = """
    MenuScreen {
        layout: vertical;
    }

    #menu-back {
        color: $text-muted;
        height: auto;
    }

    #menu-pane {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    #menu-options {
        padding: 0 1;
    }

    #menu-actions {
        height: auto;
        border: heavy $secondary;
        padding: 0 1;
    }
    """

    cursor_index = reactive(0)

    def __init__(
        self,
        options: Sequence[MenuItem],
        on_cancel: Callable[[], None],
        on_next: Callable[[], None],
        on_selection_changed: Callable[[MenuItem], None],
        selected: MenuItem | None = None,
        order_state: OrderState | None = None,
        show_back: bool = False,
    ) -> None:
        super().__init__()
        self.options = list(options)
        self.on_cancel = on_cancel
        self.on_next = on_next
        self.on_selection_changed = on_selection_changed
        self.selected_id = selected.item_id if selected is not None else None
        self.order_state = order_state or OrderState.empty()
        self.show_back = show_back

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("← Back (Esc)" if self.show_back else "", id="menu-back")
        with Container(id="menu-pane"):
            yield Static(id="menu-options")
        yield Static(id="menu-actions")

    def on_mount(self) -> None:
        # Returning via Back lands the cursor on the kept selection.
        ids = [item.item_id for item in self.options]
        if self.selected_id in ids:
            self.cursor_index = ids.index(self.selected_id)
        self._refresh_content()

    @property
    def can_go_next(self) -> bool:
        return self.selected_id is not None

    def show_order(self, state: OrderState) -> None:
        self.order_state = state
        if self.is_mounted:
            self._refresh_content()

    def action_move_cursor(self, delta: int) -> None:
        if not self.options:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.options)
        self._refresh_content()

    def action_select_current(self) -> None:
        if not self.options:
            return
        item = self.options[self.cursor_index]
        self.selected_id = item.item_id
        self._refresh_content()
        self.on_selection_changed(item)

    def action_next(self) -> None:
        # Next stays disabled until an option has been picked.
        if not self.can_go_next:
            return
        self.on_next()

    def action_cancel(self) -> None:
        self.on_cancel()

    def _refresh_content(self) -> None:
        options = self.query_one("#menu-options", Static)
        actions = self.query_one("#menu-actions", Static)
        if not self.options:
            options.update("No options")
        else:
            options.update(format_menu_options(self.options, self.selected_id, self.cursor_index))

        next_hint = "N next" if self.can_go_next else "select an option to continue"
        help_line = f"J/K/↑/↓ move, Enter select, C cancel, {next_hint}"
        running_total = format_running_total(self.order_state)
        if running_total:
            help_line = f"{help_line}\n{running_total}"
        actions.update(help_line)


class EntreeMenuScreen(MenuScreen):
    """Entree options."""


class SideDishMenuScreen(MenuScreen):
    """Side dish options."""


class AccompanimentMenuScreen(MenuScreen):
    """Accompaniment options."""
