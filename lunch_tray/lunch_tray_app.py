"""Main Textual app class."""

from __future__ import annotations

import logging
from typing import Callable

from textual import events
from textual.app import App
from textual.binding import Binding
from textual.screen import Screen

from lunch_tray.checkout_screen import CheckoutScreen
from lunch_tray.data import ACCOMPANIMENT_MENU_ITEMS, ENTREE_MENU_ITEMS, SIDE_DISH_MENU_ITEMS
from lunch_tray.flow import OrderFlow
from lunch_tray.menu_screen import AccompanimentMenuScreen, EntreeMenuScreen, MenuScreen, SideDishMenuScreen
from lunch_tray.models import OrderState
from lunch_tray.errors import UnknownRouteError
from lunch_tray.navigation import AppRoute
from lunch_tray.start_screen import StartOrderScreen

logger = logging.getLogger(__name__)


class LunchTrayApp(App):
    """A Textual app that walks a diner through entree, side dish and accompaniment to checkout."""

    TITLE = "Lunch Tray"

    BINDINGS = [
        Binding("escape", "navigate_up", "Back", priority=True),
        Binding("backspace", "navigate_up", "Back", show=False, priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, flow: OrderFlow | None = None) -> None:
        super().__init__()
        self.flow = flow or OrderFlow()
        self._route_screen_shown = False
        self._unsubscribe = self.flow.controller.subscribe(self._on_order_changed)
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        logger.debug(message)

    @property
    def current_route(self) -> AppRoute:
        return self.flow.current

    async def on_event(self, event: events.Event) -> None:
        if isinstance(event, events.Key):
            self._log_debug(f"on_key key={event.key!r} char={event.character!r} route={self.current_route.name}")
        await super().on_event(event)

    def on_mount(self) -> None:
        self._show_current_route()

    def on_unmount(self) -> None:
        self._unsubscribe()

    def action_navigate_up(self) -> None:
        if not self.flow.can_navigate_back:
            self._log_debug(f"navigate_up ignored route={self.current_route.name}")
            return
        self.flow.navigate_up()
        self._show_current_route()

    def _on_order_changed(self, state: OrderState) -> None:
        self._log_debug(f"order_changed items={len(state.selected_items())} total={state.order_total}")
        screen = self.screen
        if isinstance(screen, (MenuScreen, CheckoutScreen)):
            screen.show_order(state)

    def _transition(self, name: str, event: Callable[[], object]) -> None:
        before = self.current_route
        event()
        self._log_debug(f"{name} {before.name} -> {self.current_route.name}")
        self._show_current_route()

    def _start_order(self) -> None:
        self._transition("start_order", self.flow.start_order)

    def _next(self) -> None:
        self._transition("next", self.flow.next)

    def _cancel(self) -> None:
        self._transition("cancel", self.flow.cancel)

    def _show_current_route(self) -> None:
        route = self.current_route
        self.sub_title = route.title
        screen = self._build_screen(route)
        if self._route_screen_shown:
            self.switch_screen(screen)
        else:
            self.push_screen(screen)
            self._route_screen_shown = True

    def _build_screen(self, route: AppRoute) -> Screen:
        state = self.flow.controller.state
        show_back = self.flow.can_navigate_back
        if route is AppRoute.START:
            return StartOrderScreen(on_start_order=self._start_order)
        if route is AppRoute.ENTREE_MENU:
            return EntreeMenuScreen(
                options=ENTREE_MENU_ITEMS,
                on_cancel=self._cancel,
                on_next=self._next,
                on_selection_changed=self.flow.select,
                selected=state.entree,
                order_state=state,
                show_back=show_back,
            )
        if route is AppRoute.SIDE_DISH_MENU:
            return SideDishMenuScreen(
                options=SIDE_DISH_MENU_ITEMS,
                on_cancel=self._cancel,
                on_next=self._next,
                on_selection_changed=self.flow.select,
                selected=state.side_dish,
                order_state=state,
                show_back=show_back,
            )
        if route is AppRoute.ACCOMPANIMENT_MENU:
            return AccompanimentMenuScreen(
                options=ACCOMPANIMENT_MENU_ITEMS,
                on_cancel=self._cancel,
                on_next=self._next,
                on_selection_changed=self.flow.select,
                selected=state.accompaniment,
                order_state=state,
                show_back=show_back,
            )
        if route is AppRoute.CHECKOUT:
            return CheckoutScreen(
                order_state=state,
                on_next=self._next,
                on_cancel=self._cancel,
                show_back=show_back,
            )
        raise UnknownRouteError(route)
