"""Wizard state machine tying navigation to the order controller."""

from __future__ import annotations

import logging

from lunch_tray.errors import InvalidTransitionError
from lunch_tray.models import MenuItem
from lunch_tray.navigation import AppRoute, NavigationStack
from lunch_tray.order import OrderController

logger = logging.getLogger(__name__)

NEXT_ROUTE: dict[AppRoute, AppRoute] = {
    AppRoute.ENTREE_MENU: AppRoute.SIDE_DISH_MENU,
    AppRoute.SIDE_DISH_MENU: AppRoute.ACCOMPANIMENT_MENU,
    AppRoute.ACCOMPANIMENT_MENU: AppRoute.CHECKOUT,
}

MENU_ROUTES = frozenset(NEXT_ROUTE)


class OrderFlow:
    """
    Linear ordering wizard: start -> entree -> side dish -> accompaniment -> checkout.

    ``cancel`` always resets the order and returns to the start screen.
    ``navigate_up`` pops one level and keeps the order as it is.
    """

    def __init__(self, controller: OrderController | None = None, stack: NavigationStack | None = None) -> None:
        self.controller = controller or OrderController()
        self.stack = stack or NavigationStack(AppRoute.START)

    @property
    def current(self) -> AppRoute:
        return self.stack.current

    @property
    def can_navigate_back(self) -> bool:
        return self.stack.can_navigate_back

    def start_order(self) -> AppRoute:
        if self.current is not AppRoute.START:
            raise InvalidTransitionError(f"start_order is only valid on {AppRoute.START.name}, not {self.current.name}")
        return self._navigate(AppRoute.ENTREE_MENU)

    def select(self, item: MenuItem) -> None:
        """Apply a selection to the category of the current menu screen."""
        route = self.current
        if route is AppRoute.ENTREE_MENU:
            self.controller.update_entree(item)
        elif route is AppRoute.SIDE_DISH_MENU:
            self.controller.update_side_dish(item)
        elif route is AppRoute.ACCOMPANIMENT_MENU:
            self.controller.update_accompaniment(item)
        else:
            raise InvalidTransitionError(f"No menu selection on {route.name}")

    def has_selection(self) -> bool:
        """Whether the current menu screen's category already has a selection."""
        state = self.controller.state
        return {
            AppRoute.ENTREE_MENU: state.entree,
            AppRoute.SIDE_DISH_MENU: state.side_dish,
            AppRoute.ACCOMPANIMENT_MENU: state.accompaniment,
        }.get(self.current) is not None

    def next(self) -> AppRoute:
        route = self.current
        if route is AppRoute.CHECKOUT:
            logger.info("order submitted total=%s", self.controller.state.order_total)
            return self._reset_and_return_to_start()
        if route not in MENU_ROUTES:
            raise InvalidTransitionError(f"next is not valid on {route.name}")
        if not self.has_selection():
            raise InvalidTransitionError(f"next on {route.name} requires a selection")
        return self._navigate(NEXT_ROUTE[route])

    def cancel(self) -> AppRoute:
        route = self.current
        if route is AppRoute.START:
            raise InvalidTransitionError(f"cancel is not valid on {route.name}")
        logger.info("order cancelled from %s", route.name)
        return self._reset_and_return_to_start()

    def navigate_up(self) -> bool:
        moved = self.stack.navigate_up()
        if moved:
            logger.debug("navigate_up -> %s", self.current.name)
        return moved

    def _navigate(self, route: AppRoute) -> AppRoute:
        self.stack.navigate(route)
        logger.debug("navigate -> %s", route.name)
        return route

    def _reset_and_return_to_start(self) -> AppRoute:
        self.controller.reset_order()
        self.stack.pop_back_stack(AppRoute.START, inclusive=False)
        return self.current
