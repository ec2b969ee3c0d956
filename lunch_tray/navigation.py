"""Routes and back-stack for the ordering wizard."""

from __future__ import annotations

from enum import Enum

from lunch_tray.errors import UnknownRouteError


class AppRoute(Enum):
    """Named screens of the ordering wizard, each with its title bar text."""

    START = "Start Order"
    ENTREE_MENU = "Choose Entree"
    SIDE_DISH_MENU = "Choose Side Dish"
    ACCOMPANIMENT_MENU = "Choose Accompaniment"
    CHECKOUT = "Order Checkout"

    @property
    def title(self) -> str:
        return self.value


def route_from_name(name: str) -> AppRoute:
    """Resolve a route by name. Unknown names are a navigation bug and raise."""
    try:
        return AppRoute[name]
    except KeyError:
        raise UnknownRouteError(name) from None


def _checked(route: object) -> AppRoute:
    if not isinstance(route, AppRoute):
        raise UnknownRouteError(route)
    return route


class NavigationStack:
    """Back-stack of visited routes; the root entry is never popped."""

    def __init__(self, start: AppRoute = AppRoute.START) -> None:
        self._entries: list[AppRoute] = [_checked(start)]

    @property
    def entries(self) -> tuple[AppRoute, ...]:
        return tuple(self._entries)

    @property
    def current(self) -> AppRoute:
        return self._entries[-1]

    @property
    def previous(self) -> AppRoute | None:
        if len(self._entries) > 1:
            return self._entries[-2]
        return None

    @property
    def can_navigate_back(self) -> bool:
        return self.previous is not None

    def navigate(self, route: AppRoute) -> None:
        self._entries.append(_checked(route))

    def navigate_up(self) -> bool:
        """Pop the current entry. Returns False at the root."""
        if not self.can_navigate_back:
            return False
        self._entries.pop()
        return True

    def pop_back_stack(self, route: AppRoute, inclusive: bool = False) -> bool:
        """
        Pop entries until ``route`` is on top.

        With ``inclusive`` the matching entry is popped too, unless it is the
        root. Returns False and leaves the stack untouched when ``route`` is
        not on the stack.
        """
        if route not in self._entries:
            return False
        idx = len(self._entries) - 1 - self._entries[::-1].index(route)
        keep = idx if inclusive else idx + 1
        del self._entries[max(1, keep):]
        return True
