"""Exceptions raised by the ordering flow."""

from __future__ import annotations


class LunchTrayError(Exception):
    """Base class for lunch-tray errors."""


class UnknownRouteError(LunchTrayError, LookupError):
    """A route name does not match any screen in the navigation graph."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown route: {name!r}")
        self.name = name


class InvalidTransitionError(LunchTrayError, RuntimeError):
    """A flow event was fired from a screen that does not handle it."""
