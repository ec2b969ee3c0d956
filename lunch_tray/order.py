"""Order controller holding the single in-progress order."""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

from lunch_tray.config import TAX_RATE
from lunch_tray.models import MenuItem, OrderState

logger = logging.getLogger(__name__)

OrderListener = Callable[[OrderState], None]

_CENTS = Decimal("0.01")


def compute_totals(
    entree: MenuItem | None,
    side_dish: MenuItem | None,
    accompaniment: MenuItem | None,
    tax_rate: Decimal,
) -> OrderState:
    """Build an order snapshot whose totals are derived from the selections."""
    item_total = sum(
        (item.price for item in (entree, side_dish, accompaniment) if item is not None),
        Decimal("0.00"),
    ).quantize(_CENTS, rounding=ROUND_HALF_UP)
    tax_charged = (item_total * tax_rate).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return OrderState(
        entree=entree,
        side_dish=side_dish,
        accompaniment=accompaniment,
        item_total=item_total,
        tax_charged=tax_charged,
        order_total=item_total + tax_charged,
    )


class OrderController:
    """Owns the order state and notifies observers after every change."""

    def __init__(self, tax_rate: Decimal = TAX_RATE) -> None:
        self.tax_rate = tax_rate
        self._state = OrderState.empty()
        self._listeners: list[OrderListener] = []

    @property
    def state(self) -> OrderState:
        return self._state

    def subscribe(self, listener: OrderListener) -> Callable[[], None]:
        """Register an observer and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update_entree(self, item: MenuItem) -> None:
        self._recompute(replace(self._state, entree=item))
        logger.debug("entree=%s total=%s", item.item_id, self._state.order_total)

    def update_side_dish(self, item: MenuItem) -> None:
        self._recompute(replace(self._state, side_dish=item))
        logger.debug("side_dish=%s total=%s", item.item_id, self._state.order_total)

    def update_accompaniment(self, item: MenuItem) -> None:
        self._recompute(replace(self._state, accompaniment=item))
        logger.debug("accompaniment=%s total=%s", item.item_id, self._state.order_total)

    def reset_order(self) -> None:
        self._publish(OrderState.empty())
        logger.debug("order reset")

    def _recompute(self, draft: OrderState) -> None:
        self._publish(compute_totals(draft.entree, draft.side_dish, draft.accompaniment, self.tax_rate))

    def _publish(self, state: OrderState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)
