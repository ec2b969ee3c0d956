"""Domain models for lunch-tray."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

_ZERO = Decimal("0.00")


@dataclass(frozen=True)
class MenuItem:
    """A selectable menu item."""

    item_id: str
    name: str
    description: str
    price: Decimal
    calories: int
    category: str


@dataclass(frozen=True)
class OrderState:
    """Snapshot of the in-progress order with its running totals."""

    entree: MenuItem | None = None
    side_dish: MenuItem | None = None
    accompaniment: MenuItem | None = None
    item_total: Decimal = _ZERO
    tax_charged: Decimal = _ZERO
    order_total: Decimal = _ZERO

    @classmethod
    def empty(cls) -> OrderState:
        return cls()

    def selected_items(self) -> list[MenuItem]:
        """Return the non-null selections in category order."""
        return [item for item in (self.entree, self.side_dish, self.accompaniment) if item is not None]

    @property
    def is_empty(self) -> bool:
        return not self.selected_items()
