from decimal import Decimal

import pytest

from lunch_tray.flow import OrderFlow
from lunch_tray.models import MenuItem
from lunch_tray.navigation import NavigationStack
from lunch_tray.order import OrderController

TAX_RATE = Decimal("0.08")


def make_item(item_id: str, price: str, category: str = "entree") -> MenuItem:
    return MenuItem(
        item_id=item_id,
        name=item_id.replace("_", " ").title(),
        description="",
        price=Decimal(price),
        calories=100,
        category=category,
    )


@pytest.fixture
def controller():
    return OrderController(tax_rate=TAX_RATE)


@pytest.fixture
def flow(controller):
    return OrderFlow(controller, NavigationStack())
