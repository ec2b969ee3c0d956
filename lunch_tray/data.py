"""Static menu data."""

from __future__ import annotations

from decimal import Decimal

from lunch_tray.constant import (
    CATEGORY_ACCOMPANIMENT,
    CATEGORY_ENTREE,
    CATEGORY_SIDE_DISH,
    MENU_ITEM_IDS_BY_CATEGORY,
    MENU_ITEM_META_BY_ID,
)
from lunch_tray.models import MenuItem


def _build_item(item_id: str, category: str) -> MenuItem:
    meta = MENU_ITEM_META_BY_ID[item_id]
    return MenuItem(
        item_id=item_id,
        name=str(meta["name"]),
        description=str(meta["description"]),
        price=Decimal(str(meta["price"])),
        calories=int(meta["calories"]),
        category=category,
    )


MENU_BY_CATEGORY: dict[str, tuple[MenuItem, ...]] = {
    category: tuple(_build_item(item_id, category) for item_id in item_ids)
    for category, item_ids in MENU_ITEM_IDS_BY_CATEGORY.items()
}

ENTREE_MENU_ITEMS = MENU_BY_CATEGORY[CATEGORY_ENTREE]
SIDE_DISH_MENU_ITEMS = MENU_BY_CATEGORY[CATEGORY_SIDE_DISH]
ACCOMPANIMENT_MENU_ITEMS = MENU_BY_CATEGORY[CATEGORY_ACCOMPANIMENT]

_ITEMS_BY_ID: dict[str, MenuItem] = {
    item.item_id: item for items in MENU_BY_CATEGORY.values() for item in items
}


def menu_items_for(category: str) -> list[MenuItem]:
    """Get the ordered options for a category."""
    return list(MENU_BY_CATEGORY[category])


def menu_item_by_id(item_id: str) -> MenuItem:
    """Look up a menu item across all categories."""
    return _ITEMS_BY_ID[item_id]
