"""Static menu data and item construction."""

from __future__ import annotations

from decimal import Decimal

from restaurant.constant import MENU_BY_KEY as _MENU_BY_KEY_RAW
from restaurant.errors import InvalidItemError
from restaurant.models import Category, DrinkItem, FoodItem, MenuEntry, OrderItem

MENU_BY_KEY: dict[str, MenuEntry] = {
    key: MenuEntry(
        key=key,
        name=str(meta["name"]),
        unit_price=Decimal(meta["price"]),
        category=Category(meta["category"]),
    )
    for key, meta in _MENU_BY_KEY_RAW.items()
}


def build_item(entry: MenuEntry, quantity: int, refills: int = 0) -> OrderItem:
    """Build the order item variant matching the entry's category."""
    if entry.category is Category.FOOD:
        return FoodItem(entry=entry, quantity=quantity)
    if entry.category is Category.DRINK:
        return DrinkItem(entry=entry, quantity=quantity, refills=refills)
    raise InvalidItemError(entry)
