"""Editable static menu configuration."""

from __future__ import annotations

# Canonical menu values consumed by restaurant.data (which wraps these into MenuEntry dataclass instances).
MENU_BY_KEY: dict[str, dict[str, str]] = {
    "burger": {"name": "Burger", "price": "5.99", "category": "food"},
    "fries": {"name": "Fries", "price": "3.99", "category": "food"},
    "pizza": {"name": "Pizza", "price": "7.99", "category": "food"},
    "iced tea": {"name": "Iced Tea", "price": "1.99", "category": "drink"},
    "coca cola": {"name": "Coca Cola", "price": "2.99", "category": "drink"},
    "pepsi": {"name": "Pepsi", "price": "2.99", "category": "drink"},
}

DONE_KEYWORD = "done"

SIGNATURE_SEPARATOR = " | "
