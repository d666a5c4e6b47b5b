"""Domain models for the restaurant order."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Category(str, Enum):
    """Menu category; decides which order item variant gets built."""

    FOOD = "food"
    DRINK = "drink"


@dataclass(frozen=True)
class MenuEntry:
    """A priced menu item from the static catalog."""

    key: str
    name: str
    unit_price: Decimal
    category: Category


@dataclass(frozen=True)
class FoodItem:
    """A food line item."""

    entry: MenuEntry
    quantity: int

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def unit_price(self) -> Decimal:
        return self.entry.unit_price

    @property
    def total(self) -> Decimal:
        return self.unit_price * self.quantity

    @property
    def metadata(self) -> str:
        return f"Name: {self.name}, Price: {self.unit_price:.2f}, Quantity: {self.quantity}"


@dataclass(frozen=True)
class DrinkItem:
    """A drink line item. Refills are recorded but never billed."""

    entry: MenuEntry
    quantity: int
    refills: int = 0

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def unit_price(self) -> Decimal:
        return self.entry.unit_price

    @property
    def total(self) -> Decimal:
        return self.unit_price * self.quantity

    @property
    def metadata(self) -> str:
        return (
            f"Name: {self.name}, Price: {self.unit_price:.2f}, "
            f"Quantity: {self.quantity}, Refills: {self.refills}"
        )


OrderItem = FoodItem | DrinkItem
