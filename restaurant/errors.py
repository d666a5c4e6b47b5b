"""Exception types raised by the ordering pipeline."""

from __future__ import annotations


class RestaurantError(Exception):
    """Base class for ordering faults."""


class InvalidItemError(RestaurantError):
    """An order item did not match any known variant."""

    def __init__(self, item: object) -> None:
        super().__init__(f"Invalid item type: {type(item).__name__}")
        self.item = item


class ChannelClosedError(RestaurantError):
    """Send or close attempted on an already closed handoff channel."""
