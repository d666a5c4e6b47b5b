"""Concurrency-safe order accumulator."""

from __future__ import annotations

import base64
import logging
import threading
from decimal import Decimal
from typing import Iterable

from restaurant.constant import SIGNATURE_SEPARATOR
from restaurant.models import OrderItem

logger = logging.getLogger(__name__)


def compute_signature(items: Iterable[OrderItem]) -> str:
    """Base64 of every item's metadata joined in sequence order."""
    joined = SIGNATURE_SEPARATOR.join(item.metadata for item in items)
    return base64.b64encode(joined.encode("utf-8")).decode("ascii")


class MenuOrder:
    """
    One customer order, filled by the kitchen consumer.

    ``add_item`` is the only mutation entry point. Appending and re-signing
    happen under the same lock, so a reader of ``signature`` or ``items``
    never sees one without the other.
    """

    def __init__(self, number: str) -> None:
        self.number = number
        self._lock = threading.Lock()
        self._items: list[OrderItem] = []
        self._signature = compute_signature(())

    def add_item(self, item: OrderItem) -> None:
        with self._lock:
            self._items.append(item)
            self._signature = compute_signature(self._items)
            count = len(self._items)
        logger.debug("order=%s added item #%d (%s)", self.number, count, item.metadata)

    @property
    def items(self) -> tuple[OrderItem, ...]:
        with self._lock:
            return tuple(self._items)

    @property
    def signature(self) -> str:
        with self._lock:
            return self._signature

    def snapshot(self) -> tuple[tuple[OrderItem, ...], str]:
        """Return items and signature read together."""
        with self._lock:
            return tuple(self._items), self._signature

    def get_total(self) -> Decimal:
        return sum((item.total for item in self.items), Decimal("0"))

    @property
    def total(self) -> Decimal:
        return self.get_total()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
