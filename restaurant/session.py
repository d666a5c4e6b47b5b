"""Interactive ordering session: item selection, kitchen handoff, payment."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from rich.console import Console

from restaurant.config import ORDER_NUMBER
from restaurant.console_input import ConsoleInput
from restaurant.constant import DONE_KEYWORD
from restaurant.data import MENU_BY_KEY, build_item
from restaurant.models import Category, MenuEntry, OrderItem
from restaurant.order import MenuOrder
from restaurant.pipeline import OrderPipeline
from restaurant.rendering import format_change, format_received, format_summary, render_menu

logger = logging.getLogger(__name__)


@dataclass
class SessionResult:
    """Outcome of one ordering session."""

    order: MenuOrder
    completed: bool
    change: Decimal | None = None
    submitted: int = 0
    faults: list[Exception] = field(default_factory=list)


class SessionController:
    """Drive one customer through ordering and payment on the console."""

    def __init__(
        self,
        console: Console,
        reader: ConsoleInput | None = None,
        order_number: str = ORDER_NUMBER,
        menu: dict[str, MenuEntry] | None = None,
    ) -> None:
        self.console = console
        self.reader = reader or ConsoleInput(console.input)
        self.order_number = order_number
        self.menu = MENU_BY_KEY if menu is None else menu

    def run(self) -> SessionResult:
        order = MenuOrder(self.order_number)
        logger.info("order=%s session started", order.number)

        with OrderPipeline(order, on_received=self._announce_received) as pipeline:
            try:
                self._select_items(pipeline)
            except EOFError:
                logger.info("order=%s end of input during selection", order.number)
                ended_early = True
            else:
                ended_early = False

            self.console.print("\nWaiting for order to be processed...")
            faults = pipeline.close()

        for fault in faults:
            self.console.print(f"Recovered from fault: {fault}", markup=False)

        if ended_early:
            return SessionResult(order=order, completed=False, submitted=pipeline.submitted, faults=faults)

        items, signature = order.snapshot()
        total = sum((item.total for item in items), Decimal("0"))
        self.console.print(format_summary(signature, total))

        try:
            change = self._collect_payment(total)
        except EOFError:
            logger.info("order=%s end of input during payment", order.number)
            return SessionResult(order=order, completed=False, submitted=pipeline.submitted, faults=faults)

        logger.info("order=%s paid total=%.2f change=%.2f", order.number, total, change)
        return SessionResult(
            order=order, completed=True, change=change, submitted=pipeline.submitted, faults=faults
        )

    def _announce_received(self, item: OrderItem) -> None:
        self.console.print(format_received(item))

    def _select_items(self, pipeline: OrderPipeline) -> None:
        while True:
            self.console.print(render_menu(self.menu.values()))
            choice = self.reader.read_choice(f"Enter your choice (type '{DONE_KEYWORD}' to complete order): ").lower()
            if choice == DONE_KEYWORD:
                return

            entry = self.menu.get(choice)
            if entry is None:
                self.console.print("Invalid choice. Please try again.")
                continue

            try:
                quantity = self.reader.read_int("Enter quantity: ")
            except ValueError:
                quantity = 0
            if quantity < 1:
                self.console.print("Please enter a valid quantity.")
                continue

            refills = 0
            if entry.category is Category.DRINK:
                try:
                    refills = self.reader.read_int("Enter refills: ")
                except ValueError:
                    refills = -1
                if refills < 0:
                    self.console.print("Please enter a valid refill count.")
                    continue

            item = build_item(entry, quantity, refills)
            logger.debug("order=%s submitting %s", self.order_number, item.metadata)
            pipeline.submit(item)

    def _collect_payment(self, total: Decimal) -> Decimal:
        while True:
            try:
                amount = self.reader.read_decimal("Enter your amount: ")
            except ValueError:
                self.console.print("Please enter a valid amount.")
                continue

            if amount >= total:
                change = amount - total
                self.console.print(format_change(change))
                return change
            self.console.print("Insufficient amount. Please try again.")
