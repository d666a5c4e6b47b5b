"""Entry point for the restaurant console ordering app."""

from __future__ import annotations

import logging

from rich.console import Console

from restaurant.config import FAREWELL_MESSAGE, setup_logging
from restaurant.errors import RestaurantError
from restaurant.rendering import format_exit_status
from restaurant.session import SessionController
from restaurant.signals import InterruptMonitor

logger = logging.getLogger(__name__)


def main() -> None:
    """Run one ordering session."""
    console = Console()
    try:
        try:
            setup_logging()
        except OSError as exc:
            console.print(f"Logging disabled: {exc}", markup=False)
        with InterruptMonitor() as monitor:
            try:
                result = SessionController(console).run()
                logger.info(
                    "order=%s finished completed=%s items=%d",
                    result.order.number,
                    result.completed,
                    len(result.order),
                )
            except RestaurantError as exc:
                logger.exception("unrecoverable ordering fault")
                console.print(f"Recovered from fault: {exc}", markup=False)
            console.print(format_exit_status(monitor.received_name))
    finally:
        console.print(FAREWELL_MESSAGE)


if __name__ == "__main__":
    main()
