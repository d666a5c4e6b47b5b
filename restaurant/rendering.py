"""Rendering helpers for the console session."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from rich.table import Table
from rich.text import Text

from restaurant.models import Category, MenuEntry, OrderItem


def badge_style(category: Category) -> str:
    """Return a consistent badge style for category tags."""
    if category is Category.DRINK:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def badge_letter(category: Category) -> str:
    return "D" if category is Category.DRINK else "F"


def format_money(amount: Decimal) -> str:
    return f"${amount:.2f}"


def render_menu(entries: Iterable[MenuEntry]) -> Table:
    """Render the menu list with a colored category tag per row."""
    table = Table(title="Menu List", title_justify="left", show_header=True, header_style="bold")
    table.add_column("")
    table.add_column("Key")
    table.add_column("Item")
    table.add_column("Price", justify="right")
    for entry in entries:
        table.add_row(
            Text(badge_letter(entry.category), style=badge_style(entry.category)),
            entry.key,
            entry.name,
            format_money(entry.unit_price),
        )
    return table


def format_received(item: OrderItem) -> Text:
    """Render the kitchen's receipt notification for one item."""
    text = Text()
    text.append("\n[RESTAURANT]", style="bold")
    text.append(f" Received order ({item.metadata})")
    return text


def format_summary(signature: str, total: Decimal) -> Text:
    text = Text()
    text.append("\nOrder Completed. ", style="bold")
    text.append(f"Signature: {signature}\n")
    text.append(f"Total: {format_money(total)}", style="bold")
    return text


def format_change(change: Decimal) -> Text:
    return Text(f"Change: {format_money(change)}", style="bold")


def format_exit_status(signal_name: str | None) -> str:
    """Final status line: the observed interrupt, or a clean completion."""
    if signal_name is not None:
        return f"Received signal: {signal_name}"
    return "Program completed successfully."
