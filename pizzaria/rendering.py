"""Rich rendering helpers for the TUI."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from pizzaria.data import MenuItem
from pizzaria.message import format_entry_line, format_money
from pizzaria.models import DRINK, HAMBURGER, PIZZA, CartEntry

CATEGORY_BADGES: dict[str, str] = {
    PIZZA: "P",
    HAMBURGER: "H",
    DRINK: "B",
}


def badge_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    if category == PIZZA:
        return "bold #ffffff on #b23a48"
    if category == DRINK:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #e8a33d"


def category_badge(category: str) -> Text:
    return Text(CATEGORY_BADGES[category], style=badge_style(category))


def format_entry_label(entry: CartEntry) -> Text:
    """Render a cart entry as its summary line behind a colored category tag."""
    text = category_badge(entry.category)
    text.append(f" {format_entry_line(entry)}")
    return text


def format_menu_item(item: MenuItem) -> str:
    label = item.name if item.size is None else f"{item.name} ({item.size})"
    return f"{label}  {format_money(item.price)}"


def format_total(label: str, amount: Decimal) -> Text:
    text = Text()
    text.append(f"{label}: ", style="bold")
    text.append(format_money(amount), style="bold #5fbf72")
    return text
