"""Rendering helpers for menu options and the checkout summary."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from rich.text import Text

from lunch_tray.config import CURRENCY_SYMBOL
from lunch_tray.constant import CATEGORY_ENTREE, CATEGORY_LABELS, CATEGORY_SIDE_DISH
from lunch_tray.models import MenuItem, OrderState

_SUMMARY_WIDTH = 36


def format_price(amount: Decimal) -> str:
    """Format an amount as currency, e.g. ``$9.18``."""
    quantized = amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{CURRENCY_SYMBOL}{quantized:,}"


def badge_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    if category == CATEGORY_ENTREE:
        return "bold #ffffff on #b23a48"
    if category == CATEGORY_SIDE_DISH:
        return "bold #0b1f0f on #5fbf72"
    return "bold #ffffff on #2f6db5"


def format_menu_option(item: MenuItem, selected: bool, highlighted: bool) -> Text:
    """Render one radio row: pointer, radio mark, name, price, then a dim detail line."""
    text = Text()
    pointer = "➤ " if highlighted else "  "
    mark = "(•)" if selected else "( )"
    name_style = "bold" if selected else ""
    text.append(f"{pointer}{mark} ")
    text.append(item.name, style=name_style)
    text.append(f"  {format_price(item.price)}")
    text.append(f"\n      {item.description}", style="dim")
    text.append(f"\n      {item.calories} cal", style="dim italic")
    return text


def format_menu_options(options: list[MenuItem], selected_id: str | None, cursor_index: int) -> Text:
    lines = Text()
    for idx, item in enumerate(options):
        if idx > 0:
            lines.append("\n\n")
        lines.append_text(format_menu_option(item, item.item_id == selected_id, idx == cursor_index))
    return lines


def _summary_line(label: str, amount: Decimal, style: str = "") -> Text:
    price = format_price(amount)
    pad = max(1, _SUMMARY_WIDTH - len(label) - len(price))
    return Text(f"{label}{' ' * pad}{price}", style=style)


def format_checkout_summary(state: OrderState) -> Text:
    """Render the order summary: selected items, then subtotal, tax and total."""
    text = Text()
    text.append("Order Summary", style="bold")
    text.append("\n")
    if state.is_empty:
        text.append("\n(no items selected)", style="dim")
    for item in state.selected_items():
        text.append("\n")
        text.append(CATEGORY_LABELS.get(item.category, item.category), style=badge_style(item.category))
        text.append("\n")
        text.append_text(_summary_line(item.name, item.price))
    text.append("\n\n")
    text.append("─" * _SUMMARY_WIDTH, style="dim")
    text.append("\n")
    text.append_text(_summary_line("Subtotal:", state.item_total))
    text.append("\n")
    text.append_text(_summary_line("Tax:", state.tax_charged))
    text.append("\n")
    text.append_text(_summary_line("Total:", state.order_total, style="bold"))
    return text


def format_running_total(state: OrderState) -> str:
    if state.is_empty:
        return ""
    return f"Subtotal {format_price(state.item_total)}"
