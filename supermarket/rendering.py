"""Text formatting for console input and output."""

from __future__ import annotations

import re
from collections.abc import Iterable
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .catalog import Catalog
    from .models import Receipt

_TOKEN = re.compile(r"\S+")
_INTEGER = re.compile(r"\s*[+-]?\d+")


def normalize_name(text: str) -> str:
    """Capitalize the first letter of each word and lowercase the rest.

    Whitespace is kept as is: ``"green  APPLE"`` becomes ``"Green  Apple"``.
    """
    return _TOKEN.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)


def parse_quantity(text: str) -> int:
    """Parse a whole string as an integer.

    Raises:
        ValueError: If anything other than an optionally signed integer is
            present (leading whitespace is allowed).
    """
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"String '{text}' cannot be converted to an int.")
    return int(text)


def format_price(value: Decimal) -> str:
    return f"${value:.2f}"


def solid_line(width: int) -> str:
    return "-" * width


def dashed_line(width: int) -> str:
    return "- " * (width // 2)


def centered(text: str, width: int) -> str:
    if len(text) >= width:
        return text
    return " " * ((width - len(text)) // 2) + text


def _row(left: str, right: str, left_width: int, right_width: int) -> str:
    return f"{left:<{left_width}}{right:>{right_width}}"


def render_receipt(
    receipt: Receipt,
    store_name: str = "Supermarket",
    footer: str = "Thank you for shopping with us!",
    item_width: int = 30,
    price_width: int = 10,
) -> str:
    """Format a receipt as fixed-width text."""
    width = item_width + price_width
    lines: list[str] = [
        solid_line(width),
        centered(store_name, width),
        centered("Customer Receipt", width),
        centered(receipt.issued_at.strftime("%Y-%m-%d %H:%M"), width),
        solid_line(width),
    ]

    if receipt.deal_lines:
        lines.append(centered("Deals", width))
        lines.append(solid_line(width))
        lines.append(_row("Item", "Price", item_width, price_width))
        lines.append(dashed_line(width))
        for deal_line in receipt.deal_lines:
            for row in deal_line.rows:
                price = "FREE" if row.is_free else format_price(row.price)
                lines.append(_row(row.label, price, item_width, price_width))
            lines.append(dashed_line(width))
        lines.append(f"You saved {format_price(receipt.savings_total)}!")
        lines.append(solid_line(width))
        lines.append(centered("Remaining Items", width))
    else:
        lines.append(centered("Items", width))
    lines.append(solid_line(width))

    lines.append(_row("Item", "Price", item_width, price_width))
    lines.append(dashed_line(width))
    for row in receipt.item_rows:
        lines.append(
            _row(row.label, format_price(row.line_total), item_width, price_width)
        )
    lines.append(solid_line(width))

    lines.append(
        _row("Grand Total:", format_price(receipt.grand_total), item_width, price_width)
    )
    lines.append(solid_line(width))
    lines.append(centered(footer, width))
    lines.append(solid_line(width))
    return "\n".join(lines)


def render_cart(rows: Iterable[tuple[str, int]]) -> str:
    name_width, quantity_width = 26, 8
    width = name_width + quantity_width
    lines = [
        solid_line(width),
        centered("Your Cart", width),
        solid_line(width),
        _row("Item", "Quantity", name_width, quantity_width),
        dashed_line(width),
    ]
    for name, quantity in rows:
        lines.append(_row(name, str(quantity), name_width, quantity_width))
    lines.append(solid_line(width))
    return "\n".join(lines)


def render_items(catalog: Catalog) -> str:
    name_width, price_width = 25, 15
    width = name_width + price_width
    lines = [
        solid_line(width),
        centered("Supermarket Items", width),
        solid_line(width),
        _row("Item", "Price", name_width, price_width),
        dashed_line(width),
    ]
    for item in catalog.items:
        price = f"{format_price(item.unit_price)} / unit"
        lines.append(_row(item.name, price, name_width, price_width))
    lines.append(solid_line(width))
    return "\n".join(lines)


def render_deals(catalog: Catalog) -> str:
    type_width, items_width = 6, 60
    width = type_width + items_width
    lines = [
        solid_line(width),
        centered("Supermarket Deals", width),
        solid_line(width),
        centered("Deal Types", width),
        dashed_line(width),
        "Type A: Buy 2 of this item and get a 3rd free!",
        "Type B: Buy any 3 of these items (duplicates allowed) and the",
        "        cheapest is free!",
        dashed_line(width),
        centered("Active Deals", width),
        dashed_line(width),
        _row("Type", "Items", type_width, items_width),
        dashed_line(width),
    ]
    for deal in catalog.deals:
        names = ", ".join(catalog.get_item(i).name for i in deal.member_ids)
        lines.append(_row(deal.kind.value, names, type_width, items_width))
    lines.append(solid_line(width))
    return "\n".join(lines)


OPTIONS_TEXT = "\n".join([
    "- Scan items by typing an item name followed by a single space and the quantity.",
    "- To remove an item from your cart type 'remove <item>' (removes all units).",
    "- To view the items currently in your cart, type 'cart'.",
    "- To view every item available in the Supermarket, type 'items'.",
    "- To view every deal available in the Supermarket, type 'deals'.",
    "- When you are finished entering items, type 'checkout' to print your receipt.",
    "- To repeat these options, type 'options'.",
])
