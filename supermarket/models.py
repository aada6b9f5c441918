"""Data models for catalog items, deals and receipts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

DEAL_GROUP_SIZE = 3


class DealKind(Enum):
    """Promotion shape, derived from the number of items in a deal."""

    BUY_TWO_GET_ONE = "A"  # 3 of the same item, the 3rd is free
    CHEAPEST_OF_THREE = "B"  # any 3 of the member items, the cheapest is free


@dataclass
class Item:
    """An item available for purchase."""

    id: int
    name: str
    unit_price: Decimal
    deal_id: int | None = None


@dataclass(frozen=True)
class Deal:
    """A promotion over one or more catalog items.

    ``member_ids`` is ordered highest to lowest by unit price; items with the
    same price keep the order they were listed in.
    """

    id: int
    member_ids: tuple[int, ...]

    @property
    def kind(self) -> DealKind:
        if len(self.member_ids) == 1:
            return DealKind.BUY_TWO_GET_ONE
        return DealKind.CHEAPEST_OF_THREE


@dataclass(frozen=True)
class DealGroup:
    """Three item ids that together complete one deal.

    The last slot holds the item given away for free.
    """

    item_ids: tuple[int, int, int]

    @property
    def free_item_id(self) -> int:
        return self.item_ids[-1]


@dataclass
class DealRow:
    """One printed row of a deal line."""

    item_name: str
    quantity: int
    price: Decimal
    is_free: bool = False

    @property
    def label(self) -> str:
        return f"{self.item_name} ({self.quantity})"


@dataclass
class DealLine:
    """The rows printed for a single deal group."""

    rows: list[DealRow] = field(default_factory=list)

    @property
    def paid(self) -> Decimal:
        return sum((r.price for r in self.rows if not r.is_free), Decimal("0"))

    @property
    def saved(self) -> Decimal:
        return sum((r.price for r in self.rows if r.is_free), Decimal("0"))


@dataclass
class ItemRow:
    """A cart item charged at full price."""

    item_name: str
    quantity: int
    unit_price: Decimal

    @property
    def label(self) -> str:
        return f"{self.item_name} ({self.quantity})"

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity


@dataclass
class Receipt:
    """Priced, itemized result of a checkout."""

    issued_at: datetime
    deal_lines: list[DealLine] = field(default_factory=list)
    item_rows: list[ItemRow] = field(default_factory=list)

    @property
    def deal_rows(self) -> list[DealRow]:
        return [row for line in self.deal_lines for row in line.rows]

    @property
    def savings_total(self) -> Decimal:
        return sum((line.saved for line in self.deal_lines), Decimal("0"))

    @property
    def grand_total(self) -> Decimal:
        paid = sum((line.paid for line in self.deal_lines), Decimal("0"))
        return paid + sum((row.line_total for row in self.item_rows), Decimal("0"))

    def to_dict(self) -> dict:
        """Return a JSON-serializable view; amounts are two-decimal strings."""
        return {
            "issued_at": self.issued_at.isoformat(timespec="minutes"),
            "deals": [
                [
                    {
                        "item": r.item_name,
                        "quantity": r.quantity,
                        "price": f"{r.price:.2f}",
                        "free": r.is_free,
                    }
                    for r in line.rows
                ]
                for line in self.deal_lines
            ],
            "items": [
                {
                    "item": r.item_name,
                    "quantity": r.quantity,
                    "price": f"{r.line_total:.2f}",
                }
                for r in self.item_rows
            ],
            "savings": f"{self.savings_total:.2f}",
            "total": f"{self.grand_total:.2f}",
        }
