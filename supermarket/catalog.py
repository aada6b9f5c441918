"""Item and deal catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from decimal import Decimal

from .errors import (
    DuplicateItemError,
    EmptyDealError,
    InvalidIdError,
    ItemAlreadyInDealError,
    ReservedNameError,
    UnknownItemError,
)
from .models import Deal, Item

logger = logging.getLogger(__name__)

# Words the console loop reads as commands; they cannot name an item.
RESERVED_NAMES: frozenset[str] = frozenset({
    "Remove",
    "Cart",
    "Items",
    "Deals",
    "Checkout",
    "Options",
})


class Catalog:
    """Registry of items and the deals that apply to them.

    Items and deals are stored in append-only lists; an id is the index into
    its list. Names are expected in canonical form (see
    ``rendering.normalize_name``) and are matched exactly.
    """

    def __init__(self, reserved_names: Iterable[str] = RESERVED_NAMES) -> None:
        self._reserved_names = frozenset(reserved_names)
        self._items: list[Item] = []
        self._deals: list[Deal] = []
        self._item_ids: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._item_ids

    @property
    def items(self) -> Sequence[Item]:
        return tuple(self._items)

    @property
    def deals(self) -> Sequence[Deal]:
        return tuple(self._deals)

    @property
    def reserved_names(self) -> frozenset[str]:
        return self._reserved_names

    def add_item(self, name: str, price: Decimal) -> Item:
        """Add an item priced per unit.

        Raises:
            ReservedNameError: If ``name`` is a command keyword.
            DuplicateItemError: If an item with ``name`` already exists.
        """
        if name in self._reserved_names:
            raise ReservedNameError(name)
        if name in self._item_ids:
            raise DuplicateItemError(name)

        item = Item(id=len(self._items), name=name, unit_price=Decimal(str(price)))
        self._items.append(item)
        self._item_ids[name] = item.id
        return item

    def add_deal(self, item_names: Sequence[str]) -> Deal:
        """Add a deal over one or more existing items.

        A single item makes a buy-2-get-1-free deal; several items make a
        cheapest-of-3-free deal. Every name is checked before anything is
        stored, so a rejected deal leaves the catalog untouched.

        Raises:
            EmptyDealError: If ``item_names`` is empty.
            UnknownItemError: If a name is not in the catalog.
            ItemAlreadyInDealError: If an item already belongs to a deal, or
                is listed twice.
        """
        if not item_names:
            raise EmptyDealError()

        members: list[Item] = []
        seen: set[int] = set()
        for name in item_names:
            item_id = self._item_ids.get(name)
            if item_id is None:
                raise UnknownItemError(name)
            item = self._items[item_id]
            if item.deal_id is not None or item_id in seen:
                raise ItemAlreadyInDealError(name)
            seen.add(item_id)
            members.append(item)

        deal_id = len(self._deals)
        # sorted() is stable, so equal prices keep their listed order
        ordered = sorted(members, key=lambda i: i.unit_price, reverse=True)
        deal = Deal(id=deal_id, member_ids=tuple(i.id for i in ordered))
        for item in members:
            item.deal_id = deal_id
        self._deals.append(deal)
        return deal

    def get_item_id(self, name: str) -> int | None:
        """Return the id of the item called ``name``, or None."""
        return self._item_ids.get(name)

    def get_item(self, item_id: int) -> Item:
        if not 0 <= item_id < len(self._items):
            raise InvalidIdError("item", item_id)
        return self._items[item_id]

    def get_deal(self, deal_id: int) -> Deal:
        if not 0 <= deal_id < len(self._deals):
            raise InvalidIdError("deal", deal_id)
        return self._deals[deal_id]

    def load_items(self, rows: Iterable[tuple[str, Decimal]]) -> int:
        """Add ``(name, price)`` rows in order; stops at the first error.

        Returns:
            Number of items added.
        """
        count = 0
        for name, price in rows:
            self.add_item(name, price)
            count += 1
        logger.info("Loaded %d items into the catalog", count)
        return count

    def load_deals(self, rows: Iterable[Sequence[str]]) -> int:
        """Add one deal per row of item names; stops at the first error.

        Returns:
            Number of deals added.
        """
        count = 0
        for names in rows:
            self.add_deal(names)
            count += 1
        logger.info("Loaded %d deals into the catalog", count)
        return count
