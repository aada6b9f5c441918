"""Checkout register holding one customer's cart."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from .deals import resolve_deals
from .errors import InvalidQuantityError, ItemNotInCartError, UnknownItemError
from .models import DealGroup, Receipt
from .receipt import build_receipt

if TYPE_CHECKING:
    from .catalog import Catalog

logger = logging.getLogger(__name__)


@dataclass
class CartSession:
    """State for a single customer, reset after each checkout."""

    order: list[int] = field(default_factory=list)
    quantities: dict[int, int] = field(default_factory=dict)
    potential_deals: set[int] = field(default_factory=set)
    deal_groups: list[DealGroup] = field(default_factory=list)

    def clear(self) -> None:
        self.order.clear()
        self.quantities.clear()
        self.potential_deals.clear()
        self.deal_groups.clear()


class CheckoutRegister:
    """Scans items into a cart, applies deals and issues receipts.

    The catalog is only read; the register owns its session state.
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._session = CartSession()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def potential_deals(self) -> frozenset[int]:
        return frozenset(self._session.potential_deals)

    def _lookup(self, name: str) -> int:
        item_id = self._catalog.get_item_id(name)
        if item_id is None:
            raise UnknownItemError(name)
        return item_id

    def scan_item(self, name: str, quantity: int) -> None:
        """Add ``quantity`` units of an item to the cart.

        Raises:
            InvalidQuantityError: If ``quantity`` is less than 1.
            UnknownItemError: If the item is not in the catalog.
        """
        if quantity < 1:
            raise InvalidQuantityError(name, quantity)
        item_id = self._lookup(name)

        session = self._session
        if item_id in session.quantities:
            session.quantities[item_id] += quantity
        else:
            session.order.append(item_id)
            session.quantities[item_id] = quantity

        deal_id = self._catalog.get_item(item_id).deal_id
        if deal_id is not None:
            session.potential_deals.add(deal_id)
        logger.debug("Scanned %s x%d", name, quantity)

    def remove_item(self, name: str) -> None:
        """Remove every unit of an item from the cart.

        Raises:
            UnknownItemError: If the item is not in the catalog.
            ItemNotInCartError: If the item has not been scanned.
        """
        item_id = self._lookup(name)
        session = self._session
        if item_id not in session.quantities:
            raise ItemNotInCartError(name)

        session.order.remove(item_id)
        del session.quantities[item_id]
        logger.debug("Removed %s", name)

    def list_cart(self) -> list[tuple[str, int]]:
        """Return ``(name, quantity)`` pairs in the order items were first scanned."""
        return [
            (self._catalog.get_item(i).name, self._session.quantities[i])
            for i in self._session.order
        ]

    def checkout(self, issued_at: datetime | None = None) -> Receipt:
        """Apply deals, build the receipt and clear the cart."""
        session = self._session
        try:
            session.deal_groups = resolve_deals(
                self._catalog, session.quantities, session.potential_deals
            )
            receipt = build_receipt(
                self._catalog,
                session.order,
                session.quantities,
                session.deal_groups,
                issued_at=issued_at,
            )
        finally:
            session.clear()

        logger.info(
            "Checked out: %d deal groups, total %s, saved %s",
            len(receipt.deal_lines),
            receipt.grand_total,
            receipt.savings_total,
        )
        return receipt
