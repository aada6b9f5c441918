"""Build a priced receipt from resolved cart state."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import TYPE_CHECKING

from .models import DealGroup, DealLine, DealRow, ItemRow, Receipt

if TYPE_CHECKING:
    from .catalog import Catalog


def _deal_line(catalog: Catalog, group: DealGroup) -> DealLine:
    first, second, free = (catalog.get_item(i) for i in group.item_ids)
    line = DealLine()
    if first.id == second.id:
        line.rows.append(DealRow(first.name, 2, first.unit_price * 2))
    else:
        line.rows.append(DealRow(first.name, 1, first.unit_price))
        line.rows.append(DealRow(second.name, 1, second.unit_price))
    line.rows.append(DealRow(free.name, 1, free.unit_price, is_free=True))
    return line


def build_receipt(
    catalog: Catalog,
    order: Sequence[int],
    quantities: Mapping[int, int],
    groups: Sequence[DealGroup],
    issued_at: datetime | None = None,
) -> Receipt:
    """Project cart state after deal resolution into a Receipt.

    Args:
        catalog: Catalog the item ids refer to.
        order: Distinct item ids in the order they were first scanned.
        quantities: Units still charged at full price, per item id.
        groups: Deal groups from ``resolve_deals``.
        issued_at: Receipt timestamp; defaults to now.
    """
    receipt = Receipt(issued_at=issued_at or datetime.now())
    receipt.deal_lines = [_deal_line(catalog, g) for g in groups]

    for item_id in order:
        quantity = quantities.get(item_id, 0)
        if quantity <= 0:
            continue
        item = catalog.get_item(item_id)
        receipt.item_rows.append(ItemRow(item.name, quantity, item.unit_price))

    return receipt
