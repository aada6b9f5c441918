"""Grouping of cart items into deal groups."""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping
from typing import TYPE_CHECKING

from .models import DEAL_GROUP_SIZE, DealGroup

if TYPE_CHECKING:
    from .catalog import Catalog

logger = logging.getLogger(__name__)


def resolve_deals(
    catalog: Catalog,
    quantities: MutableMapping[int, int],
    deal_ids: Iterable[int],
) -> list[DealGroup]:
    """Group cart units into complete deal groups.

    For each deal, members are taken highest price first and poured into a
    three-slot buffer that is emitted whenever it fills, so a group may mix
    members and its last slot always holds the cheapest unit in it. Grouped
    units are taken out of ``quantities``; the 1 or 2 units left in the
    buffer after the last member are put back at full price.

    Deals are processed in ascending id order. ``quantities`` is updated in
    place.

    Returns:
        The completed groups, in the order they were filled.
    """
    groups: list[DealGroup] = []

    for deal_id in sorted(set(deal_ids)):
        deal = catalog.get_deal(deal_id)
        buffer: list[int] = []

        for item_id in deal.member_ids:
            remaining = quantities.get(item_id, 0)
            while remaining > 0:
                take = min(DEAL_GROUP_SIZE - len(buffer), remaining)
                buffer.extend([item_id] * take)
                remaining -= take
                if len(buffer) == DEAL_GROUP_SIZE:
                    groups.append(DealGroup(item_ids=tuple(buffer)))
                    buffer = []

        for item_id in deal.member_ids:
            if item_id in quantities:
                quantities[item_id] = 0

        # Leftovers go back to the cart at full price
        for item_id in buffer:
            quantities[item_id] += 1

    logger.debug("Resolved %d deal groups", len(groups))
    return groups
