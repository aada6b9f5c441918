"""Tests for deal resolution."""

from collections import Counter
from decimal import Decimal

import pytest

from supermarket.catalog import Catalog
from supermarket.deals import resolve_deals


def _ids(catalog, *names):
    return tuple(catalog.get_item_id(n) for n in names)


class TestBuyTwoGetOne:
    @pytest.mark.parametrize(
        "quantity, groups, leftover",
        [(1, 0, 1), (2, 0, 2), (3, 1, 0), (5, 1, 2), (6, 2, 0), (10, 3, 1)],
    )
    def test_groups_and_leftover(self, catalog, quantity, groups, leftover):
        soda = catalog.get_item_id("Soda")
        quantities = {soda: quantity}

        result = resolve_deals(catalog, quantities, {0})

        assert len(result) == groups
        assert all(g.item_ids == (soda, soda, soda) for g in result)
        assert quantities[soda] == leftover


class TestCheapestOfThree:
    def test_one_of_each(self, catalog):
        guac, chips, salsa = _ids(catalog, "Guac", "Chips", "Salsa")
        quantities = {chips: 1, salsa: 1, guac: 1}

        result = resolve_deals(catalog, quantities, {1})

        assert [g.item_ids for g in result] == [(guac, chips, salsa)]
        assert result[0].free_item_id == salsa
        assert quantities == {chips: 0, salsa: 0, guac: 0}

    def test_group_spans_members(self, catalog):
        guac, salsa = _ids(catalog, "Guac", "Salsa")
        quantities = {salsa: 2, guac: 2}

        result = resolve_deals(catalog, quantities, {1})

        assert [g.item_ids for g in result] == [(guac, guac, salsa)]
        assert quantities == {guac: 0, salsa: 1}

    def test_greedy_fill_order(self, catalog):
        guac, chips, salsa = _ids(catalog, "Guac", "Chips", "Salsa")
        quantities = {guac: 1, chips: 4, salsa: 2}

        result = resolve_deals(catalog, quantities, {1})

        assert [g.item_ids for g in result] == [
            (guac, chips, chips),
            (chips, chips, salsa),
        ]
        assert quantities == {guac: 0, chips: 0, salsa: 1}

    def test_leftover_spread_over_two_items(self, catalog):
        guac, chips = _ids(catalog, "Guac", "Chips")
        quantities = {guac: 4, chips: 1}

        result = resolve_deals(catalog, quantities, {1})

        assert [g.item_ids for g in result] == [(guac, guac, guac)]
        assert quantities == {guac: 1, chips: 1}

    def test_members_not_in_cart_are_skipped(self, catalog):
        chips = catalog.get_item_id("Chips")
        quantities = {chips: 2}

        result = resolve_deals(catalog, quantities, {1})

        assert result == []
        assert quantities == {chips: 2}


class TestResolution:
    def test_items_outside_deals_untouched(self, catalog):
        soda, bread = _ids(catalog, "Soda", "Bread")
        quantities = {bread: 4, soda: 3}

        resolve_deals(catalog, quantities, {0})

        assert quantities[bread] == 4
        assert quantities[soda] == 0

    def test_deals_processed_in_ascending_id_order(self, catalog):
        soda, guac, chips, salsa = _ids(catalog, "Soda", "Guac", "Chips", "Salsa")

        first = resolve_deals(
            catalog, {guac: 1, chips: 1, salsa: 1, soda: 3}, [1, 0]
        )
        second = resolve_deals(
            catalog, {soda: 3, guac: 1, chips: 1, salsa: 1}, {0, 1}
        )

        assert first == second
        assert [g.item_ids for g in first] == [
            (soda, soda, soda),
            (guac, chips, salsa),
        ]

    def test_no_potential_deals(self, catalog):
        bread = catalog.get_item_id("Bread")
        quantities = {bread: 3}
        assert resolve_deals(catalog, quantities, set()) == []
        assert quantities == {bread: 3}

    @pytest.mark.parametrize(
        "cart",
        [
            {"Soda": 7, "Guac": 2, "Chips": 5, "Salsa": 1},
            {"Soda": 2, "Salsa": 8},
            {"Guac": 1, "Chips": 1},
            {"Soda": 9, "Guac": 3, "Chips": 3, "Salsa": 3, "Bread": 2},
        ],
    )
    def test_units_are_conserved(self, catalog, cart):
        quantities = {catalog.get_item_id(n): q for n, q in cart.items()}
        original = dict(quantities)
        deal_ids = {catalog.get_item(i).deal_id for i in quantities} - {None}

        result = resolve_deals(catalog, quantities, deal_ids)

        grouped = Counter(i for g in result for i in g.item_ids)
        assert all(len(g.item_ids) == 3 for g in result)
        for item_id, count in original.items():
            assert grouped[item_id] + quantities[item_id] == count

    def test_equal_prices_group_in_listed_order(self):
        cat = Catalog()
        cat.load_items([("Pear", Decimal("1.00")), ("Apple", Decimal("1.00"))])
        cat.add_deal(["Pear", "Apple"])
        pear, apple = cat.get_item_id("Pear"), cat.get_item_id("Apple")
        quantities = {apple: 2, pear: 1}

        result = resolve_deals(cat, quantities, {0})

        assert [g.item_ids for g in result] == [(pear, apple, apple)]
