"""Shared fixtures for checkout tests."""

from decimal import Decimal

import pytest

from supermarket.catalog import Catalog


@pytest.fixture
def catalog():
    """Catalog with one buy-2-get-1 deal and one cheapest-of-3 deal.

    Deal 0: Soda ($1.00)
    Deal 1: Chips ($3.00), Salsa ($2.00), Guac ($4.00)
    Bread is not part of any deal.
    """
    cat = Catalog()
    cat.load_items([
        ("Soda", Decimal("1.00")),
        ("Chips", Decimal("3.00")),
        ("Salsa", Decimal("2.00")),
        ("Guac", Decimal("4.00")),
        ("Bread", Decimal("2.50")),
    ])
    cat.load_deals([["Soda"], ["Chips", "Salsa", "Guac"]])
    return cat
