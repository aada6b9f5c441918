"""CSV readers for the item, deal and shopping list files.

Every file starts with a header row, which is skipped. Item names are put in
canonical form with ``normalize_name`` before they reach the catalog or the
register.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import (
    CatalogError,
    CatalogLoadError,
    CheckoutError,
    ShoppingListError,
    UnknownItemError,
)
from .rendering import normalize_name, parse_quantity

if TYPE_CHECKING:
    from .catalog import Catalog
    from .register import CheckoutRegister

logger = logging.getLogger(__name__)

# Raised while decoding or parsing a file that exists
_READ_ERRORS = (UnicodeDecodeError, csv.Error, OSError)


def _open(path: str | Path):
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Cannot open file: '{path}'. Please ensure it exists.")
    return open(path, newline="", encoding="utf-8")


def _rows(fh) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(line number, cells)`` for non-blank rows after the header."""
    reader = csv.reader(fh)
    next(reader, None)
    for cells in reader:
        if not any(c.strip() for c in cells):
            continue
        yield reader.line_num, cells


def _read_failure(error: Exception) -> str:
    if isinstance(error, UnicodeDecodeError):
        return f"file is not valid UTF-8 (byte {error.start}: {error.reason})"
    return f"cannot read file ({error})"


def _parse_price(text: str) -> Decimal:
    try:
        price = Decimal(text.strip())
    except InvalidOperation:
        raise ValueError(f"'{text}' is not a number")
    if not price.is_finite() or price < 0:
        raise ValueError(f"'{text}' is not a valid price")
    return price


def read_items_csv(catalog: Catalog, path: str | Path) -> int:
    """Load ``name,price`` rows into the catalog.

    Returns:
        Number of items added.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        CatalogLoadError: On the first malformed or rejected row, or if the
            file cannot be read or decoded.
    """
    line = None

    def rows(fh) -> Iterator[tuple[str, Decimal]]:
        nonlocal line
        for line, cells in _rows(fh):
            name = normalize_name(cells[0].strip())
            if len(cells) < 2 or not cells[1].strip():
                raise CatalogLoadError(
                    str(path), f"cannot read a price for item '{name}'", line
                )
            try:
                price = _parse_price(cells[1])
            except ValueError as e:
                raise CatalogLoadError(
                    str(path), f"invalid price for item '{name}': {e}", line
                ) from e
            yield name, price

    logger.debug("Reading items from %s", path)
    try:
        with _open(path) as fh:
            return catalog.load_items(rows(fh))
    except FileNotFoundError:
        raise
    except (CatalogError, UnknownItemError) as e:
        raise CatalogLoadError(str(path), str(e), line) from e
    except _READ_ERRORS as e:
        raise CatalogLoadError(str(path), _read_failure(e)) from e


def read_deals_csv(catalog: Catalog, path: str | Path) -> int:
    """Load one deal per row of comma-separated item names.

    Returns:
        Number of deals added.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        CatalogLoadError: On the first rejected row, or if the file cannot
            be read or decoded.
    """
    line = None

    def rows(fh) -> Iterator[list[str]]:
        nonlocal line
        for line, cells in _rows(fh):
            # "Soda," is a one-item deal
            while not cells[-1].strip():
                cells.pop()
            yield [normalize_name(c.strip()) for c in cells]

    logger.debug("Reading deals from %s", path)
    try:
        with _open(path) as fh:
            return catalog.load_deals(rows(fh))
    except FileNotFoundError:
        raise
    except (CatalogError, UnknownItemError) as e:
        raise CatalogLoadError(str(path), str(e), line) from e
    except _READ_ERRORS as e:
        raise CatalogLoadError(str(path), _read_failure(e)) from e


def read_shopping_list_csv(path: str | Path) -> Iterator[tuple[int, str, str]]:
    """Yield ``(line number, item name, raw quantity)`` from a shopping list."""
    with _open(path) as fh:
        for line, cells in _rows(fh):
            name = normalize_name(cells[0].strip())
            quantity = cells[1] if len(cells) > 1 else ""
            yield line, name, quantity


def scan_shopping_list(register: CheckoutRegister, path: str | Path) -> int:
    """Scan every row of a shopping list into the register.

    Returns:
        Number of rows scanned.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ShoppingListError: On the first row that cannot be scanned, or if
            the file cannot be read or decoded.
    """
    count = 0
    try:
        for line, name, raw_quantity in read_shopping_list_csv(path):
            try:
                quantity = parse_quantity(raw_quantity)
            except ValueError as e:
                raise ShoppingListError(
                    str(path), f"invalid quantity for item '{name}'", line
                ) from e
            try:
                register.scan_item(name, quantity)
            except CheckoutError as e:
                raise ShoppingListError(str(path), str(e), line) from e
            count += 1
    except FileNotFoundError:
        raise
    except _READ_ERRORS as e:
        raise ShoppingListError(str(path), _read_failure(e)) from e

    logger.info("Scanned %d rows from %s", count, path)
    return count
