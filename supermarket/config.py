"""TOML configuration loader for the checkout."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class CatalogConfig:
    items_path: str = "data/items.csv"
    deals_path: str = "data/deals.csv"


@dataclass
class InputConfig:
    shopping_list_path: str = "input/shopping_list.csv"


@dataclass
class OutputConfig:
    receipt_path: str = "output/receipt.txt"


@dataclass
class ReceiptConfig:
    store_name: str = "Supermarket"
    footer: str = "Thank you for shopping with us!"
    item_width: int = 30
    price_width: int = 10


@dataclass
class PrinterConfig:
    enabled: bool = False
    printer_name: str = ""


@dataclass
class CheckoutConfig:
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    receipt: ReceiptConfig = field(default_factory=ReceiptConfig)
    printer: PrinterConfig = field(default_factory=PrinterConfig)


def load_config(path: str | Path | None = None) -> CheckoutConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    Catalog paths left out of the file can be set with the
    ``SUPERMARKET_ITEMS_PATH`` and ``SUPERMARKET_DEALS_PATH`` environment
    variables.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    cat = raw.get("catalog", {})
    inp = raw.get("input", {})
    out = raw.get("output", {})
    rcp = raw.get("receipt", {})
    prn = raw.get("printer", {})

    defaults = CatalogConfig()
    # Resolve catalog paths: config file → environment variable → default
    items_path = cat.get("items_path", "") or os.environ.get(
        "SUPERMARKET_ITEMS_PATH", defaults.items_path
    )
    deals_path = cat.get("deals_path", "") or os.environ.get(
        "SUPERMARKET_DEALS_PATH", defaults.deals_path
    )

    return CheckoutConfig(
        catalog=CatalogConfig(items_path=items_path, deals_path=deals_path),
        input=InputConfig(
            shopping_list_path=inp.get(
                "shopping_list_path", "input/shopping_list.csv"
            ),
        ),
        output=OutputConfig(
            receipt_path=out.get("receipt_path", "output/receipt.txt"),
        ),
        receipt=ReceiptConfig(
            store_name=rcp.get("store_name", "Supermarket"),
            footer=rcp.get("footer", "Thank you for shopping with us!"),
            item_width=rcp.get("item_width", 30),
            price_width=rcp.get("price_width", 10),
        ),
        printer=PrinterConfig(
            enabled=prn.get("enabled", False),
            printer_name=prn.get("printer_name", ""),
        ),
    )
