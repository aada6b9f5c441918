"""Supermarket checkout simulator with buy-2-get-1 and cheapest-of-3 deals."""

from .catalog import RESERVED_NAMES, Catalog
from .config import (
    CatalogConfig,
    CheckoutConfig,
    PrinterConfig,
    ReceiptConfig,
    load_config,
)
from .deals import resolve_deals
from .errors import (
    CatalogError,
    CatalogLoadError,
    CheckoutError,
    DuplicateItemError,
    EmptyDealError,
    InvalidIdError,
    InvalidQuantityError,
    ItemAlreadyInDealError,
    ItemNotInCartError,
    RegisterError,
    ReservedNameError,
    ShoppingListError,
    UnknownItemError,
)
from .models import Deal, DealGroup, DealKind, Item, Receipt
from .receipt import build_receipt
from .register import CheckoutRegister

__all__ = [
    "Catalog",
    "RESERVED_NAMES",
    "CheckoutRegister",
    "resolve_deals",
    "build_receipt",
    "Item",
    "Deal",
    "DealKind",
    "DealGroup",
    "Receipt",
    "CheckoutConfig",
    "CatalogConfig",
    "ReceiptConfig",
    "PrinterConfig",
    "load_config",
    "CheckoutError",
    "CatalogError",
    "RegisterError",
    "DuplicateItemError",
    "ReservedNameError",
    "UnknownItemError",
    "InvalidIdError",
    "EmptyDealError",
    "ItemAlreadyInDealError",
    "InvalidQuantityError",
    "ItemNotInCartError",
    "CatalogLoadError",
    "ShoppingListError",
]
