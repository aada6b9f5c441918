"""Exception types raised by the catalog, the register and the loaders."""

from __future__ import annotations


class CheckoutError(Exception):
    """Base class for all checkout errors."""


class CatalogError(CheckoutError):
    """An item or deal could not be added to the catalog."""


class RegisterError(CheckoutError):
    """A cart mutation was rejected by the register."""


class DuplicateItemError(CatalogError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Item '{name}' already exists in the catalog.")
        self.name = name


class ReservedNameError(CatalogError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"Item name '{name}' is reserved and cannot be added to the catalog."
        )
        self.name = name


class EmptyDealError(CatalogError):
    def __init__(self) -> None:
        super().__init__("Empty deals may not be added to the catalog.")


class ItemAlreadyInDealError(CatalogError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"Item '{name}' is already included in a deal and may not be "
            "included again."
        )
        self.name = name


class UnknownItemError(CheckoutError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Item '{name}' does not exist in the catalog.")
        self.name = name


class InvalidIdError(CheckoutError, IndexError):
    def __init__(self, kind: str, ident: int) -> None:
        super().__init__(f"{kind.capitalize()} with id '{ident}' does not exist.")
        self.kind = kind
        self.ident = ident


class InvalidQuantityError(RegisterError):
    def __init__(self, name: str, quantity: int) -> None:
        super().__init__(
            f"Item quantity for item '{name}' must be an integer larger than 0."
        )
        self.name = name
        self.quantity = quantity


class ItemNotInCartError(RegisterError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Item '{name}' is not currently in your cart.")
        self.name = name


class CatalogLoadError(CheckoutError):
    """A catalog file could not be loaded.

    The message names the file and, where known, the offending line. The
    underlying error is chained as ``__cause__``.
    """

    def __init__(self, path: str, message: str, line: int | None = None) -> None:
        where = f"'{path}'" if line is None else f"'{path}' (line {line})"
        super().__init__(f"Issue in catalog file {where}: {message}")
        self.path = path
        self.line = line


class ShoppingListError(CheckoutError):
    """A shopping list file could not be scanned into the register."""

    def __init__(self, path: str, message: str, line: int | None = None) -> None:
        where = f"'{path}'" if line is None else f"'{path}' (line {line})"
        super().__init__(f"Issue in input file {where}: {message}")
        self.path = path
        self.line = line
