"""CLI entry point for the checkout simulator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from .catalog import Catalog
from .config import CheckoutConfig, load_config
from .errors import CheckoutError
from .loaders import read_deals_csv, read_items_csv, scan_shopping_list
from .models import Receipt
from .register import CheckoutRegister
from .rendering import (
    OPTIONS_TEXT,
    centered,
    normalize_name,
    parse_quantity,
    render_cart,
    render_deals,
    render_items,
    render_receipt,
    solid_line,
)

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="supermarket-checkout",
        description="Supermarket checkout simulator: scan items, apply deals "
        "and print a receipt",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML configuration file",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "-i",
        "--input",
        action="store_true",
        dest="file_input",
        help="Scan items from the shopping list file instead of the console",
    )
    parser.add_argument(
        "-o",
        "--output",
        action="store_true",
        dest="file_output",
        help="Write the receipt to the receipt file instead of the console",
    )
    parser.add_argument("--json", action="store_true", help="Print the receipt as JSON")
    parser.add_argument(
        "--pdf", type=str, default=None, metavar="FILE",
        help="Save the receipt as a PDF file",
    )
    parser.add_argument(
        "--print", action="store_true", dest="do_print",
        help="Print the receipt on the default printer",
    )
    parser.add_argument(
        "--printer", type=str, default=None,
        help="Print the receipt on the named printer",
    )

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("printers", help="List available printers")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    match args.command:
        case "printers":
            _cmd_printers()
        case _:
            _cmd_checkout(config, args)


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _cmd_printers() -> None:
    from .printer import list_printers

    try:
        printers = list_printers()
    except RuntimeError as e:
        _fail(str(e))

    if not printers:
        print("No printers available.")
        return
    print(f"Available printers: {len(printers)}")
    for p in printers:
        default_mark = " (default)" if p.is_default else ""
        print(f"  {p.name}{default_mark}")


def load_catalog(config: CheckoutConfig) -> Catalog:
    """Read the item and deal files named in the config."""
    catalog = Catalog()
    read_items_csv(catalog, config.catalog.items_path)
    read_deals_csv(catalog, config.catalog.deals_path)
    return catalog


def _cmd_checkout(config: CheckoutConfig, args) -> None:
    try:
        catalog = load_catalog(config)
    except (CheckoutError, OSError) as e:
        _fail(str(e))
    logger.debug(
        "Catalog ready: %d items, %d deals", len(catalog), len(catalog.deals)
    )

    register = CheckoutRegister(catalog)

    if args.file_input:
        try:
            scan_shopping_list(register, config.input.shopping_list_path)
        except (CheckoutError, OSError) as e:
            _fail(str(e))
    elif not run_interactive(register):
        print("\nCheckout cancelled.", file=sys.stderr)
        sys.exit(130)

    receipt = register.checkout()
    text = render_receipt(
        receipt,
        store_name=config.receipt.store_name,
        footer=config.receipt.footer,
        item_width=config.receipt.item_width,
        price_width=config.receipt.price_width,
    )

    if args.json:
        print(json.dumps(receipt.to_dict(), indent=2))
    elif args.file_output:
        path = Path(config.output.receipt_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            _fail(f"Could not create or open file: '{path}' ({e})")
        print(f"Receipt saved: {path}")
    else:
        print(text)

    _save_and_print(config, args, receipt, text)


def _save_and_print(
    config: CheckoutConfig, args, receipt: Receipt, text: str
) -> None:
    pdf_path = None
    if args.pdf:
        from .pdf import generate_pdf

        try:
            pdf_path = generate_pdf(
                receipt,
                args.pdf,
                store_name=config.receipt.store_name,
                footer=config.receipt.footer,
            )
            print(f"PDF saved: {pdf_path}")
        except ImportError as e:
            print(f"PDF error: {e}", file=sys.stderr)

    if not (args.do_print or args.printer or config.printer.enabled):
        return

    from .printer import ReceiptPrinter

    printer = ReceiptPrinter(
        printer_name=args.printer or config.printer.printer_name or None,
        title=f"{config.receipt.store_name} receipt",
    )
    try:
        # Without a PDF the text receipt is printed as is
        if pdf_path is not None:
            printer.print_pdf(pdf_path)
        else:
            printer.print_text(text)
    except (RuntimeError, FileNotFoundError) as e:
        print(f"Print error: {e}", file=sys.stderr)
        return
    print(f"Print job sent: {printer.destination}")


def _welcome(width: int = 55) -> str:
    return "\n".join([
        solid_line(width),
        centered("Welcome to Supermarket Checkout Simulator!", width),
        solid_line(width),
    ])


def run_interactive(
    register: CheckoutRegister,
    read: Callable[[str], str] = input,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> bool:
    """Read commands from the console until the customer checks out.

    End of input is treated as ``checkout``.

    Returns:
        False if the session was interrupted with Ctrl-C, True otherwise.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    catalog = register.catalog

    print(_welcome(), file=out)
    print(OPTIONS_TEXT, file=out)

    while True:
        try:
            line = normalize_name(read("> ").strip())
        except EOFError:
            break
        except KeyboardInterrupt:
            return False

        if line == "Checkout":
            break
        if line == "Options":
            print(OPTIONS_TEXT, file=out)
            continue
        if line == "Items":
            print(render_items(catalog), file=out)
            continue
        if line == "Deals":
            print(render_deals(catalog), file=out)
            continue
        if line == "Cart":
            print(render_cart(register.list_cart()), file=out)
            continue
        if line.startswith("Remove "):
            try:
                register.remove_item(line[len("Remove "):].strip())
            except CheckoutError as e:
                print(f"Error: {e}", file=err)
            continue

        name, sep, raw_quantity = line.rpartition(" ")
        if not sep:
            print(
                "Error: Invalid input. Please enter in the format "
                "'<item> <quantity>' or use 'remove <item>'.",
                file=err,
            )
            continue
        try:
            quantity = parse_quantity(raw_quantity)
        except ValueError:
            print(
                "Error: Invalid quantity. Please enter a valid integer larger than 0.",
                file=err,
            )
            continue
        try:
            register.scan_item(name.strip(), quantity)
        except CheckoutError as e:
            print(f"Error: {e}", file=err)

    return True
