"""Receipt printing through the CUPS command line tools."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import NamedTuple

logger = logging.getLogger(__name__)


class PrinterInfo(NamedTuple):
    name: str
    is_default: bool


def _require(command: str) -> None:
    if shutil.which(command) is None:
        raise RuntimeError(
            f"{command} command not found. Install CUPS to print receipts "
            "(e.g. sudo apt install cups)."
        )


def _lpstat(flag: str) -> str:
    """Return the output of ``lpstat <flag>``, or "" if it fails."""
    try:
        result = subprocess.run(
            ["lpstat", flag], capture_output=True, text=True, timeout=10
        )
    except (subprocess.TimeoutExpired, OSError):
        logger.warning("lpstat %s did not complete", flag, exc_info=True)
        return ""
    return result.stdout if result.returncode == 0 else ""


def list_printers() -> list[PrinterInfo]:
    """List CUPS destinations, marking the system default.

    Raises:
        RuntimeError: If lpstat is not available.
    """
    _require("lpstat")
    # "system default destination: Receipt_58mm"
    _, _, default_name = _lpstat("-d").partition(":")
    default_name = default_name.strip()

    printers = []
    for line in _lpstat("-p").splitlines():
        # "printer Receipt_58mm is idle.  enabled since ..."
        words = line.split()
        if len(words) >= 2 and words[0] == "printer":
            printers.append(PrinterInfo(words[1], words[1] == default_name))
    return printers


class ReceiptPrinter:
    """Submit receipts as print jobs to one destination.

    Args:
        printer_name: CUPS destination. The system default is used if None.
        title: Job title shown in the print queue.
    """

    def __init__(self, printer_name: str | None = None, title: str = "Receipt"):
        self.printer_name = printer_name
        self.title = title

    @property
    def destination(self) -> str:
        return self.printer_name or "default printer"

    def _lpr(self, *files: str, text: str | None = None) -> None:
        _require("lpr")
        cmd = ["lpr", "-T", self.title]
        if self.printer_name:
            cmd.extend(["-P", self.printer_name])
        cmd.extend(files)

        logger.info("Sending '%s' to %s", self.title, self.destination)
        try:
            result = subprocess.run(
                cmd, input=text, capture_output=True, text=True, timeout=30
            )
        except subprocess.TimeoutExpired as e:
            raise RuntimeError("Print job timed out.") from e
        if result.returncode != 0:
            raise RuntimeError(f"Printing failed: {result.stderr.strip()}")

    def print_text(self, text: str) -> None:
        """Print a rendered text receipt; lpr reads it from stdin.

        Raises:
            RuntimeError: If lpr is missing, fails or times out.
        """
        self._lpr(text=text if text.endswith("\n") else text + "\n")

    def print_pdf(self, path: str | Path) -> None:
        """Print a receipt PDF written by ``generate_pdf``.

        Raises:
            FileNotFoundError: If the PDF doesn't exist.
            RuntimeError: If lpr is missing, fails or times out.
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        self._lpr(str(path))
