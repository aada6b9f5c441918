"""Tests for printer module."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from supermarket.printer import PrinterInfo, ReceiptPrinter, list_printers


def _completed(returncode=0, stdout="", stderr=""):
    result = MagicMock()
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = stderr
    return result


class TestListPrinters:
    def test_no_lpstat(self):
        """Raises RuntimeError when lpstat is not available."""
        with patch("shutil.which", return_value=None):
            with pytest.raises(RuntimeError, match="lpstat command not found"):
                list_printers()

    def test_marks_default_printer(self):
        with patch("shutil.which", return_value="/usr/bin/lpstat"):
            with patch(
                "subprocess.run",
                side_effect=[
                    _completed(stdout="system default destination: Receipt_58mm\n"),
                    _completed(stdout=(
                        "printer Receipt_58mm is idle.  enabled since Mon\n"
                        "printer Office_Laser disabled since Mon -\n"
                        "\treason unknown\n"
                    )),
                ],
            ) as mock_run:
                printers = list_printers()

        assert printers == [
            PrinterInfo("Receipt_58mm", True),
            PrinterInfo("Office_Laser", False),
        ]
        assert [c[0][0] for c in mock_run.call_args_list] == [
            ["lpstat", "-d"],
            ["lpstat", "-p"],
        ]

    def test_no_default_destination(self):
        with patch("shutil.which", return_value="/usr/bin/lpstat"):
            with patch(
                "subprocess.run",
                side_effect=[
                    _completed(stdout="no system default destination\n"),
                    _completed(stdout="printer Office_Laser is idle.\n"),
                ],
            ):
                assert list_printers() == [PrinterInfo("Office_Laser", False)]

    def test_failed_lpstat_lists_nothing(self):
        with patch("shutil.which", return_value="/usr/bin/lpstat"):
            with patch(
                "subprocess.run",
                side_effect=[
                    subprocess.TimeoutExpired(cmd="lpstat", timeout=10),
                    _completed(returncode=1, stdout="printer Ghost is idle.\n"),
                ],
            ):
                assert list_printers() == []


class TestReceiptPrinter:
    def test_print_text_pipes_receipt_to_lpr(self):
        printer = ReceiptPrinter(title="Corner Shop receipt")

        with patch("shutil.which", return_value="/usr/bin/lpr"):
            with patch("subprocess.run", return_value=_completed()) as mock_run:
                printer.print_text("Grand Total:    $4.50")

        cmd = mock_run.call_args[0][0]
        assert cmd == ["lpr", "-T", "Corner Shop receipt"]
        assert mock_run.call_args[1]["input"] == "Grand Total:    $4.50\n"

    def test_print_pdf_to_named_printer(self, tmp_path):
        receipt = tmp_path / "receipt.pdf"
        receipt.write_bytes(b"%PDF-1.4")
        printer = ReceiptPrinter(printer_name="Receipt_58mm")

        with patch("shutil.which", return_value="/usr/bin/lpr"):
            with patch("subprocess.run", return_value=_completed()) as mock_run:
                printer.print_pdf(receipt)

        assert mock_run.call_args[0][0] == [
            "lpr", "-T", "Receipt", "-P", "Receipt_58mm", str(receipt),
        ]
        assert mock_run.call_args[1]["input"] is None
        assert printer.destination == "Receipt_58mm"

    def test_print_pdf_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="File not found"):
            ReceiptPrinter().print_pdf(tmp_path / "receipt.pdf")

    def test_no_lpr(self):
        with patch("shutil.which", return_value=None):
            with pytest.raises(RuntimeError, match="lpr command not found"):
                ReceiptPrinter().print_text("receipt")

    def test_lpr_failure(self):
        with patch("shutil.which", return_value="/usr/bin/lpr"):
            with patch(
                "subprocess.run",
                return_value=_completed(returncode=1, stderr="No such destination\n"),
            ):
                with pytest.raises(
                    RuntimeError, match="Printing failed: No such destination"
                ):
                    ReceiptPrinter("Ghost").print_text("receipt")

    def test_lpr_timeout(self):
        with patch("shutil.which", return_value="/usr/bin/lpr"):
            with patch(
                "subprocess.run",
                side_effect=subprocess.TimeoutExpired(cmd="lpr", timeout=30),
            ):
                with pytest.raises(RuntimeError, match="timed out"):
                    ReceiptPrinter().print_text("receipt")

    def test_default_destination_name(self):
        assert ReceiptPrinter().destination == "default printer"
