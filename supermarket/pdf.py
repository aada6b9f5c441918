"""PDF generation for receipts using ReportLab."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .rendering import format_price

if TYPE_CHECKING:
    from .models import Receipt

logger = logging.getLogger(__name__)


def generate_pdf(
    receipt: Receipt,
    output_path: str | Path,
    store_name: str = "Supermarket",
    footer: str = "Thank you for shopping with us!",
) -> Path:
    """Generate a PDF file from a Receipt.

    Args:
        receipt: The receipt to render.
        output_path: Where to save the PDF file.
        store_name: Shown in the receipt header.
        footer: Shown below the grand total.

    Returns:
        Path to the generated PDF file.

    Raises:
        ImportError: If reportlab is not installed.
    """
    try:
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import A4
        from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
        from reportlab.lib.units import mm
        from reportlab.platypus import (
            Paragraph,
            SimpleDocTemplate,
            Spacer,
            Table,
            TableStyle,
        )
    except ImportError:
        raise ImportError(
            "reportlab is required: pip install 'supermarket-checkout[pdf]'"
        )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ReceiptTitle",
        parent=styles["Title"],
        fontSize=18,
        leading=24,
    )
    subtitle_style = ParagraphStyle(
        "ReceiptSubtitle",
        parent=styles["Normal"],
        fontSize=11,
        leading=15,
        alignment=1,
        textColor=colors.grey,
    )
    heading_style = ParagraphStyle(
        "ReceiptHeading",
        parent=styles["Heading2"],
        fontSize=13,
        leading=18,
        spaceAfter=3 * mm,
    )
    body_style = ParagraphStyle(
        "ReceiptBody",
        parent=styles["Normal"],
        fontSize=10,
        leading=14,
    )

    table_style = TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4A90D9")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("ALIGN", (0, 0), (0, -1), "LEFT"),
        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ])
    col_widths = [110 * mm, 40 * mm]

    elements: list = [
        Paragraph(store_name, title_style),
        Paragraph("Customer Receipt", subtitle_style),
        Paragraph(receipt.issued_at.strftime("%Y-%m-%d %H:%M"), subtitle_style),
        Spacer(1, 6 * mm),
    ]

    if receipt.deal_lines:
        elements.append(Paragraph("Deals", heading_style))
        table_data = [["Item", "Price"]]
        free_rows: list[int] = []
        for line in receipt.deal_lines:
            for row in line.rows:
                if row.is_free:
                    free_rows.append(len(table_data))
                    table_data.append([row.label, "FREE"])
                else:
                    table_data.append([row.label, format_price(row.price)])
        deal_style = TableStyle(
            [("TEXTCOLOR", (1, r), (1, r), colors.HexColor("#2E8B57")) for r in free_rows],
            parent=table_style,
        )
        t = Table(table_data, colWidths=col_widths)
        t.setStyle(deal_style)
        elements.append(t)
        elements.append(Spacer(1, 2 * mm))
        elements.append(
            Paragraph(f"You saved {format_price(receipt.savings_total)}!", body_style)
        )
        elements.append(Spacer(1, 6 * mm))
        elements.append(Paragraph("Remaining Items", heading_style))
    else:
        elements.append(Paragraph("Items", heading_style))

    table_data = [["Item", "Price"]]
    for row in receipt.item_rows:
        table_data.append([row.label, format_price(row.line_total)])
    table_data.append(["Grand Total", format_price(receipt.grand_total)])
    total_style = TableStyle(
        [
            ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
            ("BACKGROUND", (0, -1), (-1, -1), colors.HexColor("#F5F5F5")),
        ],
        parent=table_style,
    )
    t = Table(table_data, colWidths=col_widths)
    t.setStyle(total_style)
    elements.append(t)

    elements.append(Spacer(1, 8 * mm))
    elements.append(Paragraph(footer, subtitle_style))

    doc.build(elements)
    logger.info("Wrote receipt PDF to %s", output_path)
    return output_path
