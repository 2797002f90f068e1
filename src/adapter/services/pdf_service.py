"""ReportLab PDF Generation Service Implementation

Implements the invoice list report using ReportLab.
"""

from io import BytesIO
from datetime import datetime
from typing import List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.domain.base import as_utc
from src.domain.invoice import Invoice, InvoiceTotals
from src.domain.money import format_cents


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Layout: title, print info, paid/unpaid/grand total summary, then the
    invoice table. The table header repeats on every page.
    """

    TITLE = "Invoice List"
    HEADERS = ["No", "Invoice No", "Date", "Customer", "Total", "Status", "Paid At", "Note"]
    COLUMN_WIDTHS = [10 * mm, 28 * mm, 20 * mm, 38 * mm, 24 * mm, 18 * mm, 20 * mm, 32 * mm]

    def __init__(self, currency_symbol: str = "$"):
        self.currency_symbol = currency_symbol

    def _build_rows(self, invoices: List[Invoice], cell_style: ParagraphStyle) -> List[list]:
        rows = [list(self.HEADERS)]
        for index, invoice in enumerate(invoices, start=1):
            rows.append(
                [
                    str(index),
                    Paragraph(escape(invoice.invoice_no), cell_style),
                    invoice.date.strftime("%Y-%m-%d"),
                    Paragraph(escape(invoice.customer_name), cell_style),
                    format_cents(invoice.total_cents, self.currency_symbol),
                    invoice.status.value,
                    as_utc(invoice.paid_at).strftime("%Y-%m-%d") if invoice.paid_at else "-",
                    Paragraph(escape(invoice.note or "-"), cell_style),
                ]
            )
        return rows

    def generate_invoice_report(
        self,
        invoices: List[Invoice],
        totals: InvoiceTotals,
        printed_at: datetime,
    ) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=10 * mm,
            leftMargin=10 * mm,
            topMargin=12 * mm,
            bottomMargin=12 * mm,
            title=self.TITLE,
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=16,
            alignment=1,
            spaceAfter=6,
            textColor=colors.HexColor("#2C3E50"),
        )
        info_style = ParagraphStyle(
            "InfoStyle",
            parent=styles["Normal"],
            fontSize=10,
        )
        cell_style = ParagraphStyle(
            "CellStyle",
            parent=styles["Normal"],
            fontSize=8,
            leading=10,
        )

        elements.append(Paragraph(self.TITLE, title_style))
        elements.append(
            Paragraph(f"Printed at: {printed_at.strftime('%Y-%m-%d %H:%M:%S')} UTC", info_style)
        )
        elements.append(Paragraph(f"Invoice count: {len(invoices)}", info_style))
        elements.append(Spacer(1, 3 * mm))

        # Summary
        summary_data = [
            ["Total Paid:", format_cents(totals.paid_cents, self.currency_symbol)],
            ["Total Unpaid:", format_cents(totals.unpaid_cents, self.currency_symbol)],
            ["Grand Total:", format_cents(totals.all_cents, self.currency_symbol)],
        ]
        summary_table = Table(summary_data, colWidths=[30 * mm, 40 * mm], hAlign="LEFT")
        summary_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 2),
                    ("TOPPADDING", (0, 0), (-1, -1), 2),
                    ("LINEABOVE", (0, 2), (-1, 2), 1, colors.HexColor("#2C3E50")),
                ]
            )
        )
        elements.append(summary_table)
        elements.append(Spacer(1, 6 * mm))

        # Invoice table
        invoice_table = Table(
            self._build_rows(invoices, cell_style),
            colWidths=self.COLUMN_WIDTHS,
            repeatRows=1,
        )
        invoice_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    # Data rows
                    ("FONTSIZE", (0, 0), (-1, -1), 8),
                    ("ALIGN", (4, 1), (4, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    # Grid
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
                    ("TOPPADDING", (0, 0), (-1, -1), 3),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )
        elements.append(invoice_table)

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
