"""openpyxl Spreadsheet Service Implementation"""

import logging
from io import BytesIO
from typing import List

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from src.app.services.spreadsheet_service import SpreadsheetService
from src.domain.base import as_utc
from src.domain.invoice import Invoice
from src.domain.money import cents_to_decimal

logger = logging.getLogger(__name__)


class OpenpyxlSpreadsheetService(SpreadsheetService):
    """
    openpyxl implementation of SpreadsheetService

    Sheet "Invoices": header row plus one row per invoice. The total column
    holds a numeric value with a currency number format, not a string.
    """

    SHEET_TITLE = "Invoices"
    HEADER_FILL = PatternFill(start_color="2C3E50", end_color="2C3E50", fill_type="solid")
    HEADER_FONT = Font(color="FFFFFF", bold=True)

    # (header, width)
    COLUMNS = [
        ("Invoice No", 20),
        ("Date", 15),
        ("Customer", 25),
        ("Total (USD)", 14),
        ("Status", 10),
        ("Paid At", 18),
        ("Note", 25),
    ]
    TOTAL_COLUMN = 4

    def __init__(self, currency_symbol: str = "$"):
        self.total_number_format = f'"{currency_symbol}"#,##0.##'

    def generate_invoice_workbook(self, invoices: List[Invoice]) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = self.SHEET_TITLE

        for col_num, (header, width) in enumerate(self.COLUMNS, 1):
            cell = ws.cell(row=1, column=col_num, value=header)
            cell.font = self.HEADER_FONT
            cell.fill = self.HEADER_FILL
            cell.alignment = Alignment(horizontal="center")
            ws.column_dimensions[get_column_letter(col_num)].width = width

        for row_num, invoice in enumerate(invoices, 2):
            values = [
                invoice.invoice_no,
                invoice.date.strftime("%Y-%m-%d"),
                invoice.customer_name,
                cents_to_decimal(invoice.total_cents),
                invoice.status.value,
                as_utc(invoice.paid_at).strftime("%Y-%m-%d") if invoice.paid_at else "",
                invoice.note or "",
            ]
            for col_num, value in enumerate(values, 1):
                ws.cell(row=row_num, column=col_num, value=value)

            ws.cell(row=row_num, column=self.TOTAL_COLUMN).number_format = self.total_number_format

        output = BytesIO()
        wb.save(output)

        logger.info(f"Rendered {len(invoices)} invoices to spreadsheet")

        return output.getvalue()
