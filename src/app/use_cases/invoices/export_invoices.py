"""ExportInvoices Use Case

Renders the filtered invoice set (no pagination) as XLSX or PDF.
"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.services.pdf_service import PdfService
from src.app.services.spreadsheet_service import SpreadsheetService
from src.app.use_cases.errors import validation_error
from src.domain.base import utcnow
from src.domain.invoice import InvoiceTotals
from .dtos import InvoiceQueryDTO, ExportFormat, ExportDocumentDTO
from .inputs import build_filter

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PDF_MEDIA_TYPE = "application/pdf"


class ExportInvoices:
    """
    Use Case: Export invoices

    Business Rules:
    1. Same search/status/sort semantics as the list; page and limit are ignored
    2. Every matching invoice is exported, up to max_rows (0 or None = no cap)
    3. PDF summary: paid and unpaid sums over the exported rows, grand total = paid + unpaid
    4. The document is rendered completely before anything is returned

    Flow:
    1. Count matching invoices and enforce the row cap
    2. Load all matching invoices in order
    3. Render with the requested service
    4. Return bytes, media type and attachment filename
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        spreadsheet_service: SpreadsheetService,
        pdf_service: PdfService,
        max_rows: Optional[int] = None,
    ):
        self.invoice_repo = invoice_repo
        self.spreadsheet_service = spreadsheet_service
        self.pdf_service = pdf_service
        self.max_rows = max_rows

    async def execute(
        self, query: InvoiceQueryDTO, export_format: ExportFormat
    ) -> Result[ExportDocumentDTO]:
        """
        Execute export

        Args:
            query: Raw search/status/sort parameters
            export_format: excel or pdf

        Returns:
            Result[ExportDocumentDTO]: Rendered document or error
        """
        invoice_filter = build_filter(query.search, query.status, query.sort)

        try:
            # Step 1: Row cap
            if self.max_rows:
                matching = await self.invoice_repo.count(invoice_filter)
                if matching > self.max_rows:
                    return Return.err(
                        validation_error(
                            f"Export is limited to {self.max_rows} invoices "
                            f"({matching} match); narrow the search or status filter"
                        )
                    )

            # Step 2: Load
            invoices = await self.invoice_repo.find_all(invoice_filter)

            # Step 3: Render
            if export_format == ExportFormat.PDF:
                content = self.pdf_service.generate_invoice_report(
                    invoices=invoices,
                    totals=InvoiceTotals.from_invoices(invoices),
                    printed_at=utcnow(),
                )
                media_type, filename = PDF_MEDIA_TYPE, "invoices.pdf"
            else:
                content = self.spreadsheet_service.generate_invoice_workbook(invoices)
                media_type, filename = XLSX_MEDIA_TYPE, "invoices.xlsx"

            logger.info(f"Exported {len(invoices)} invoices as {export_format.value}")

            return Return.ok(
                ExportDocumentDTO(
                    content=content,
                    media_type=media_type,
                    filename=filename,
                    row_count=len(invoices),
                )
            )

        except Exception as e:
            logger.exception("Invoice export failed")
            return Return.err(
                Error(
                    code="EXPORT_INVOICES_FAILED",
                    message=f"Failed to export invoices: {e}",
                    reason=str(e),
                )
            )
