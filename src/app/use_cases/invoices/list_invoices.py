"""
List Invoices Use Case

Filtered, sorted, paginated invoice list for the dashboard.
"""
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceQueryDTO, InvoicePageDTO, InvoiceDTO, PageMetaDTO
from .inputs import build_filter, parse_page, parse_limit, page_window, total_pages


class ListInvoices:
    """
    Use case: List invoices

    Unknown status/sort values are ignored rather than rejected, page is
    clamped to >= 1 and limit to [1, 100]. meta.total counts the filtered
    set and does not depend on the page.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, query: InvoiceQueryDTO) -> Result[InvoicePageDTO]:
        """
        List one page of invoices.

        Args:
            query: Raw search/status/sort/page/limit parameters

        Returns:
            Result[InvoicePageDTO]: Page items and pagination metadata
        """
        invoice_filter = build_filter(query.search, query.status, query.sort)
        page = parse_page(query.page)
        limit = parse_limit(query.limit)
        offset, limit = page_window(page, limit)

        try:
            invoices, total = await self.invoice_repo.search(
                invoice_filter, limit=limit, offset=offset
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_INVOICES_FAILED",
                    message="Failed to list invoices",
                    reason=str(e),
                )
            )

        return Return.ok(
            InvoicePageDTO(
                items=[InvoiceDTO.model_validate(invoice) for invoice in invoices],
                meta=PageMetaDTO(
                    total=total,
                    page=page,
                    limit=limit,
                    total_pages=total_pages(total, limit),
                ),
            )
        )
