"""
Get Invoice Stats Use Case

Paid / unpaid / grand totals over every invoice in the store.
"""
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceStatsDTO


class GetInvoiceStats:
    """Use case: aggregate totals (never filtered, never null)"""

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self) -> Result[InvoiceStatsDTO]:
        try:
            totals = await self.invoice_repo.sum_totals()
        except Exception as e:
            return Return.err(
                Error(
                    code="INVOICE_STATS_FAILED",
                    message="Failed to compute invoice totals",
                    reason=str(e),
                )
            )

        return Return.ok(
            InvoiceStatsDTO(
                total_paid_cents=totals.paid_cents,
                total_unpaid_cents=totals.unpaid_cents,
                total_all_cents=totals.all_cents,
            )
        )
