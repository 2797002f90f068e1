"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List, Tuple
from sqlmodel import select, func, or_
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository, InvoiceFilter
from src.domain.base import utcnow
from src.domain.invoice import Invoice, InvoiceStatus, InvoiceTotals


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Text search uses LIKE, so its case sensitivity follows the database
    collation (case-sensitive on PostgreSQL, ASCII case-insensitive on SQLite).
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _apply_filter(self, statement, invoice_filter: InvoiceFilter):
        if invoice_filter.status:
            statement = statement.where(Invoice.status == invoice_filter.status)

        if invoice_filter.search:
            statement = statement.where(
                or_(
                    Invoice.invoice_no.contains(invoice_filter.search, autoescape=True),
                    Invoice.customer_name.contains(invoice_filter.search, autoescape=True),
                )
            )

        return statement

    def _apply_order(self, statement, invoice_filter: InvoiceFilter):
        if invoice_filter.descending:
            return statement.order_by(Invoice.invoice_no.desc())
        return statement.order_by(Invoice.invoice_no.asc())

    async def create(self, invoice: Invoice) -> Invoice:
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_invoice_no(self, invoice_no: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.invoice_no == invoice_no)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, invoice: Invoice) -> Invoice:
        invoice.updated_at = utcnow()
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def delete(self, invoice: Invoice) -> None:
        await self.session.delete(invoice)
        await self.session.flush()

    async def search(
        self,
        invoice_filter: InvoiceFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> Tuple[List[Invoice], int]:
        total = await self.count(invoice_filter)

        statement = self._apply_filter(select(Invoice), invoice_filter)
        statement = self._apply_order(statement, invoice_filter)
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all()), total

    async def find_all(self, invoice_filter: InvoiceFilter) -> List[Invoice]:
        statement = self._apply_filter(select(Invoice), invoice_filter)
        statement = self._apply_order(statement, invoice_filter)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count(self, invoice_filter: InvoiceFilter) -> int:
        statement = self._apply_filter(
            select(func.count()).select_from(Invoice), invoice_filter
        )
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def sum_totals(self) -> InvoiceTotals:
        statement = (
            select(Invoice.status, func.coalesce(func.sum(Invoice.total_cents), 0))
            .group_by(Invoice.status)
        )
        result = await self.session.execute(statement)
        sums = {InvoiceStatus(status): int(total) for status, total in result.all()}

        return InvoiceTotals(
            paid_cents=sums.get(InvoiceStatus.PAID, 0),
            unpaid_cents=sums.get(InvoiceStatus.UNPAID, 0),
        )
