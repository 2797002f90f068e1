"""Invoice Domain Entity

A nota: billable record identified by a unique invoice number.
"""

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, Date, DateTime, String, Text
from src.domain.base import BaseModel, generate_uuid, utcnow


INVOICE_NO_MAX_LENGTH = 64
CUSTOMER_NAME_MAX_LENGTH = 255


class InvoiceStatus(str, Enum):
    """Invoice settlement status"""
    PAID = "PAID"
    UNPAID = "UNPAID"


class Invoice(BaseModel, table=True):
    """
    Invoice - single row of the invoice store

    Domain Rules:
    - invoice_no is unique, case-sensitive and never changes after creation
    - total_cents is a non-negative integer amount in cents
    - status PAID <=> paid_at is set; both change together via apply_status
    - New invoices start UNPAID with no paid_at
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_status', 'status'),
        Index('ix_invoices_customer_name', 'customer_name'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Opaque invoice identifier (uuid)"
    )

    invoice_no: str = Field(
        sa_column=Column(String(INVOICE_NO_MAX_LENGTH), nullable=False, unique=True),
        description="Unique invoice number (e.g., INV-2026-0001)"
    )

    date: dt.date = Field(
        sa_column=Column(Date, nullable=False),
        description="Invoice date"
    )

    customer_name: str = Field(
        sa_column=Column(String(CUSTOMER_NAME_MAX_LENGTH), nullable=False),
        description="Customer name"
    )

    total_cents: int = Field(
        sa_column=Column(BigInteger, nullable=False, default=0),
        description="Total amount in cents"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.UNPAID,
        description="Settlement status (PAID, UNPAID)"
    )

    paid_at: Optional[dt.datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True),
        description="Timestamp when the invoice was marked PAID"
    )

    note: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Free-form note"
    )

    created_at: dt.datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp"
    )

    updated_at: dt.datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp"
    )

    def apply_status(self, status: InvoiceStatus, now: Optional[dt.datetime] = None) -> None:
        """Set status and keep paid_at in step with it."""
        self.status = status
        self.paid_at = (now or utcnow()) if status == InvoiceStatus.PAID else None


@dataclass(frozen=True)
class InvoiceTotals:
    """Sums of total_cents per status"""

    paid_cents: int = 0
    unpaid_cents: int = 0

    @property
    def all_cents(self) -> int:
        return self.paid_cents + self.unpaid_cents

    @classmethod
    def from_invoices(cls, invoices: Iterable[Invoice]) -> "InvoiceTotals":
        paid = unpaid = 0
        for invoice in invoices:
            if invoice.status == InvoiceStatus.PAID:
                paid += invoice.total_cents or 0
            else:
                unpaid += invoice.total_cents or 0
        return cls(paid_cents=paid, unpaid_cents=unpaid)
