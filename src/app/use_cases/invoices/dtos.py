"""Data Transfer Objects for Invoice Use Cases

Pydantic models for command inputs and response outputs. Responses
serialize with camelCase keys (invoiceNo, totalCents, paidAt, ...).
"""

import datetime as dt
from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from src.domain.base import as_utc


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class InvoiceDTO(CamelModel):
    """Invoice as returned by the API"""

    id: str
    invoice_no: str
    date: dt.date
    customer_name: str
    total_cents: int
    status: str
    paid_at: Optional[dt.datetime] = None
    note: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    @field_validator("paid_at", "created_at", "updated_at")
    @classmethod
    def utc_timestamps(cls, value: Optional[dt.datetime]) -> Optional[dt.datetime]:
        return as_utc(value)

    class Config:
        json_schema_extra = {
            "example": {
                "id": "6f1c2a9e-3d0b-4e55-9a57-0b1f3c7d2e10",
                "invoiceNo": "INV-2026-0001",
                "date": "2026-01-15",
                "customerName": "Toko Sinar Jaya",
                "totalCents": 1230,
                "status": "UNPAID",
                "paidAt": None,
                "note": "Delivered",
                "createdAt": "2026-01-15T08:00:00Z",
                "updatedAt": "2026-01-15T08:00:00Z"
            }
        }


class PageMetaDTO(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int


class InvoicePageDTO(CamelModel):
    items: List[InvoiceDTO]
    meta: PageMetaDTO


class InvoiceStatsDTO(CamelModel):
    """Sums of totalCents over the whole store"""

    total_paid_cents: int = 0
    total_unpaid_cents: int = 0
    total_all_cents: int = 0


class DeleteInvoiceResponseDTO(BaseModel):
    ok: bool = True


class InvoiceQueryDTO(BaseModel):
    """
    Raw list/export query parameters

    Values are kept as received; normalization (trimming, clamping,
    ignoring unknown enum values) happens in the use case.
    """

    search: Optional[str] = None
    status: Optional[str] = None
    sort: Optional[str] = None
    page: Optional[str] = None
    limit: Optional[str] = None


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    total is the decimal string typed by the user (e.g. "10.05").
    """

    invoice_no: Optional[str] = None
    date: Optional[str] = None
    customer_name: Optional[str] = None
    total: Optional[Any] = None
    note: Optional[str] = None


class UpdateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for a partial invoice update

    A field left as None is not touched.
    """

    status: Optional[str] = None
    note: Optional[str] = None
    customer_name: Optional[str] = None
    date: Optional[str] = None
    total: Optional[Any] = None


class ExportFormat(str, Enum):
    EXCEL = "excel"
    PDF = "pdf"


class ExportDocumentDTO(BaseModel):
    """Rendered export ready to be sent as an attachment"""

    content: bytes
    media_type: str
    filename: str
    row_count: int = Field(..., ge=0)
