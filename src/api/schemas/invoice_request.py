"""Request schemas for the Invoice API

Pydantic models for incoming JSON bodies. Field-level rules (required
fields, amount format, status values) are enforced by the use cases so
every rejection carries the same error shape.
"""

from typing import Optional, Union
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

Amount = Union[str, int, float]


class CamelRequest(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CreateInvoiceRequestSchema(CamelRequest):
    """
    Request schema for creating an invoice

    Used for POST /invoices endpoint.
    """

    invoice_no: Optional[str] = Field(default=None, description="Unique invoice number")
    date: Optional[str] = Field(default=None, description="Invoice date (YYYY-MM-DD)")
    customer_name: Optional[str] = Field(default=None, description="Customer name")
    total: Optional[Amount] = Field(
        default=None,
        description="Total as a decimal with at most 2 fraction digits (e.g. \"10.05\")"
    )
    note: Optional[str] = Field(default=None, description="Optional note")

    class Config:
        json_schema_extra = {
            "example": {
                "invoiceNo": "INV-2026-0001",
                "date": "2026-01-15",
                "customerName": "Toko Sinar Jaya",
                "total": "12.30",
                "note": "Delivered"
            }
        }


class UpdateInvoiceRequestSchema(CamelRequest):
    """
    Request schema for a partial invoice update

    Used for PATCH /invoices/{invoice_id}. Omitted fields are unchanged;
    paidAt is not accepted and is derived from status.
    """

    status: Optional[str] = Field(default=None, description="PAID or UNPAID")
    note: Optional[str] = Field(default=None, description="Note; empty string clears it")
    customer_name: Optional[str] = Field(default=None, description="Customer name")
    date: Optional[str] = Field(default=None, description="Invoice date (YYYY-MM-DD)")
    total: Optional[Amount] = Field(default=None, description="Total as a decimal string")


class LoginRequestSchema(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
