from .base import BaseModel, as_utc, generate_uuid, utcnow
from .admin import Admin
from .invoice import Invoice, InvoiceStatus, InvoiceTotals

__all__ = [
    "BaseModel",
    "as_utc",
    "generate_uuid",
    "utcnow",
    "Admin",
    "Invoice",
    "InvoiceStatus",
    "InvoiceTotals",
]
