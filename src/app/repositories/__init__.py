from .admin_repository import AdminRepository
from .invoice_repository import InvoiceRepository, InvoiceFilter

__all__ = [
    "AdminRepository",
    "InvoiceRepository",
    "InvoiceFilter",
]
