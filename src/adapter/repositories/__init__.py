from .admin_repository import SqlAlchemyAdminRepository
from .invoice_repository import SqlAlchemyInvoiceRepository

__all__ = [
    "SqlAlchemyAdminRepository",
    "SqlAlchemyInvoiceRepository",
]
