"""Invoice use cases"""
from .list_invoices import ListInvoices
from .get_invoice_stats import GetInvoiceStats
from .check_invoice import CheckInvoice
from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .delete_invoice import DeleteInvoice
from .export_invoices import ExportInvoices
from .dtos import (
    InvoiceDTO,
    PageMetaDTO,
    InvoicePageDTO,
    InvoiceStatsDTO,
    DeleteInvoiceResponseDTO,
    InvoiceQueryDTO,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    ExportFormat,
    ExportDocumentDTO,
)

__all__ = [
    "ListInvoices",
    "GetInvoiceStats",
    "CheckInvoice",
    "CreateInvoice",
    "UpdateInvoice",
    "DeleteInvoice",
    "ExportInvoices",
    "InvoiceDTO",
    "PageMetaDTO",
    "InvoicePageDTO",
    "InvoiceStatsDTO",
    "DeleteInvoiceResponseDTO",
    "InvoiceQueryDTO",
    "CreateInvoiceCommandDTO",
    "UpdateInvoiceCommandDTO",
    "ExportFormat",
    "ExportDocumentDTO",
]
