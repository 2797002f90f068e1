"""
Check Invoice Use Case

Public verification of an invoice by its number. Requires no login.
"""
from libs.result import Result, Return
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.use_cases.errors import validation_error, invoice_not_found
from .dtos import InvoiceDTO
from .inputs import clean_text


class CheckInvoice:
    """
    Use case: Look up one invoice by exact invoice number

    Business Rules:
    1. invoiceNo is trimmed; an empty value is a validation error
    2. Match is exact and case-sensitive
    3. No match is INVOICE_NOT_FOUND
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_no: str) -> Result[InvoiceDTO]:
        cleaned = clean_text(invoice_no)
        if not cleaned:
            return Return.err(validation_error("invoiceNo is required"))

        invoice = await self.invoice_repo.get_by_invoice_no(cleaned)
        if not invoice:
            return Return.err(invoice_not_found(f"invoiceNo {cleaned}"))

        return Return.ok(InvoiceDTO.model_validate(invoice))
