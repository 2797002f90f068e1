"""Public invoice check page state"""

from typing import Any, Dict, List, Optional

from src.domain.money import format_cents
from .api import ApiError, NotaApiClient

NOT_FOUND_MESSAGE = "NOT FOUND"


class InvoiceChecker:
    """Looks up an invoice by number without logging in."""

    def __init__(self, api: NotaApiClient):
        self.api = api
        self.invoice_no = ""
        self.result: Optional[Dict[str, Any]] = None
        self.error = ""

    async def check(self, invoice_no: str) -> Optional[Dict[str, Any]]:
        self.invoice_no = invoice_no or ""
        self.result = None
        self.error = ""

        cleaned = self.invoice_no.strip()
        if not cleaned:
            self.error = "invoiceNo is required"
            return None

        try:
            self.result = await self.api.check_invoice(cleaned)
        except ApiError as e:
            self.error = NOT_FOUND_MESSAGE if e.status_code == 404 else (e.message or "Check failed")

        return self.result

    def summary_lines(self) -> List[str]:
        if not self.result:
            return []
        invoice = self.result
        paid_at = invoice.get("paidAt")
        return [
            f"Result: VALID {invoice['status']}",
            f"Invoice No: {invoice['invoiceNo']}",
            f"Date: {str(invoice['date'])[:10]}",
            f"Customer: {invoice['customerName']}",
            f"Total: {format_cents(invoice['totalCents'])}",
            f"Paid At: {str(paid_at)[:10] if paid_at else '-'}",
            f"Note: {invoice.get('note') or '-'}",
        ]
