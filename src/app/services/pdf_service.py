"""PDF Generation Service Interface

Defines the contract for PDF generation operations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List
from src.domain.invoice import Invoice, InvoiceTotals


class PdfService(ABC):
    """
    Service interface for PDF generation

    Renders the invoice list report.
    """

    @abstractmethod
    def generate_invoice_report(
        self,
        invoices: List[Invoice],
        totals: InvoiceTotals,
        printed_at: datetime,
    ) -> bytes:
        """
        Generate the invoice list report PDF

        Args:
            invoices: Filtered, ordered invoices (one table row each)
            totals: Paid/unpaid sums over the same invoices
            printed_at: Timestamp shown as the print time

        Returns:
            PDF document as bytes
        """
        pass
