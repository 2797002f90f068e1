"""Spreadsheet Generation Service Interface"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice import Invoice


class SpreadsheetService(ABC):
    """Service interface for spreadsheet export"""

    @abstractmethod
    def generate_invoice_workbook(self, invoices: List[Invoice]) -> bytes:
        """
        Generate an XLSX workbook with one row per invoice

        Args:
            invoices: Filtered, ordered invoices

        Returns:
            XLSX document as bytes
        """
        pass
