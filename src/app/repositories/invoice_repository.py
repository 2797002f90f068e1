"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, List, Tuple
from src.domain.invoice import Invoice, InvoiceStatus, InvoiceTotals


@dataclass(frozen=True)
class InvoiceFilter:
    """
    Normalized list/export criteria

    Attributes:
        search: Substring matched against invoice_no or customer_name (None = no text filter)
        status: Status to match (None = any status)
        descending: Order by invoice_no descending instead of ascending
    """

    search: Optional[str] = None
    status: Optional[InvoiceStatus] = None
    descending: bool = False


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    The store enforces invoice_no uniqueness; create() surfaces a duplicate
    as the driver's IntegrityError.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice

        Raises:
            IntegrityError: If invoice_no already exists
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_invoice_no(self, invoice_no: str) -> Optional[Invoice]:
        """
        Retrieve invoice by its exact invoice number

        Args:
            invoice_no: Unique invoice number (case-sensitive)

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def delete(self, invoice: Invoice) -> None:
        """
        Permanently remove an invoice

        Args:
            invoice: Invoice entity to delete
        """
        pass

    @abstractmethod
    async def search(
        self,
        invoice_filter: InvoiceFilter,
        limit: int = 10,
        offset: int = 0,
    ) -> Tuple[List[Invoice], int]:
        """
        Retrieve one page of invoices matching a filter

        Args:
            invoice_filter: Search/status/order criteria
            limit: Maximum number of invoices to return
            offset: Number of matching invoices to skip

        Returns:
            Tuple of (invoices on the page, total matching count)
        """
        pass

    @abstractmethod
    async def find_all(self, invoice_filter: InvoiceFilter) -> List[Invoice]:
        """
        Retrieve every invoice matching a filter, ordered, without pagination

        Args:
            invoice_filter: Search/status/order criteria

        Returns:
            List of invoices
        """
        pass

    @abstractmethod
    async def count(self, invoice_filter: InvoiceFilter) -> int:
        """
        Count invoices matching a filter

        Args:
            invoice_filter: Search/status criteria (order is ignored)

        Returns:
            Number of matching invoices
        """
        pass

    @abstractmethod
    async def sum_totals(self) -> InvoiceTotals:
        """
        Sum total_cents per status over the whole store

        Returns:
            InvoiceTotals (zeros when the store is empty)
        """
        pass
