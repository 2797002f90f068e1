"""Dashboard presentation state

Mirrors the admin dashboard: filters, pagination, totals, the add form,
inline row editing and exports. Nothing is patched locally after a
mutation; the list and totals are reloaded from the API instead.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from src.domain.money import cents_to_amount
from .api import ApiError, ExportedFile, NotaApiClient, SessionExpired
from .debounce import Debouncer
from .session import ClientSession

logger = logging.getLogger(__name__)

SEARCH_DEBOUNCE_SECONDS = 0.4
EMPTY_META = {"total": 0, "page": 1, "limit": 10, "totalPages": 1}
EMPTY_STATS = {"totalPaidCents": 0, "totalUnpaidCents": 0, "totalAllCents": 0}
EDIT_FIELDS = ("customerName", "date", "total", "note")


@dataclass(frozen=True)
class Notification:
    variant: str  # success | danger | warning | info
    title: str
    message: str


class Dashboard:
    """
    Admin dashboard state bound to one ClientSession

    SessionExpired from a direct call is never swallowed here; the owning
    ClientApp turns it into a switch to the login view. The debounced search
    runs in the background, so it reports expiry through on_session_expired
    instead.
    """

    def __init__(
        self,
        api: NotaApiClient,
        session: ClientSession,
        debounce_seconds: float = SEARCH_DEBOUNCE_SECONDS,
        on_session_expired: Optional[Callable[[], None]] = None,
    ):
        self.api = api
        self.session = session
        self.on_session_expired = on_session_expired

        # filters
        self.search_draft = ""
        self.search = ""
        self.status = "ALL"
        self.sort = "invoiceNo_asc"

        # pagination
        self.page = 1
        self.limit = 10

        # data
        self.items: List[Dict[str, Any]] = []
        self.meta: Dict[str, int] = dict(EMPTY_META)
        self.stats: Dict[str, int] = dict(EMPTY_STATS)

        # inline edit
        self.editing_id: Optional[str] = None
        self.edit_buffer: Dict[str, str] = {}

        self.notifications: List[Notification] = []
        self._search_debouncer = Debouncer(debounce_seconds, self._apply_search)

    # -- loading ---------------------------------------------------------

    @property
    def list_params(self) -> Dict[str, Any]:
        return {
            "search": self.search,
            "status": self.status,
            "sort": self.sort,
            "page": self.page,
            "limit": self.limit,
        }

    @property
    def export_params(self) -> Dict[str, Any]:
        return {"search": self.search, "status": self.status, "sort": self.sort}

    async def load_invoices(self) -> None:
        page = await self.api.list_invoices(self.session, **self.list_params)
        self.items = page["items"]
        self.meta = page["meta"]

    async def load_stats(self) -> None:
        self.stats = await self.api.get_stats(self.session)

    async def reload(self) -> None:
        """Replace list and totals with fresh copies from the API."""
        results = await asyncio.gather(
            self.load_invoices(), self.load_stats(), return_exceptions=True
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result

    def notify(self, variant: str, title: str, message: str) -> None:
        self.notifications.append(Notification(variant, title, message))

    # -- filters ---------------------------------------------------------

    def set_search_draft(self, text: str) -> None:
        """Record typed text; it becomes the active search once typing settles."""
        self.search_draft = text
        self._search_debouncer.trigger()

    async def flush_search(self) -> None:
        await self._search_debouncer.wait()

    async def _apply_search(self) -> None:
        search = self.search_draft.strip()
        if search == self.search:
            return
        self.search = search
        try:
            await self._filters_changed()
        except SessionExpired:
            if self.on_session_expired is None:
                raise
            self.on_session_expired()
        except ApiError as e:
            logger.warning(f"Search failed: {e.status_code} {e.message}")
            self.notify("danger", "Failed", e.message or "Failed to load invoices")

    async def _filters_changed(self) -> None:
        self.page = 1
        await self.load_invoices()

    async def set_status_filter(self, status: str) -> None:
        self.status = status
        await self._filters_changed()

    async def set_sort(self, sort: str) -> None:
        self.sort = sort
        await self._filters_changed()

    async def set_limit(self, limit: int) -> None:
        self.limit = limit
        await self._filters_changed()

    async def go_to_page(self, page: int) -> None:
        self.page = min(max(1, page), max(1, self.meta.get("totalPages", 1)))
        await self.load_invoices()

    @property
    def row_start_no(self) -> int:
        """Number shown on the first row of the current page, minus one."""
        return (self.page - 1) * self.limit

    # -- mutations -------------------------------------------------------

    async def _mutate(self, action, success_message: Optional[str], failure_message: str) -> bool:
        try:
            await action
        except SessionExpired:
            raise
        except ApiError as e:
            logger.warning(f"{failure_message}: {e.status_code} {e.message}")
            self.notify("danger", "Failed", e.message or failure_message)
            return False

        await self.reload()
        if success_message:
            self.notify("success", "Success", success_message)
        return True

    async def create_invoice(
        self,
        invoice_no: str,
        date: str,
        customer_name: str,
        total: str,
        note: str = "",
    ) -> bool:
        payload = {
            "invoiceNo": invoice_no,
            "date": date,
            "customerName": customer_name,
            "total": total,
            "note": note,
        }
        return await self._mutate(
            self.api.create_invoice(self.session, payload),
            "Invoice saved",
            "Failed to save invoice",
        )

    async def toggle_status(self, invoice_id: str, new_status: str) -> bool:
        return await self._mutate(
            self.api.set_status(self.session, invoice_id, new_status),
            None,
            "Failed to update status",
        )

    async def delete_invoice(self, invoice_id: str) -> bool:
        return await self._mutate(
            self.api.delete_invoice(self.session, invoice_id),
            None,
            "Failed to delete invoice",
        )

    # -- inline edit -----------------------------------------------------

    def start_edit(self, invoice: Dict[str, Any]) -> None:
        """Put one row in edit mode; any other row being edited is dropped."""
        self.editing_id = invoice["id"]
        self.edit_buffer = {
            "customerName": invoice.get("customerName") or "",
            "date": str(invoice.get("date") or "")[:10],
            "total": cents_to_amount(invoice.get("totalCents") or 0),
            "note": invoice.get("note") or "",
        }

    def update_edit(self, field: str, value: str) -> None:
        if self.editing_id is None:
            raise ValueError("No row is being edited")
        if field not in EDIT_FIELDS:
            raise ValueError(f"Field cannot be edited: {field}")
        self.edit_buffer[field] = value

    def cancel_edit(self) -> None:
        self.editing_id = None
        self.edit_buffer = {}

    async def save_edit(self) -> bool:
        if self.editing_id is None:
            return False

        try:
            await self.api.update_invoice(self.session, self.editing_id, dict(self.edit_buffer))
        except SessionExpired:
            raise
        except ApiError as e:
            self.notify("danger", "Failed", e.message or "Failed to update invoice")
            return False

        self.cancel_edit()
        await self.reload()
        return True

    # -- exports ---------------------------------------------------------

    async def export(self, kind: str) -> ExportedFile:
        return await self.api.export_invoices(self.session, kind, **self.export_params)

    def check_link(self, invoice_no: str) -> str:
        return self.api.check_link(invoice_no)
