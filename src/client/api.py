"""HTTP client for the Nota API"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from config import ApplicationConfig
from .session import ClientSession

logger = logging.getLogger(__name__)

FILENAME_PATTERN = re.compile(r'filename="?([^";]+)"?')


class ApiError(Exception):
    """Non-2xx response; message is the server-provided text."""

    def __init__(self, status_code: int, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code


class SessionExpired(ApiError):
    """A protected call was rejected with 401; the session has been cleared."""
    pass


@dataclass(frozen=True)
class ExportedFile:
    filename: str
    media_type: str
    content: bytes


def _error_from_response(response: httpx.Response) -> tuple:
    try:
        body = response.json()
    except ValueError:
        return None, response.text or response.reason_phrase

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            return error.get("code"), error.get("message") or response.reason_phrase
        if body.get("message"):
            return None, body["message"]
    return None, response.reason_phrase


class NotaApiClient:
    """
    Async client for the Nota API

    Protected calls take the ClientSession explicitly. A 401 on a protected
    call clears that session and raises SessionExpired; every other error
    response raises ApiError with the server message. Check links point at
    check_base_url, the web client origin (CLIENT_BASE_URL by default).

    Usage:
        async with NotaApiClient("http://localhost:4000") as api:
            session = await api.login("admin", "secret")
            page = await api.list_invoices(session, search="INV")
    """

    def __init__(
        self,
        base_url: str,
        api_prefix: str = "/api",
        check_base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ):
        self.api_prefix = api_prefix
        self.check_base_url = (check_base_url or ApplicationConfig.CLIENT_BASE_URL).rstrip("/")
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        session: Optional[ClientSession] = None,
        protected: bool = True,
        **kwargs,
    ) -> httpx.Response:
        headers = session.authorization_header() if session is not None else {}
        response = await self._client.request(
            method, f"{self.api_prefix}{path}", headers=headers, **kwargs
        )

        if response.is_success:
            return response

        code, message = _error_from_response(response)
        if response.status_code == 401 and protected:
            if session is not None:
                session.clear()
            logger.info(f"{method} {path} rejected with 401, session cleared")
            raise SessionExpired(response.status_code, message, code)

        raise ApiError(response.status_code, message, code)

    @staticmethod
    def _filter_params(**params) -> Dict[str, Any]:
        return {key: value for key, value in params.items() if value not in (None, "")}

    async def health(self) -> Dict[str, Any]:
        response = await self._request("GET", "/health", protected=False)
        return response.json()

    async def login(self, username: str, password: str) -> ClientSession:
        response = await self._request(
            "POST",
            "/auth/login",
            protected=False,
            json={"username": username, "password": password},
        )
        return ClientSession(token=response.json()["token"], username=username)

    async def list_invoices(
        self,
        session: ClientSession,
        search: Optional[str] = None,
        status: Optional[str] = None,
        sort: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        params = self._filter_params(search=search, status=status, sort=sort, page=page, limit=limit)
        response = await self._request("GET", "/invoices", session, params=params)
        return response.json()

    async def get_stats(self, session: ClientSession) -> Dict[str, int]:
        response = await self._request("GET", "/invoices/stats", session)
        return response.json()

    async def create_invoice(self, session: ClientSession, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = await self._request("POST", "/invoices", session, json=payload)
        return response.json()

    async def update_invoice(
        self, session: ClientSession, invoice_id: str, changes: Dict[str, Any]
    ) -> Dict[str, Any]:
        response = await self._request(
            "PATCH", f"/invoices/{quote(invoice_id, safe='')}", session, json=changes
        )
        return response.json()

    async def set_status(self, session: ClientSession, invoice_id: str, status: str) -> Dict[str, Any]:
        return await self.update_invoice(session, invoice_id, {"status": status})

    async def delete_invoice(self, session: ClientSession, invoice_id: str) -> Dict[str, Any]:
        response = await self._request("DELETE", f"/invoices/{quote(invoice_id, safe='')}", session)
        return response.json()

    async def export_invoices(
        self,
        session: ClientSession,
        kind: str,
        search: Optional[str] = None,
        status: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> ExportedFile:
        """
        Download an export

        Args:
            session: Logged-in session
            kind: "excel" or "pdf"
            search, status, sort: Same filters as the list (no pagination)
        """
        if kind not in ("excel", "pdf"):
            raise ValueError(f"Unknown export kind: {kind}")

        params = self._filter_params(search=search, status=status, sort=sort)
        response = await self._request("GET", f"/exports/{kind}", session, params=params)

        match = FILENAME_PATTERN.search(response.headers.get("content-disposition", ""))
        default_name = "invoices.xlsx" if kind == "excel" else "invoices.pdf"
        return ExportedFile(
            filename=match.group(1) if match else default_name,
            media_type=response.headers.get("content-type", ""),
            content=response.content,
        )

    async def check_invoice(self, invoice_no: str) -> Dict[str, Any]:
        """Public lookup; no session needed."""
        response = await self._request(
            "GET", "/invoices/check", protected=False, params={"invoiceNo": invoice_no}
        )
        return response.json()

    def check_link(self, invoice_no: str) -> str:
        """Shareable link to the public check page for an invoice."""
        return f"{self.check_base_url}/check?invoiceNo={quote(invoice_no, safe='')}"
