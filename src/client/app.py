"""Client navigation

Three views: login, dashboard (requires a session) and the public check
page. Any SessionExpired raised while the dashboard works sends the user
back to login, unless login is already showing.
"""

import logging
from enum import Enum
from typing import Optional

from .api import ApiError, NotaApiClient, SessionExpired
from .checker import InvoiceChecker
from .dashboard import Dashboard
from .session import ClientSession

logger = logging.getLogger(__name__)


class View(str, Enum):
    LOGIN = "login"
    DASHBOARD = "dashboard"
    CHECK = "check"


class ClientApp:

    def __init__(self, api: NotaApiClient, debounce_seconds: Optional[float] = None):
        self.api = api
        self.session = ClientSession()
        self.view = View.LOGIN
        self.dashboard: Optional[Dashboard] = None
        self.checker = InvoiceChecker(api)
        self.login_error = ""
        self._debounce_seconds = debounce_seconds

    def _new_dashboard(self) -> Dashboard:
        options = {"on_session_expired": self.session_expired}
        if self._debounce_seconds is not None:
            options["debounce_seconds"] = self._debounce_seconds
        return Dashboard(self.api, self.session, **options)

    async def login(self, username: str, password: str) -> bool:
        self.login_error = ""
        try:
            self.session = await self.api.login(username, password)
        except ApiError as e:
            self.login_error = e.message or "Login failed"
            return False

        return await self.open_dashboard()

    def logout(self) -> None:
        self.session.clear()
        self.dashboard = None
        self.view = View.LOGIN

    async def open_dashboard(self) -> bool:
        if not self.session.is_authenticated:
            self.view = View.LOGIN
            return False

        self.dashboard = self._new_dashboard()
        self.view = View.DASHBOARD
        return await self.run(self.dashboard.reload()) is not False

    async def open_check(self, invoice_no: Optional[str] = None):
        self.view = View.CHECK
        if invoice_no:
            return await self.checker.check(invoice_no)
        return None

    async def run(self, action):
        """
        Await a dashboard action, redirecting to login on SessionExpired

        Returns:
            The action's result, or False if the session expired
        """
        try:
            return await action
        except SessionExpired:
            self.session_expired()
            return False

    def session_expired(self) -> None:
        self.session.clear()
        if self.view != View.LOGIN:
            logger.info("Session expired, returning to login")
            self.view = View.LOGIN
            self.dashboard = None
