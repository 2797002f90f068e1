"""Unit tests for Dashboard search error handling"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.client.api import ApiError, SessionExpired
from src.client.dashboard import Dashboard
from src.client.session import ClientSession


@pytest.fixture
def mock_api():
    api = MagicMock()
    api.list_invoices = AsyncMock()
    return api


@pytest.mark.asyncio
class TestDebouncedSearch:

    async def test_api_error_becomes_notification(self, mock_api):
        mock_api.list_invoices.side_effect = ApiError(500, "Failed to list invoices", "LIST_INVOICES_FAILED")
        dashboard = Dashboard(mock_api, ClientSession(token="t"), debounce_seconds=0.01)

        dashboard.set_search_draft("INV")
        await dashboard.flush_search()

        assert dashboard.search == "INV"
        assert len(dashboard.notifications) == 1
        assert dashboard.notifications[0].variant == "danger"
        assert dashboard.notifications[0].message == "Failed to list invoices"

    async def test_session_expired_calls_callback(self, mock_api):
        mock_api.list_invoices.side_effect = SessionExpired(401, "Invalid or expired token")
        on_expired = MagicMock()
        dashboard = Dashboard(
            mock_api, ClientSession(token="t"), debounce_seconds=0.01, on_session_expired=on_expired
        )

        dashboard.set_search_draft("INV")
        await dashboard.flush_search()

        on_expired.assert_called_once_with()
        assert dashboard.notifications == []

    async def test_unchanged_search_does_not_reload(self, mock_api):
        dashboard = Dashboard(mock_api, ClientSession(token="t"), debounce_seconds=0.01)

        dashboard.set_search_draft("   ")
        await dashboard.flush_search()

        mock_api.list_invoices.assert_not_awaited()
