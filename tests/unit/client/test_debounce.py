"""Unit tests for client-side helpers"""

import asyncio
import pytest
from unittest.mock import AsyncMock

from src.client.debounce import Debouncer
from src.client.session import ClientSession


@pytest.mark.asyncio
class TestDebouncer:

    async def test_burst_runs_callback_once(self):
        callback = AsyncMock()
        debouncer = Debouncer(0.05, callback)

        for _ in range(5):
            debouncer.trigger()
        await debouncer.wait()

        callback.assert_awaited_once()

    async def test_callback_waits_for_quiet_period(self):
        callback = AsyncMock()
        debouncer = Debouncer(0.2, callback)

        debouncer.trigger()
        await asyncio.sleep(0.05)

        assert debouncer.pending
        callback.assert_not_awaited()
        await debouncer.wait()
        callback.assert_awaited_once()

    async def test_cancel(self):
        callback = AsyncMock()
        debouncer = Debouncer(0.05, callback)

        debouncer.trigger()
        debouncer.cancel()
        await debouncer.wait()

        callback.assert_not_awaited()
        assert not debouncer.pending

    async def test_wait_without_trigger(self):
        debouncer = Debouncer(0.05, AsyncMock())

        await debouncer.wait()


class TestClientSession:

    def test_authorization_header(self):
        session = ClientSession(token="abc", username="admin")

        assert session.is_authenticated
        assert session.authorization_header() == {"Authorization": "Bearer abc"}

    def test_clear(self):
        session = ClientSession(token="abc", username="admin")

        session.clear()

        assert not session.is_authenticated
        assert session.authorization_header() == {}
        assert session.username is None
