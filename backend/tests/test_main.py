"""
Wordbank Backend — Application Lifespan Tests
==============================================

What:  Tests for store ownership, startup resilience, and the background
       connection check across startup and shutdown.
"""

import asyncio
from typing import List
from unittest.mock import AsyncMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from wordbank.config import settings
from wordbank.database import UnavailableWordStore
from wordbank.main import create_app
from wordbank.models.word import Word
from wordbank.store_base import WordStore


@pytest.fixture(autouse=True)
def quiet_logging_setup():
    """basicConfig(force=True) in setup_logging would drop caplog's handler."""
    with patch("wordbank.main.setup_logging"):
        yield


class HangingPingStore(WordStore):
    """Store whose ping never answers, like a server behind a dropped route."""

    def __init__(self):
        self.released = asyncio.Event()

    async def insert_word(self, word: Word) -> Word:
        return word

    async def find_words(self) -> List[Word]:
        return []

    async def ping(self) -> bool:
        await self.released.wait()
        return True

    async def close(self) -> None:
        pass


class TestLifespan:

    @pytest.mark.asyncio
    async def test_injected_store_is_not_closed(self, memory_store):
        app = create_app(word_store=memory_store)

        async with app.router.lifespan_context(app):
            assert app.state.word_store is memory_store

        assert memory_store.closed is False

    @pytest.mark.asyncio
    async def test_built_store_is_closed(self):
        store = AsyncMock()
        store.ping.return_value = True
        app = create_app()

        with patch("wordbank.main.create_word_store", return_value=store) as factory:
            async with app.router.lifespan_context(app):
                assert app.state.word_store is store
                assert await app.state.connection_check is True

        factory.assert_called_once()
        store.ping.assert_awaited_once()
        store.close.assert_awaited_once()
        assert app.state.word_store is None

    @pytest.mark.asyncio
    async def test_unreachable_store_does_not_block_startup(self, failing_store, caplog):
        app = create_app(word_store=failing_store)

        async with app.router.lifespan_context(app):
            assert await app.state.connection_check is False

        assert "Error connecting to MongoDB" in caplog.text


class TestUnusableConnectionString:
    """A bad MONGO_URI is logged and the service keeps answering."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("uri", ["postgresql://localhost/words", ""])
    async def test_startup_survives_bad_uri(self, monkeypatch, caplog, uri):
        monkeypatch.setattr(settings, "mongo_uri", uri)
        app = create_app()

        async with app.router.lifespan_context(app):
            assert isinstance(app.state.word_store, UnavailableWordStore)

            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                health = await client.get("/health")
                listing = await client.get("/api/viewWords")
                insert = await client.get("/api/addWord/testword")

        assert "Configuration error" in caplog.text
        assert "Error connecting to MongoDB" in caplog.text
        assert health.status_code == 503
        assert health.json()["database"] == "disconnected"
        assert listing.status_code == 500
        assert listing.json() == {"error": "Error fetching words"}
        assert insert.status_code == 500
        assert insert.json() == {"error": "Error adding word"}


class TestBackgroundConnectionCheck:
    """The startup ping must not hold up the server."""

    @pytest.mark.asyncio
    async def test_startup_does_not_wait_for_ping(self):
        store = HangingPingStore()
        app = create_app(word_store=store)

        async with app.router.lifespan_context(app):
            check = app.state.connection_check
            assert not check.done()

            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                response = await client.get("/api/viewWords")
            assert response.status_code == 200

        assert check.cancelled()

    @pytest.mark.asyncio
    async def test_finished_check_is_left_alone(self, memory_store):
        app = create_app(word_store=memory_store)

        async with app.router.lifespan_context(app):
            await app.state.connection_check

        assert app.state.connection_check.result() is True
