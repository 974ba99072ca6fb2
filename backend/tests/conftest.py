"""
Wordbank Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── memory_store: In-memory WordStore (no MongoDB needed)
    ├── failing_store: WordStore whose every call fails like an unreachable server
    ├── mock_collection: MagicMock standing in for a pymongo AsyncCollection
    ├── test_client: HTTPX AsyncClient wired to an app using memory_store
    └── failing_client: HTTPX AsyncClient wired to an app using failing_store
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["MONGO_URI"] = "mongodb://localhost:27017/wordbank_test"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import List
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.errors import ServerSelectionTimeoutError

from wordbank.models.word import Word
from wordbank.store_base import WordStore


# ══════════════════════════════════════════════════════════════════════════
# Test Doubles
# ══════════════════════════════════════════════════════════════════════════

class InMemoryWordStore(WordStore):
    """List-backed WordStore assigning ObjectId strings like MongoDB does."""

    def __init__(self):
        self.documents: List[dict] = []
        self.closed = False

    async def insert_word(self, word: Word) -> Word:
        document = {"_id": ObjectId(), **word.to_document()}
        self.documents.append(document)
        return Word.from_document(document)

    async def find_words(self) -> List[Word]:
        return [Word.from_document(doc) for doc in self.documents]

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self.closed = True


class FailingWordStore(WordStore):
    """WordStore behaving like a MongoDB server that cannot be reached."""

    def __init__(self):
        self.insert_calls = 0

    async def insert_word(self, word: Word) -> Word:
        self.insert_calls += 1
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    async def find_words(self) -> List[Word]:
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    async def ping(self) -> bool:
        return False

    async def close(self) -> None:
        pass


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def memory_store():
    return InMemoryWordStore()


@pytest.fixture
def failing_store():
    return FailingWordStore()


@pytest.fixture
def mock_collection():
    """
    Provides a mock pymongo collection.

    Usage:
        mock_collection.find.return_value.to_list.return_value = [{"_id": oid, "value": "a"}]
    """
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find.return_value = cursor
    return collection


async def _client_for(store: WordStore):
    from wordbank.main import create_app

    app = create_app(word_store=store)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(memory_store):
    """
    Provides an async HTTP test client backed by the in-memory store.

    Usage:
        async def test_view(test_client):
            response = await test_client.get("/api/viewWords")
            assert response.status_code == 200
    """
    async with await _client_for(memory_store) as client:
        yield client


@pytest_asyncio.fixture
async def failing_client(failing_store):
    """Async HTTP test client whose store is unreachable."""
    async with await _client_for(failing_store) as client:
        yield client
