"""
Wordbank Backend — Document Store Connection Management
========================================================

What:  MongoDB-backed WordStore, its factory, and the FastAPI dependency.
How:   `create_word_store()` builds one AsyncMongoClient from settings; the
       FastAPI lifespan stores the resulting MongoWordStore on `app.state`,
       and `get_word_store()` hands it to route handlers per request.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Client is created at startup and closed at shutdown.

Connection Handling:
    pymongo's AsyncMongoClient owns a connection pool and connects lazily on
    the first operation. One client is shared by all requests; pool sizing and
    timeouts are the driver defaults apart from serverSelectionTimeoutMS,
    which comes from MONGO_TIMEOUT_MS.
"""

import logging
from typing import Any, List, Optional

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import ConfigurationError, ConnectionFailure, PyMongoError

from wordbank.config import Settings, settings as default_settings
from wordbank.models.word import Word
from wordbank.store_base import WordStore

logger = logging.getLogger(__name__)


class MongoWordStore(WordStore):
    """
    WordStore over a single MongoDB collection.

    Query Patterns:
        - Insert: insert_one({"value": ...}) → store assigns _id
        - List:   find({}) with no sort → natural order of the collection
    """

    def __init__(self, client: AsyncMongoClient, collection: Any):
        self._client = client
        self._collection = collection

    async def insert_word(self, word: Word) -> Word:
        result = await self._collection.insert_one(word.to_document())
        stored = word.model_copy(update={"id": str(result.inserted_id)})
        logger.debug("Inserted word %r as %s", stored.value, stored.id)
        return stored

    async def find_words(self) -> List[Word]:
        cursor = self._collection.find({})
        documents = await cursor.to_list()
        return [Word.from_document(doc) for doc in documents]

    async def ping(self) -> bool:
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            logger.warning("MongoDB ping failed: %s", str(e))
            return False
        return True

    async def close(self) -> None:
        await self._client.close()


class UnavailableWordStore(WordStore):
    """
    Stand-in store used when no MongoDB client could be built.

    What:  Keeps the service up when MONGO_URI is empty or malformed.
    How:   ping() reports the store as down; insert/find raise a
           ConnectionFailure carrying the original configuration error,
           which WordService turns into the usual 500 responses.
    Why:   A bad connection string is a deployment mistake, not a reason to
           refuse every request. /health shows "disconnected" until the
           configuration is fixed and the process restarted.
    """

    def __init__(self, reason: str):
        self.reason = reason

    async def insert_word(self, word: Word) -> Word:
        raise ConnectionFailure(f"Word store unavailable: {self.reason}")

    async def find_words(self) -> List[Word]:
        raise ConnectionFailure(f"Word store unavailable: {self.reason}")

    async def ping(self) -> bool:
        return False

    async def close(self) -> None:
        pass


def create_word_store(config: Optional[Settings] = None) -> MongoWordStore:
    """
    Build the MongoWordStore described by the settings.

    The database is the one named in MONGO_URI, falling back to
    MONGO_DATABASE when the URI has no database path.

    Raises:
        ConfigurationError: MONGO_URI is empty, or pymongo rejects it
            (InvalidURI is a ConfigurationError subclass)
    """
    config = config or default_settings
    # An empty host string would otherwise fall through to pymongo's parser
    if not config.mongo_uri:
        raise ConfigurationError("MONGO_URI is empty")
    client = AsyncMongoClient(
        config.mongo_uri,
        serverSelectionTimeoutMS=config.mongo_timeout_ms,
    )
    database = client.get_default_database(default=config.mongo_database)
    collection = database[config.mongo_collection]
    logger.info(
        "Word store configured: database=%s collection=%s",
        database.name,
        config.mongo_collection,
    )
    return MongoWordStore(client=client, collection=collection)


# ── Store Dependency ──────────────────────────────────────────────────────
def get_word_store(request: Request) -> WordStore:
    """
    FastAPI dependency returning the store attached to the running app.

    Example usage in a route:
        @router.get("/viewWords")
        async def view_words(store: WordStore = Depends(get_word_store)):
            return await word_service.list_words(store)
    """
    return request.app.state.word_store
