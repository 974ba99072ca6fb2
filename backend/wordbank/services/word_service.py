"""
Wordbank Backend — Word Service (Business Logic)
=================================================

What:  Validation and persistence orchestration for word insert and listing.
Why:   Routes stay HTTP-only and stores stay driver-only; the rules about
       which inputs are rejected and what a client may see of a driver
       failure live in one place.
How:   Checks input presence, delegates to the injected WordStore, and
       translates any store failure into DatabaseError with a fixed message.
Who:   Called by route handlers in wordbank.routes.words.
When:  Once per insert or listing request.

Orchestration Flow (insert):
    ┌──────────┐    ┌────────────┐    ┌─────────────┐    ┌──────────┐
    │  Route   │───▶│  Presence  │───▶│  WordStore  │───▶│ Message  │
    │ (path or │    │  check     │    │ insert_word │    │ response │
    │  body)   │    └────────────┘    └─────────────┘    └──────────┘
    └──────────┘          │ empty            │ driver error
                          ▼                  ▼
                   ValidationError     DatabaseError
                        (400)              (500)

Error Handling Strategy:
    Missing/empty word   → ValidationError("Word is required") before any store call
    Store failure        → cause logged with traceback, DatabaseError raised
                           with "Error adding word" / "Error fetching words"

    Why fixed messages: driver errors carry host names and server replies;
    the client gets the category, the log gets the cause.

Design Decision:
    WordService is stateless; the store is passed in on every call. Tests
    hand it an in-memory store or an AsyncMock without patching imports.
"""

import logging
from typing import List, Optional

from wordbank.exceptions import DatabaseError, ValidationError, WordBankError
from wordbank.models.word import Word
from wordbank.schemas.word import MessageResponse, WordResponse
from wordbank.store_base import WordStore

logger = logging.getLogger(__name__)

WORD_REQUIRED = "Word is required"
WORD_ADDED = "Word added successfully"
ADD_FAILED = "Error adding word"
FETCH_FAILED = "Error fetching words"


class WordService:
    """
    Business logic layer for word operations.

    Responsibilities:
        - add_word(): presence check, then a single insert
        - list_words(): full, unpaginated listing in store order
    """

    async def add_word(self, store: WordStore, word: Optional[str]) -> MessageResponse:
        """
        Store one word.

        No deduplication and no retries: calling this twice with the same
        word creates two records.

        Args:
            store: The injected WordStore
            word: Raw word from the path or request body (may be None)

        Returns:
            MessageResponse("Word added successfully")

        Raises:
            ValidationError: word is None or empty (→ 400)
            DatabaseError: the insert failed (→ 500)
        """
        # ── Step 1: Presence check ────────────────────────────────────────
        # INFO, not WARNING: a missing word is an expected client mistake
        if not word:
            logger.info("Rejected insert: no word supplied")
            raise ValidationError(message=WORD_REQUIRED, field="word")

        # ── Step 2: Single insert ─────────────────────────────────────────
        try:
            stored = await store.insert_word(Word(value=word))
        except WordBankError:
            raise  # Already our exception — propagate as-is
        except Exception as e:
            # Broad catch: any driver or mapping failure is a 500 for the client
            logger.error("Error adding word: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=ADD_FAILED,
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Word stored: %s", stored.id)
        return MessageResponse(message=WORD_ADDED)

    async def list_words(self, store: WordStore) -> List[WordResponse]:
        """
        Return every stored word.

        Query plan:
            find({}) with no sort and no limit → the collection's natural
            order, fetched in one batch with no pagination.

        Raises:
            DatabaseError: the find failed (→ 500)
        """
        try:
            words = await store.find_words()
        except WordBankError:
            raise
        except Exception as e:
            logger.error("Error fetching words: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=FETCH_FAILED,
                context={"error_type": type(e).__name__},
            ) from e

        return [WordResponse(id=w.id, value=w.value) for w in words]


# ── Singleton Instance ────────────────────────────────────────────────────
word_service = WordService()
