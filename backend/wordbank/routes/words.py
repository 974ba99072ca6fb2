"""
Wordbank Backend — Word Route Handlers
=======================================

What:  Handles word insertion and listing under the /api prefix.
How:   Extracts the word from the path or JSON body, delegates to
       WordService with the injected store, returns JSON.

Route Inventory:
    GET  /api/addWord/{word}   insert the path segment as a word
    GET  /api/addWord          no word given → 400
    POST /api/addWord          insert {"word": ...} from the JSON body
    GET  /api/viewWords        list every stored word

Errors raised by the service are rendered by the global handler in main.py.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends

from wordbank.database import get_word_store
from wordbank.schemas.word import (
    AddWordRequest,
    ErrorResponse,
    MessageResponse,
    WordResponse,
)
from wordbank.services.word_service import word_service
from wordbank.store_base import WordStore

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Words"])

_ADD_RESPONSES = {
    200: {"description": "Word stored", "model": MessageResponse},
    400: {"description": "Word missing or empty", "model": ErrorResponse},
    500: {"description": "Store error", "model": ErrorResponse},
}


@router.get(
    "/addWord/{word}",
    response_model=MessageResponse,
    responses=_ADD_RESPONSES,
    summary="Add a word from the path",
)
async def add_word(
    word: str,
    store: WordStore = Depends(get_word_store),
) -> MessageResponse:
    """
    Store the path segment as a new word.

    Example:
        GET /api/addWord/testword → {"message": "Word added successfully"}
    """
    return await word_service.add_word(store, word)


@router.get(
    "/addWord",
    response_model=MessageResponse,
    responses=_ADD_RESPONSES,
    summary="Add a word (no word supplied)",
    include_in_schema=False,
)
@router.get("/addWord/", include_in_schema=False)
async def add_word_missing(
    store: WordStore = Depends(get_word_store),
) -> MessageResponse:
    """Path without a word segment: always answered with 400."""
    return await word_service.add_word(store, None)


@router.post(
    "/addWord",
    response_model=MessageResponse,
    responses=_ADD_RESPONSES,
    summary="Add a word from a JSON body",
)
async def add_word_from_body(
    payload: Optional[AddWordRequest] = None,
    store: WordStore = Depends(get_word_store),
) -> MessageResponse:
    """
    Store `payload.word` as a new word.

    A missing body, a body without `word`, or an empty word all yield
    400 {"error": "Word is required"}.
    """
    word = payload.word if payload else None
    return await word_service.add_word(store, word)


@router.get(
    "/viewWords",
    response_model=List[WordResponse],
    responses={
        200: {"description": "Every stored word", "model": List[WordResponse]},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="List all stored words",
)
async def view_words(
    store: WordStore = Depends(get_word_store),
) -> List[WordResponse]:
    """
    Return every stored word in store order.

    No pagination or limit: the full collection is returned in one array.
    """
    return await word_service.list_words(store)
