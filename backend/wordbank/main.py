"""
Wordbank Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
       Passing `word_store` injects a ready store (tests); otherwise the
       lifespan builds a MongoWordStore from settings.
Who:   Called by uvicorn (`uvicorn wordbank.main:app`) or the `wordbank` script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────┐ ┌──────┐        │
    │  │ Req ID   │→│ Logging  │→│ GZip │→│ CORS │        │
    │  └──────────┘ └──────────┘ └──────┘ └──────┘        │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────┐ ┌───────────────┐ ┌─────────┐   │
    │  │ /api/addWord   │ │ /api/viewWords│ │ /health │   │
    │  └────────────────┘ └───────────────┘ └─────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ WordBankError / RequestValidationError →     │   │
    │  │ status_code_for()        │ Other → 500       │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate configuration (logged, not fatal)
    3. Build the word store unless one was injected (UnavailableWordStore
       when the connection string is unusable)
    4. Ping the store in a background task and log the outcome

    Shutdown:
    1. Cancel a pending connection check
    2. Close the store if this app built it
"""

import asyncio
import logging
import sys
from contextlib import asynccontextmanager, suppress
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from wordbank import __version__
from wordbank.config import settings
from wordbank.database import UnavailableWordStore, create_word_store
from wordbank.exceptions import WordBankError, status_code_for
from wordbank.middleware.logging import RequestLoggingMiddleware
from wordbank.middleware.request_id import RequestIDMiddleware, request_id_var
from wordbank.routes import health, words
from wordbank.services.word_service import WORD_REQUIRED
from wordbank.store_base import WordStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

async def report_store_connection(store: WordStore) -> bool:
    """
    Ping the store once and log the outcome.

    What:  The startup connection check, run as a background task.
    Why:   A down MongoDB makes the ping wait for the full server selection
           timeout (30 s by default). Running it in the background lets the
           server accept requests right away; requests made meanwhile fail
           with the usual 500s.
    """
    if await store.ping():
        logger.info("Connected to MongoDB")
        return True
    # Requests keep being served; store calls surface as 500s
    logger.error("Error connecting to MongoDB")
    return False


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    Startup sequence:
        1. Setup logging
        2. Validate configuration (logged, never fatal)
        3. Build the word store unless one was injected; a client that cannot
           be built is replaced by UnavailableWordStore
        4. Start the connection check in the background

    Shutdown sequence:
        1. Cancel the connection check if it is still waiting
        2. Close the store if this app built it

    The store is owned by the app only when the lifespan created it; an
    injected store is left for its owner to close.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Wordbank Backend starting up...")

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))

    owns_store = getattr(app.state, "word_store", None) is None
    if owns_store:
        try:
            app.state.word_store = create_word_store(settings)
        except PyMongoError as e:
            # Same outcome as an unreachable server: keep serving, report down
            logger.error("Error connecting to MongoDB: %s", str(e))
            app.state.word_store = UnavailableWordStore(reason=str(e))

    store: WordStore = app.state.word_store
    app.state.connection_check = asyncio.create_task(report_store_connection(store))

    logger.info("Server is running on port %d", settings.port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Wordbank Backend shutting down...")
    check = app.state.connection_check
    if not check.done():
        check.cancel()
        with suppress(asyncio.CancelledError):
            await check
    if owns_store:
        await store.close()
        app.state.word_store = None
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(exc: Exception, message: str) -> JSONResponse:
    """Render an error as `{"error": message}` with its category's status code."""
    return JSONResponse(
        status_code=status_code_for(exc),
        content={"error": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        WordBankError (and subclasses) → status_code_for(exc), {"error": exc.message}
        RequestValidationError         → 400, {"error": "Word is required"}
        Exception (fallback)           → 500, {"error": "Internal server error"}

    Details (context, stack traces) are logged server-side only.
    """

    @app.exception_handler(WordBankError)
    async def handle_wordbank_error(request: Request, exc: WordBankError):
        rid = request_id_var.get("")
        if status_code_for(exc) >= 500:
            logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
        return error_response(exc, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """
        Unparseable input, such as malformed JSON or a list/object as the word.

        Why 400 (not FastAPI's 422): the only client input is the word, so an
        unusable body is the same client error as a missing word and gets the
        same `{"error": ...}` shape.
        """
        rid = request_id_var.get("")
        logger.info("[%s] Rejected request input: %s", rid, exc.errors())
        return error_response(exc, WORD_REQUIRED)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return error_response(exc, "Internal server error")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(word_store: Optional[WordStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        word_store: Optional pre-built store. When omitted, the lifespan
                    builds a MongoWordStore from settings at startup.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Wordbank API",
        description="Stores single words in MongoDB and lists them back.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.word_store = word_store

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(words.router)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()


def run() -> None:
    """Console entry point: serve the app on HOST:PORT (PORT defaults to 3000)."""
    uvicorn.run(
        "wordbank.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
