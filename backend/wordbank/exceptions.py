"""
Wordbank Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions and their mapping to HTTP status codes.
How:   Each exception class carries a client-safe message and an optional
       context dict. The single exception handler registered in main.py
       renders any WordBankError as `{"error": message}` with the status code
       returned by `status_code_for()`.
Who:   Raised by the service layer; caught by the global handler.

Exception Hierarchy:
    WordBankError (base)         → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request (client can fix)
    └── DatabaseError            → 500 Internal Server Error

    FastAPI's RequestValidationError (malformed body) is mapped to 400 as well.
"""

from typing import Any, Dict, Optional

from fastapi.exceptions import RequestValidationError


class WordBankError(Exception):
    """
    Base exception for all Wordbank application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(WordBankError):
    """
    Raised when client input fails validation.

    When:    The word to insert is missing or empty.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Word is required"}
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class DatabaseError(WordBankError):
    """
    Raised when a document store operation fails.

    When:    Store unreachable, driver exception, write rejected, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is fixed per operation
        ("Error adding word", "Error fetching words"). The driver error is
        logged server-side only and kept out of the response.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


def status_code_for(exc: Exception) -> int:
    """
    Translate an exception into the HTTP status code of its error category.

    Mapping:
        WordBankError subclasses  → their own status_code
        RequestValidationError    → 400 (unparseable client input)
        anything else             → 500 (unexpected server error)
    """
    if isinstance(exc, WordBankError):
        return exc.status_code
    if isinstance(exc, RequestValidationError):
        return 400
    return 500
