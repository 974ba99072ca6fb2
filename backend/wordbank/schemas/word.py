"""
Wordbank Backend — Pydantic Request/Response Schemas
=====================================================

What:  Pydantic models defining the HTTP contract of the word endpoints.
How:   FastAPI uses these models to parse request bodies, serialize
       responses, and generate the OpenAPI documentation.

Schemas are kept apart from the stored Word model so the wire format
(`id`, `value`) stays fixed even if the document shape changes.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class AddWordRequest(BaseModel):
    """
    What:  JSON body accepted by POST /api/addWord.

    `word` is optional at the schema level so that a missing or null word is
    reported by the service as "Word is required" (400) rather than by
    FastAPI's generic 422.

    Scalar coercion:
        Numbers and booleans are stored as their text form ("123", "true").
        Falsy scalars (0, false) count as a missing word. Lists and objects
        fail validation and are answered with 400 by the global handler.
    """
    word: Optional[str] = Field(default=None, description="Word to store")

    @field_validator("word", mode="before")
    @classmethod
    def coerce_scalar_word(cls, v: Any) -> Any:
        """Turns JSON numbers/booleans into the text that gets stored."""
        if isinstance(v, bool):
            return "true" if v else None
        if isinstance(v, (int, float)):
            return str(v) if v else None
        return v


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class WordResponse(BaseModel):
    """
    What:  One stored word as returned by GET /api/viewWords.
    """
    id: str = Field(description="Store-assigned identifier (ObjectId hex)")
    value: str = Field(description="The stored word")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Success payload for write operations."""
    message: str = Field(description="Human-readable success message")


class ErrorResponse(BaseModel):
    """
    What:  Error payload shared by every endpoint.

    Example:
        {"error": "Error fetching words"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and store status.
    Who:   Returned by GET /health for monitoring and container health checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
