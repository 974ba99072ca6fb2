"""
Wordbank Backend — Word Document Model
=======================================

What:  The persisted word record and its mapping to/from MongoDB documents.
How:   A Pydantic model holding the record's fields; `to_document()` and
       `from_document()` convert between it and the BSON shape stored in the
       `words` collection.
Who:   Built by WordService on insert; returned by WordStore implementations.

Stored document shape:
    {"_id": ObjectId("..."), "value": "hello"}

    - _id:   Assigned by the store on insert; exposed as a 24-char hex string
    - value: The word itself; required and never empty
    No other fields, no secondary indexes, duplicates allowed.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class Word(BaseModel):
    """
    A single stored word.

    Lifecycle:
        1. Built from client input with `id=None`
        2. Gets its `id` when the store acknowledges the insert
        3. Never updated or deleted by the service
    """

    id: Optional[str] = Field(default=None, description="Store-assigned identifier")
    value: str = Field(min_length=1, description="The stored word")

    def to_document(self) -> Dict[str, Any]:
        """Document body for insertion; `_id` is left to the store."""
        return {"value": self.value}

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Word":
        """Build a Word from a raw document returned by the driver."""
        return cls(id=str(document["_id"]), value=document["value"])

    def __repr__(self) -> str:
        return f"<Word(id={self.id}, value='{self.value}')>"
