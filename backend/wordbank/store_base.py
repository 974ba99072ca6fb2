"""
Wordbank Backend — Abstract Word Store Interface
=================================================

What:  Abstract base class defining the persistence capability the service needs.
How:   Concrete implementations inherit from WordStore and implement
       insert_word(), find_words(), ping() and close().
Who:   Called by WordService (insert/find) and the health route (ping).
When:  One instance is built at startup and shared by every request.

Implementations:
    - MongoWordStore (wordbank.database): MongoDB via pymongo's asyncio client
    - InMemoryWordStore (tests/conftest.py): list-backed double for tests
"""

from abc import ABC, abstractmethod
from typing import List

from wordbank.models.word import Word


class WordStore(ABC):
    """
    Abstract interface for storing and retrieving word records.

    Contract:
        - insert_word() persists exactly one record and returns it with its id
        - find_words() returns every record in store order, unpaginated
        - Driver errors propagate unchanged; the service layer translates them
    """

    @abstractmethod
    async def insert_word(self, word: Word) -> Word:
        """
        Persist a new word record.

        Args:
            word: Record to insert. Its `id` is ignored.

        Returns:
            Word: The stored record with its store-assigned `id`.
        """
        ...

    @abstractmethod
    async def find_words(self) -> List[Word]:
        """
        Retrieve every stored word record.

        Returns:
            List[Word]: All records in the order the store yields them.
                        Empty list when nothing is stored.
        """
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """
        Lightweight connectivity check.

        Returns: True if the store answered, False otherwise. Never raises.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release connections held by the store."""
        ...
