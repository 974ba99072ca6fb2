"""
Wordbank Backend — Application Package Initializer
===================================================

What: Marks the `wordbank` directory as a Python package.
Who:  Imported by uvicorn (`wordbank.main:app`), pytest, and the `wordbank` console script.

Architecture Note:
    The service is a thin layered stack:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Presence checks, error translation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Word document + Pydantic contracts
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← WordStore over MongoDB
    └─────────────────────────────────────┘

    The store is built once at startup and handed to the routes through
    `app.state`, so every layer above it can run against an in-memory double.
"""

__version__ = "1.0.0"
