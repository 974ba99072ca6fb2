# Services package init
"""
Wordbank Backend — Services Layer
==================================

What:  Business logic between routes (HTTP) and the word store (persistence).

Service Inventory:
    - WordService: presence validation, insert/list orchestration, and
      translation of store failures into DatabaseError
"""
