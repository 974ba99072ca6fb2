# Routes package init
"""
Wordbank Backend — API Routes Package
======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - words.py:   GET  /api/addWord/{word}   (insert a word from the path)
                  POST /api/addWord          (insert a word from a JSON body)
                  GET  /api/viewWords        (list every word)
    - health.py:  GET  /health               (service health check)

Routes stay thin: they extract input, call WordService, and let the global
exception handler format failures.
"""
