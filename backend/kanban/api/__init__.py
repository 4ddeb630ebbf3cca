"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Success bodies are envelopes ({"board": ...}, {"cards": [...]}, ...)
    - Failure bodies carry the message under "error"; a malformed JSON body is the
      one plain-text failure ("Invalid JSON")

Design Decisions:
    - Thin routes delegate to services built per request in dependencies.py
"""
