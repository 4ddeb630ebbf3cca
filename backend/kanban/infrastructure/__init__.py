"""Infrastructure Layer: database engine, store error mapping and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every store call made by a repository goes through store_operation()

Design Decisions:
    - Deadline and error translation live here so repositories stay declarative
"""
