"""Core Layer: entities, identifiers, errors and repository contracts. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, repositories/ or db/
    - All functions are pure and deterministic (the clock is passed in, never read)

Design Decisions:
    - Functional core separated from imperative shell: services read the clock and
      call the store, core only shapes values
"""
