"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, responses)
    - JSON keys are camelCase; Python attributes stay snake_case

Design Decisions:
    - Separate from models and entities: schemas are API contracts
    - Id fields in requests are plain strings: the core parses them so malformed ids
      surface as INVALID_IDENTIFIER, not as field validation errors
"""
