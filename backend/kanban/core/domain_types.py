"""Domain Types: identifier types and the parsing that guards every store access.

Invariants:
    - BoardId and CardId wrap UUIDs; never pass raw strings past the repository boundary
    - parse_* raises InvalidIdentifierError for anything that is not a UUID string
    - Parsing never touches the store (fail fast, no partial side effect)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - uuid.UUID accepts hex with or without dashes, braces and urn prefix; the API
      always emits the canonical dashed form
"""

from typing import NewType
from uuid import UUID

from kanban.core.errors import InvalidIdentifierError


# ─── Identity Types ──────────────────────────────────────────────

BoardId = NewType("BoardId", UUID)
CardId = NewType("CardId", UUID)


# ─── Parsing ─────────────────────────────────────────────────────

def parse_identifier(raw: object, kind: str) -> UUID:
    """Parse a client-supplied id string into a UUID or raise InvalidIdentifierError."""
    if isinstance(raw, UUID):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidIdentifierError(kind, raw)
    try:
        return UUID(raw.strip())
    except ValueError:
        raise InvalidIdentifierError(kind, raw) from None


def parse_board_id(raw: object) -> BoardId:
    return BoardId(parse_identifier(raw, "board"))


def parse_card_id(raw: object) -> CardId:
    return CardId(parse_identifier(raw, "card"))
