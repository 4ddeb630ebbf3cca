"""Row decoding helpers shared by the repositories."""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from kanban.core.errors import DecodeError


def ensure_utc(value: Any, resource_type: str) -> datetime:
    """Return an aware UTC datetime. SQLite hands back naive values."""
    if not isinstance(value, datetime):
        raise DecodeError(resource_type, f"created_at is {type(value).__name__}, not datetime")
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def require_str(value: Any, field: str, resource_type: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(resource_type, f"{field} is {type(value).__name__}, not str")
    return value


def require_uuid(value: Any, field: str, resource_type: str) -> UUID:
    if not isinstance(value, UUID):
        raise DecodeError(resource_type, f"{field} is {type(value).__name__}, not UUID")
    return value
