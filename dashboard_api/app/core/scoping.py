"""
Scope keys and filters for user‑ and day‑scoped records.

Dates are opaque ``YYYY-MM-DD`` tokens compared by equality; nothing
here parses them.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from pydantic import BaseModel


def scope_key(user_id: str, date: Optional[str] = None) -> str:
    """Return the lookup key for a user, or for a user on a given day."""
    if date is None:
        return user_id
    return f"{user_id}-{date}"


def owned_by(user_id: str) -> Callable[[BaseModel], bool]:
    """Predicate matching records that belong to ``user_id``."""

    def predicate(record: BaseModel) -> bool:
        return record.user_id == user_id

    return predicate


def owned_on(user_id: str, date: str) -> Callable[[BaseModel], bool]:
    """Predicate matching records of ``user_id`` dated ``date``."""

    def predicate(record: BaseModel) -> bool:
        return record.user_id == user_id and record.date == date

    return predicate


def today() -> str:
    """Current UTC date as ``YYYY-MM-DD``."""
    return datetime.now(timezone.utc).date().isoformat()
