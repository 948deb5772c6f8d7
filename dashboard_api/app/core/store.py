"""
In‑memory storage for dashboard records.

Every entity kind lives in its own ``KeyedCollection``.  A collection
maps a key to a pydantic record and knows three things about its
entity: which defaults to apply on insert, how to order records when
listing them, and, for singleton kinds, how to derive the storage key
from the record itself.  Singleton collections therefore overwrite
the existing slot on ``create`` instead of appending.

Data lives for the lifetime of the process only.  ``DashboardStore``
bundles one collection per entity kind and is constructed explicitly
and handed to the service layer, so tests can use fresh instances.
"""

from __future__ import annotations

import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from ..schemas.ai_insight import AIInsightRead
from ..schemas.daily_book import DailyBookRead
from ..schemas.daily_summary import DailySummaryRead
from ..schemas.habit import HabitRead
from ..schemas.quick_link import QuickLinkRead
from ..schemas.schedule import ScheduleEventRead
from ..schemas.settings import UserSettingsRead
from ..schemas.task import TaskRead
from ..schemas.user import UserRead
from ..schemas.website_usage import WebsiteUsageRead
from .scoping import scope_key


RecordT = TypeVar("RecordT", bound=BaseModel)

# Assigned on insert and never changed by update.
IMMUTABLE_FIELDS = frozenset({"id", "user_id", "created_at"})


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class KeyedCollection(Generic[RecordT]):
    """A keyed set of records of one entity kind.

    Parameters
    ----------
    model : Type[RecordT]
        Record class; instances are what the collection stores and returns.
    defaults : Mapping[str, Any]
        Values for optional fields omitted on ``create``.
    sort_key : Callable, optional
        Key used by ``list``.  When omitted records come back in
        insertion order.
    descending : bool
        Reverse the ``sort_key`` ordering.
    slot_key : Callable, optional
        For singleton kinds: computes the storage key from the record
        fields.  ``create`` then upserts into that slot.
    """

    def __init__(
        self,
        name: str,
        model: Type[RecordT],
        defaults: Optional[Mapping[str, Any]] = None,
        sort_key: Optional[Callable[[RecordT], Any]] = None,
        descending: bool = False,
        slot_key: Optional[Callable[[Mapping[str, Any]], str]] = None,
    ) -> None:
        self.name = name
        self.model = model
        self.defaults = dict(defaults or {})
        self.sort_key = sort_key
        self.descending = descending
        self.slot_key = slot_key
        self._records: Dict[str, RecordT] = {}
        self._lock = threading.RLock()

    @property
    def is_singleton(self) -> bool:
        return self.slot_key is not None

    def create(self, fields: Mapping[str, Any], record_id: Optional[str] = None) -> RecordT:
        """Insert a record built from ``fields`` and return it.

        ``id`` and ``created_at`` are assigned here; values for those keys
        in ``fields`` are ignored.  ``record_id`` pins the identifier
        instead of generating one (used for the bootstrap user).  Fields
        set to ``None`` are treated as omitted.
        """
        data: Dict[str, Any] = dict(self.defaults)
        data.update({k: v for k, v in fields.items() if v is not None and k not in ("id", "created_at")})
        data["id"] = record_id or _new_id()
        data["created_at"] = _now()
        record = self.model(**data)
        key = self.slot_key(data) if self.slot_key else record.id
        with self._lock:
            self._records[key] = record
        return record.model_copy()

    def get(self, key: str) -> Optional[RecordT]:
        """Return the record stored under ``key`` or ``None``."""
        with self._lock:
            record = self._records.get(key)
        return record.model_copy() if record is not None else None

    def list(self, predicate: Optional[Callable[[RecordT], bool]] = None) -> List[RecordT]:
        """Return matching records in the collection's order."""
        with self._lock:
            records = [r for r in self._records.values() if predicate is None or predicate(r)]
        if self.sort_key is not None:
            records.sort(key=self.sort_key, reverse=self.descending)
        return [r.model_copy() for r in records]

    def update(self, key: str, changes: Mapping[str, Any]) -> Optional[RecordT]:
        """Shallow‑merge ``changes`` into the record at ``key``.

        Returns the updated record, or ``None`` if ``key`` is absent.
        Identifier, owner and creation time are never overwritten.
        """
        allowed = {
            k: v for k, v in changes.items() if k in self.model.model_fields and k not in IMMUTABLE_FIELDS
        }
        with self._lock:
            record = self._records.get(key)
            if record is None:
                return None
            updated = record.model_copy(update=allowed)
            self._records[key] = updated
        return updated.model_copy()

    def delete(self, key: str) -> bool:
        """Remove the record at ``key``; ``False`` if nothing was there."""
        with self._lock:
            return self._records.pop(key, None) is not None

    def find(self, predicate: Callable[[RecordT], bool]) -> Optional[RecordT]:
        """Return the first record matching ``predicate``."""
        with self._lock:
            for record in self._records.values():
                if predicate(record):
                    return record.model_copy()
        return None

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._records


def _user_slot(fields: Mapping[str, Any]) -> str:
    return scope_key(fields["user_id"])


def _user_day_slot(fields: Mapping[str, Any]) -> str:
    return scope_key(fields["user_id"], fields["date"])


class DashboardStore:
    """All collections of the dashboard, one per entity kind."""

    def __init__(self) -> None:
        self.users: KeyedCollection[UserRead] = KeyedCollection("user", UserRead)
        self.tasks: KeyedCollection[TaskRead] = KeyedCollection(
            "task",
            TaskRead,
            defaults={"completed": False, "order": 0},
            sort_key=lambda r: r.order,
        )
        self.settings: KeyedCollection[UserSettingsRead] = KeyedCollection(
            "settings",
            UserSettingsRead,
            defaults={"user_name": "Friend", "daily_focus": "", "quick_notes": "", "background_image": ""},
            slot_key=_user_slot,
        )
        self.schedule_events: KeyedCollection[ScheduleEventRead] = KeyedCollection(
            "schedule event",
            ScheduleEventRead,
            defaults={"completed": False},
            sort_key=lambda r: r.time,
        )
        self.habits: KeyedCollection[HabitRead] = KeyedCollection(
            "habit",
            HabitRead,
            defaults={"icon": "📝", "streak": 0, "last_completed": ""},
            sort_key=lambda r: r.created_at,
        )
        self.quick_links: KeyedCollection[QuickLinkRead] = KeyedCollection(
            "quick link",
            QuickLinkRead,
            defaults={"icon": "🔗", "order": 0},
            sort_key=lambda r: r.order,
        )
        self.daily_summaries: KeyedCollection[DailySummaryRead] = KeyedCollection(
            "daily summary",
            DailySummaryRead,
            defaults={
                "tasks_completed": 0,
                "total_tasks": 0,
                "focus_time_minutes": 0,
                "habits_completed": 0,
                "total_habits": 0,
                "productivity_score": 0,
            },
            slot_key=_user_day_slot,
        )
        self.daily_books: KeyedCollection[DailyBookRead] = KeyedCollection(
            "daily book",
            DailyBookRead,
            defaults={"cover_url": None},
            slot_key=_user_day_slot,
        )
        self.website_usage: KeyedCollection[WebsiteUsageRead] = KeyedCollection(
            "website usage",
            WebsiteUsageRead,
            defaults={"time_spent_minutes": 0, "visit_count": 0, "category": "other"},
            sort_key=lambda r: r.time_spent_minutes,
            descending=True,
        )
        self.ai_insights: KeyedCollection[AIInsightRead] = KeyedCollection(
            "insight",
            AIInsightRead,
            defaults={"category": "general", "severity": "info", "actionable": False},
            sort_key=lambda r: r.created_at,
            descending=True,
        )

    def collections(self) -> Iterable[KeyedCollection]:
        return (
            self.users,
            self.tasks,
            self.settings,
            self.schedule_events,
            self.habits,
            self.quick_links,
            self.daily_summaries,
            self.daily_books,
            self.website_usage,
            self.ai_insights,
        )

    def reset(self) -> None:
        """Drop every record from every collection."""
        for collection in self.collections():
            collection.clear()
