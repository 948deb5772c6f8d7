"""
Generic services over store collections.

``EntityService`` covers multi‑row kinds scoped to a user,
``DatedEntityService`` adds a day filter to listing, and
``SingletonService`` handles kinds with one slot per user (or per user
and day), where ``upsert`` replaces the slot.
"""

from __future__ import annotations

import logging
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

from dashboard_api.app.core.exceptions import NotFoundError
from dashboard_api.app.core.scoping import owned_by, owned_on, scope_key
from dashboard_api.app.core.store import KeyedCollection


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _fields(payload: BaseModel) -> dict:
    """Snake‑case fields the client actually supplied."""
    return payload.model_dump(exclude_none=True, by_alias=False)


def _changes(payload: BaseModel) -> dict:
    """Fields named in a partial update, explicit nulls included."""
    return payload.model_dump(exclude_unset=True, by_alias=False)



class EntityService(Generic[RecordT]):
    """CRUD over a multi‑row collection owned by one user."""

    kind = "Record"

    def __init__(self, collection: KeyedCollection[RecordT], user_id: str) -> None:
        self.collection = collection
        self.user_id = user_id

    async def list(self) -> List[RecordT]:
        return self.collection.list(owned_by(self.user_id))

    async def get(self, record_id: str) -> Optional[RecordT]:
        return self.collection.get(record_id)

    async def require(self, record_id: str) -> RecordT:
        record = await self.get(record_id)
        if record is None:
            raise NotFoundError(self.kind, record_id)
        return record

    async def create(self, payload: BaseModel) -> RecordT:
        fields = _fields(payload)
        fields["user_id"] = self.user_id
        record = self.collection.create(fields)
        logger.info("Created %s %s", self.kind.lower(), record.id)
        return record

    async def update(self, record_id: str, payload: BaseModel) -> Optional[RecordT]:
        record = self.collection.update(record_id, _changes(payload))
        if record is None:
            logger.warning("Cannot update %s %s: not found", self.kind.lower(), record_id)
        else:
            logger.info("Updated %s %s", self.kind.lower(), record_id)
        return record

    async def delete(self, record_id: str) -> bool:
        deleted = self.collection.delete(record_id)
        if deleted:
            logger.info("Deleted %s %s", self.kind.lower(), record_id)
        else:
            logger.warning("Cannot delete %s %s: not found", self.kind.lower(), record_id)
        return deleted


class DatedEntityService(EntityService[RecordT]):
    """Multi‑row kinds that are listed one day at a time."""

    async def list(self, date: str) -> List[RecordT]:  # type: ignore[override]
        return self.collection.list(owned_on(self.user_id, date))


class SingletonService(Generic[RecordT]):
    """Kinds with a single record per user, or per user and day.

    When ``dated`` is true every method takes the day whose slot it
    addresses; otherwise ``date`` is ignored.
    """

    kind = "Record"
    dated = False

    def __init__(self, collection: KeyedCollection[RecordT], user_id: str) -> None:
        self.collection = collection
        self.user_id = user_id

    def _key(self, date: Optional[str]) -> str:
        return scope_key(self.user_id, date if self.dated else None)

    async def get(self, date: Optional[str] = None) -> Optional[RecordT]:
        return self.collection.get(self._key(date))

    async def require(self, date: Optional[str] = None) -> RecordT:
        record = await self.get(date)
        if record is None:
            raise NotFoundError(self.kind, self._key(date))
        return record

    async def upsert(self, payload: BaseModel) -> RecordT:
        """Create the record for the payload's scope, replacing any existing one."""
        fields = _fields(payload)
        fields["user_id"] = self.user_id
        replaced = self._key(fields.get("date")) in self.collection
        record = self.collection.create(fields)
        logger.info("%s %s for %s", "Replaced" if replaced else "Created", self.kind.lower(), self._key(fields.get("date")))
        return record

    async def update(self, payload: BaseModel, date: Optional[str] = None) -> Optional[RecordT]:
        key = self._key(date)
        record = self.collection.update(key, _changes(payload))
        if record is None:
            logger.warning("Cannot update %s %s: not found", self.kind.lower(), key)
        else:
            logger.info("Updated %s %s", self.kind.lower(), key)
        return record

    async def delete(self, date: Optional[str] = None) -> bool:
        key = self._key(date)
        deleted = self.collection.delete(key)
        if deleted:
            logger.info("Deleted %s %s", self.kind.lower(), key)
        return deleted
