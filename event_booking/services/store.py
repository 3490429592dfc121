"""
Record store over an async SQLAlchemy session.

Collections are addressed by name ("events", "bookings"). Every write
commits a single record; a unique index violation rolls the session back
and surfaces as StorageConflictError.
"""
import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from event_booking.core.errors import StorageConflictError
from event_booking.database.db import Base
from event_booking.models.books import Booking
from event_booking.models.events import Event

logger = logging.getLogger(__name__)

COLLECTIONS: dict[str, type[Base]] = {
    "events": Event,
    "bookings": Booking,
}


def _model_for(collection: str) -> type[Base]:
    try:
        return COLLECTIONS[collection]
    except KeyError:
        raise ValueError(f"Unknown collection: {collection}") from None


class RecordStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, collection: str, attrs: dict[str, Any]) -> Any:
        """Insert a record, enforcing the collection's unique indexes."""
        record = _model_for(collection)(**attrs)
        self.session.add(record)
        await self._commit(collection)
        await self.session.refresh(record)
        return record

    async def update(self, record: Any, attrs: dict[str, Any]) -> Any:
        for key, value in attrs.items():
            setattr(record, key, value)
        await self._commit(record.__tablename__)
        await self.session.refresh(record)
        return record

    async def exists(self, collection: str, filter: dict[str, Any]) -> bool:
        model = _model_for(collection)
        stmt = select(model.id).filter_by(**filter).limit(1)
        return (await self.session.scalar(stmt)) is not None

    async def get(self, collection: str, filter: dict[str, Any]) -> Any | None:
        stmt = select(_model_for(collection)).filter_by(**filter).limit(1)
        return await self.session.scalar(stmt)

    async def find(self, collection: str, filter: dict[str, Any] | None = None, order_by=None) -> list[Any]:
        stmt = select(_model_for(collection)).filter_by(**(filter or {}))
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        result = await self.session.scalars(stmt)
        return list(result.all())

    async def _commit(self, collection: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning("Unique constraint violated in %s: %s", collection, e.orig)
            raise StorageConflictError(f"Duplicate record in {collection}") from e
