from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from event_booking.database.db import get_db
from event_booking.services.store import RecordStore


def get_store(db: AsyncSession = Depends(get_db)) -> RecordStore:
    return RecordStore(db)
