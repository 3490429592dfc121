from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BookRequest(BaseModel):
    event_id: int = Field(ge=1)
    email: str


class BookingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    event_id: int
    email: str
    created_at: datetime
    updated_at: datetime
