from datetime import datetime

from pydantic import BaseModel, ConfigDict


# ---------- Event ----------
# Emptiness, list length and date/time formats are checked by the event service
class EventCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: list[str]
    organizer: str
    tags: list[str]


class EventUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    description: str | None = None
    overview: str | None = None
    image: str | None = None
    venue: str | None = None
    location: str | None = None
    date: str | None = None
    time: str | None = None
    mode: str | None = None
    audience: str | None = None
    agenda: list[str] | None = None
    organizer: str | None = None
    tags: list[str] | None = None


class EventOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: list[str]
    organizer: str
    tags: list[str]
    created_at: datetime
    updated_at: datetime


class FeaturedEventOut(BaseModel):
    title: str
    image: str
    slug: str
    location: str
    date: str
    time: str
