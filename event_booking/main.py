from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from event_booking.core.config import CORS_ORIGINS, configure_logging
from event_booking.database.db import close_database, connect_to_database
from event_booking.routes import bookings, events

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await connect_to_database()
    yield
    await close_database()


app = FastAPI(title="Event Booking", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include the routers
app.include_router(events.router)
app.include_router(bookings.router)
