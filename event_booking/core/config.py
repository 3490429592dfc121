import logging
import os

from event_booking.core.errors import ConfigurationError

# Database configuration, e.g. "sqlite+aiosqlite:///./events.db"
DATABASE_URL = os.getenv("DATABASE_URL", "")

# Redis configuration (Celery broker and result backend)
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]


def get_database_url() -> str:
    if not DATABASE_URL:
        raise ConfigurationError("Please define the DATABASE_URL environment variable")
    return DATABASE_URL


def get_redis_url():
    return REDIS_URL


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
