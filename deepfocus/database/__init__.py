"""Database package."""

from .db import configure_engine, get_session, init_db
from .durations import DurationRepository
from .models import StoredDuration

__all__ = [
    "configure_engine",
    "get_session",
    "init_db",
    "DurationRepository",
    "StoredDuration",
]
