"""Duration store backed by the ``durations`` table."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from ..timer.modes import Mode
from .db import get_session
from .models import StoredDuration


logger = logging.getLogger(__name__)


class DurationRepository:
    """Loads and saves per-mode durations.

    Database failures are logged and absorbed: a failed load reads as
    "nothing stored", a failed save is dropped.
    """

    def load_duration(self, mode: Mode) -> float | None:
        try:
            with get_session() as db:
                record = db.get(StoredDuration, mode.value)
                return record.seconds if record else None
        except SQLAlchemyError:
            logger.warning("could not load duration for %s", mode.value, exc_info=True)
            return None

    def save_duration(self, mode: Mode, seconds: float) -> None:
        try:
            with get_session() as db:
                record = db.get(StoredDuration, mode.value)
                if record is None:
                    db.add(StoredDuration(mode=mode.value, seconds=float(seconds)))
                else:
                    record.seconds = float(seconds)
        except SQLAlchemyError:
            logger.warning("could not save duration for %s", mode.value, exc_info=True)
