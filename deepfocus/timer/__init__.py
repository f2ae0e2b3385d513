"""Timer package."""

from .engine import TimerEngine, AUTO_RESUME_DELAY, format_clock
from .modes import Mode
from .session import SessionCounter, SESSIONS_PER_CYCLE

__all__ = [
    "TimerEngine",
    "AUTO_RESUME_DELAY",
    "format_clock",
    "Mode",
    "SessionCounter",
    "SESSIONS_PER_CYCLE",
]
