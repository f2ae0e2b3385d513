"""UI package."""

from .progress_ring import ProgressRing
from .timer_window import TimerWindow, SessionProgress

__all__ = ["ProgressRing", "TimerWindow", "SessionProgress"]
