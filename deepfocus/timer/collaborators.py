"""Contracts the timer engine needs from the outside world.

The engine never talks to a database, a speaker or a notification
centre directly.  It is handed objects satisfying these protocols at
construction; anything left out falls back to a null implementation.
"""

from __future__ import annotations

from typing import Protocol

from .modes import Mode


class DurationStore(Protocol):
    def load_duration(self, mode: Mode) -> float | None: ...

    def save_duration(self, mode: Mode, seconds: float) -> None: ...


class CompletionFeedback(Protocol):
    def on_completion(self, mode: Mode) -> None: ...


class Notifier(Protocol):
    def request_permission(self) -> None: ...

    def schedule_notification(self, after_seconds: float, mode: Mode) -> None: ...

    def cancel_notification(self) -> None: ...

    def notify_completed(self, mode: Mode) -> None: ...


# ── null implementations ──────────────────────────────────────────────────


class MemoryDurationStore:
    """Keeps durations in a dict; nothing survives the process."""

    def __init__(self, initial: dict[Mode, float] | None = None) -> None:
        self._values: dict[Mode, float] = dict(initial or {})

    def load_duration(self, mode: Mode) -> float | None:
        return self._values.get(mode)

    def save_duration(self, mode: Mode, seconds: float) -> None:
        self._values[mode] = seconds


class SilentFeedback:
    def on_completion(self, mode: Mode) -> None:
        pass


class NullNotifier:
    def request_permission(self) -> None:
        pass

    def schedule_notification(self, after_seconds: float, mode: Mode) -> None:
        pass

    def cancel_notification(self) -> None:
        pass

    def notify_completed(self, mode: Mode) -> None:
        pass
