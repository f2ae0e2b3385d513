"""Shared test helpers for DeepFocus."""

from datetime import datetime, timedelta, timezone

from deepfocus.timer.engine import TimerEngine
from deepfocus.timer.modes import Mode


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = datetime(2026, 3, 2, 9, 0, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class RecordingFeedback:
    def __init__(self):
        self.completed: list[Mode] = []

    def on_completion(self, mode: Mode) -> None:
        self.completed.append(mode)


class RecordingNotifier:
    def __init__(self):
        self.permission_requests = 0
        self.scheduled: list[tuple[float, Mode]] = []
        self.cancellations = 0
        self.completed: list[Mode] = []

    def request_permission(self) -> None:
        self.permission_requests += 1

    def schedule_notification(self, after_seconds: float, mode: Mode) -> None:
        self.scheduled.append((after_seconds, mode))

    def cancel_notification(self) -> None:
        self.cancellations += 1

    def notify_completed(self, mode: Mode) -> None:
        self.completed.append(mode)


class BrokenCollaborator:
    """Raises from every method, for failure-isolation tests."""

    def __getattr__(self, name):
        def _fail(*args, **kwargs):
            raise RuntimeError(f"{name} unavailable")
        return _fail


def complete_countdown(engine: TimerEngine) -> None:
    """Fast-complete the running countdown by jumping to the last tick."""
    engine._remaining = 1
    engine.tick()


def fire_auto_resume(engine: TimerEngine) -> None:
    """Deliver the pending auto-resume as if its delay had elapsed."""
    engine._resume_timer.stop()
    engine._on_auto_resume()


def snapshot(engine: TimerEngine) -> tuple:
    return (
        engine.active_mode,
        engine.viewed_mode,
        engine.remaining,
        engine.is_running,
        engine.session.current,
        engine.is_suspended,
        engine.auto_resume_pending,
    )
