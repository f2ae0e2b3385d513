"""Timer state machine for DeepFocus.

States
------
Idle(mode)     Countdown for the active mode is paused or not yet started.
Running(mode)  Countdown for the active mode is live.

The *active* mode owns the countdown.  The *viewed* mode is whatever the
user is looking at; it can differ from the active one while a countdown
runs (e.g. peeking at the break length during focus).

Transitions
-----------
toggle_start_pause   viewing active + running      → pause
                     viewing active + not running  → start
                     viewing another mode          → discard countdown,
                                                     activate viewed, start
reset                any                           → Idle(viewed), full duration
tick                 Running, remaining hits 0     → completion

Completion (the auto-cycle)
---------------------------
Focus → short break, or long break after the last session of the cycle
(the session counter advances on every finished focus).  Any break →
focus.  The next countdown starts by itself after ``auto_resume_delay``
unless a reset, toggle or suspend supersedes it first.
The session counter only returns to 1 by wrapping when the last focus
session of a cycle finishes; reset restarts the countdown, not the cycle.

Suspension
----------
``on_suspend`` / ``on_resume`` are called by the host when the app stops
and starts being observed.  Ticks are ignored in between; the wall-clock
gap is subtracted on resume, completing the countdown if it ran out.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from .collaborators import (
    CompletionFeedback,
    DurationStore,
    MemoryDurationStore,
    Notifier,
    NullNotifier,
    SilentFeedback,
)
from .modes import Mode
from .session import SessionCounter


logger = logging.getLogger(__name__)


# ── constants ─────────────────────────────────────────────────────────────

TICK_INTERVAL_MS = 1000
AUTO_RESUME_DELAY = 0.8  # seconds between a completion and the next start


def utc_now() -> datetime:
    """Timezone-aware wall clock; differences ignore DST and zone changes."""
    return datetime.now(timezone.utc)


def format_clock(seconds: float) -> str:
    """``mm:ss`` for a non-negative number of seconds (fractions dropped)."""
    whole = int(max(0.0, seconds))
    return f"{whole // 60:02d}:{whole % 60:02d}"


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Pomodoro countdown with active/viewed mode separation.

    Signals
    -------
    state_changed()
        Emitted after any command or tick that changed observable state.
    remaining_changed(remaining_seconds: float)
        Emitted whenever the countdown value changes.
    running_changed(is_running: bool)
        Emitted when the countdown starts or stops.
    mode_completed(mode: Mode)
        Emitted when the active mode's countdown reaches zero.
    duration_changed(mode: Mode, seconds: float)
        Emitted after a successful ``adjust_duration``.
    """

    state_changed = pyqtSignal()
    remaining_changed = pyqtSignal(float)
    running_changed = pyqtSignal(bool)
    mode_completed = pyqtSignal(object)
    duration_changed = pyqtSignal(object, float)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        store: DurationStore | None = None,
        feedback: CompletionFeedback | None = None,
        notifier: Notifier | None = None,
        clock: Callable[[], datetime] | None = None,
        auto_resume_delay: float = AUTO_RESUME_DELAY,
    ) -> None:
        super().__init__(parent)

        # ── collaborators ─────────────────────────────────────────────
        self._store: DurationStore = store or MemoryDurationStore()
        self._feedback: CompletionFeedback = feedback or SilentFeedback()
        self._notifier: Notifier = notifier or NullNotifier()
        self._clock = clock or utc_now
        self._auto_resume_delay = max(0.0, auto_resume_delay)
        self._permission_requested = False

        # ── configuration ─────────────────────────────────────────────
        self._durations: dict[Mode, float] = {
            mode: self._load_duration(mode) for mode in Mode
        }

        # ── countdown state ───────────────────────────────────────────
        self._active_mode: Mode = Mode.FOCUS
        self._viewed_mode: Mode = Mode.FOCUS
        self._remaining: float = self._durations[Mode.FOCUS]
        self._running: bool = False
        self._session = SessionCounter()
        self._suspended_at: datetime | None = None

        # ── auto-resume bookkeeping ───────────────────────────────────
        self._epoch: int = 0
        self._pending_resume_epoch: int | None = None

        # ── Qt timers ─────────────────────────────────────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self.tick)

        self._resume_timer = QTimer(self)
        self._resume_timer.setSingleShot(True)
        self._resume_timer.timeout.connect(self._on_auto_resume)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def active_mode(self) -> Mode:
        return self._active_mode

    @property
    def viewed_mode(self) -> Mode:
        return self._viewed_mode

    @property
    def remaining(self) -> float:
        """Seconds left on the active mode's countdown."""
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def session(self) -> SessionCounter:
        return self._session

    @property
    def is_suspended(self) -> bool:
        return self._suspended_at is not None

    @property
    def auto_resume_pending(self) -> bool:
        return self._pending_resume_epoch is not None

    @property
    def transition_epoch(self) -> int:
        """Incremented once per completion."""
        return self._epoch

    @property
    def auto_resume_delay(self) -> float:
        return self._auto_resume_delay

    @auto_resume_delay.setter
    def auto_resume_delay(self, value: float) -> None:
        self._auto_resume_delay = max(0.0, value)

    @property
    def is_viewing_active_mode(self) -> bool:
        return self._viewed_mode == self._active_mode

    @property
    def can_adjust_duration(self) -> bool:
        return not (self._running and self.is_viewing_active_mode)

    @property
    def display_time(self) -> str:
        """``mm:ss`` of the countdown, or of the viewed mode's duration."""
        if self.is_viewing_active_mode:
            return format_clock(self._remaining)
        return format_clock(self._durations[self._viewed_mode])

    @property
    def progress_fraction(self) -> float:
        """0.0 → 1.0 through the active countdown; 0 when viewing elsewhere."""
        if not self.is_viewing_active_mode:
            return 0.0
        return self._elapsed_fraction(self._active_mode)

    @property
    def session_progress_fraction(self) -> float:
        """0.0 → 1.0 through the whole cycle, counting the running focus."""
        completed = self._session.current - 1
        current = (
            self._elapsed_fraction(Mode.FOCUS)
            if self._active_mode == Mode.FOCUS
            else 0.0
        )
        return (completed + current) / self._session.total

    def duration_for(self, mode: Mode) -> float:
        return self._durations[mode]

    # ══════════════════════════════════════════════════════════════════
    #  COMMANDS
    # ══════════════════════════════════════════════════════════════════

    def switch_viewed(self, mode: Mode) -> None:
        """Show *mode* without touching the active countdown."""
        if not isinstance(mode, Mode):
            raise TypeError(f"expected Mode, got {type(mode).__name__}")
        if mode == self._viewed_mode:
            return
        self._viewed_mode = mode
        self.state_changed.emit()

    def adjust_duration(self, steps: int) -> bool:
        """Change the viewed mode's duration by *steps* increments.

        Refused while the running countdown is on screen.  Returns True
        when the duration actually changed.
        """
        if not self.can_adjust_duration:
            return False

        mode = self._viewed_mode
        current = self._durations[mode]
        new_duration = mode.clamp(current + steps * mode.duration_step)
        if new_duration == current:
            return False

        self._durations[mode] = new_duration
        self._call("save_duration", self._store.save_duration, mode, new_duration)
        if self.is_viewing_active_mode:
            self._set_remaining(new_duration)

        logger.debug("duration of %s set to %ss", mode.value, new_duration)
        self.duration_changed.emit(mode, new_duration)
        self.state_changed.emit()
        return True

    def toggle_start_pause(self) -> None:
        self._cancel_auto_resume()
        if self.is_viewing_active_mode and self._running:
            self._pause()
        elif self.is_viewing_active_mode:
            self._start()
        else:
            self._stop()
            self._active_mode = self._viewed_mode
            self._set_remaining(self._durations[self._viewed_mode])
            self._start()
        self.state_changed.emit()

    def reset(self) -> None:
        """Stop and reload the viewed mode's full duration."""
        self._cancel_auto_resume()
        self._stop()
        self._active_mode = self._viewed_mode
        self._set_remaining(self._durations[self._viewed_mode])
        self.state_changed.emit()

    def tick(self) -> None:
        """Advance the countdown by one second."""
        if not self._running or self._suspended_at is not None:
            return
        if self._remaining <= 0:
            return
        self._set_remaining(max(0.0, self._remaining - 1))
        if self._remaining <= 0:
            self._complete()
        self.state_changed.emit()

    # ── host lifecycle ────────────────────────────────────────────────

    def on_suspend(self) -> None:
        """The host stopped observing the app (backgrounded, hidden...)."""
        self._cancel_auto_resume()
        if not self._running or self._suspended_at is not None:
            return
        self._suspended_at = self._clock()
        self._qt_timer.stop()
        logger.debug(
            "suspended with %.1fs left on %s",
            self._remaining, self._active_mode.value,
        )
        self._call(
            "schedule_notification",
            self._notifier.schedule_notification,
            self._remaining,
            self._active_mode,
        )

    def on_resume(self) -> None:
        """The host is observing again; charge the time spent away."""
        suspended_at = self._suspended_at
        self._suspended_at = None
        if suspended_at is None or not self._running:
            return

        elapsed = max(0.0, (self._clock() - suspended_at).total_seconds())
        self._call("cancel_notification", self._notifier.cancel_notification)
        logger.debug("resumed after %.1fs away", elapsed)

        if elapsed >= self._remaining:
            self._set_remaining(0.0)
            self._complete()
        else:
            self._set_remaining(self._remaining - elapsed)
            self._qt_timer.start()
        self.state_changed.emit()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: countdown mechanics
    # ══════════════════════════════════════════════════════════════════

    def _start(self) -> None:
        if self._running:
            return
        if not self._permission_requested:
            self._permission_requested = True
            self._call("request_permission", self._notifier.request_permission)
        self._running = True
        self._qt_timer.start()
        self.running_changed.emit(True)

    def _pause(self) -> None:
        self._stop()

    def _stop(self) -> None:
        self._qt_timer.stop()
        if self._suspended_at is not None:
            # The countdown the deferred notice announced is gone
            self._suspended_at = None
            self._call("cancel_notification", self._notifier.cancel_notification)
        if self._running:
            self._running = False
            self.running_changed.emit(False)

    def _complete(self) -> None:
        completed = self._active_mode
        self._stop()
        self._call("on_completion", self._feedback.on_completion, completed)
        self._epoch += 1

        if completed == Mode.FOCUS:
            was_last = self._session.is_last_session
            self._session.advance()
            next_mode = Mode.LONG_BREAK if was_last else Mode.SHORT_BREAK
        else:
            next_mode = Mode.FOCUS

        self._call("notify_completed", self._notifier.notify_completed, completed)
        logger.debug(
            "%s complete, next %s (session %d of %d)",
            completed.value, next_mode.value,
            self._session.current, self._session.total,
        )

        self._active_mode = next_mode
        self._viewed_mode = next_mode
        self._set_remaining(self._durations[next_mode])
        self.mode_completed.emit(completed)

        self._pending_resume_epoch = self._epoch
        self._resume_timer.start(int(self._auto_resume_delay * 1000))

    def _on_auto_resume(self) -> None:
        epoch = self._pending_resume_epoch
        self._pending_resume_epoch = None
        if epoch is None or epoch != self._epoch or self._running:
            return
        self._start()
        self.state_changed.emit()

    def _cancel_auto_resume(self) -> None:
        self._resume_timer.stop()
        self._pending_resume_epoch = None

    def _set_remaining(self, seconds: float) -> None:
        if seconds == self._remaining:
            return
        self._remaining = seconds
        self.remaining_changed.emit(seconds)

    def _elapsed_fraction(self, mode: Mode) -> float:
        total = self._durations[mode]
        if total <= 0:
            return 0.0
        return 1.0 - self._remaining / total

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: collaborators
    # ══════════════════════════════════════════════════════════════════

    def _load_duration(self, mode: Mode) -> float:
        stored = self._call("load_duration", self._store.load_duration, mode)
        if stored is None or stored <= 0:
            return mode.factory_duration
        return mode.clamp(float(stored))

    def _call(self, name: str, fn: Callable, *args):
        """Run a collaborator call; failures are logged, never raised."""
        try:
            return fn(*args)
        except Exception:
            logger.warning("collaborator call %s failed", name, exc_info=True)
            return None
