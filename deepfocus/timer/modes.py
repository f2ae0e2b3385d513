"""Timer modes and their fixed duration bounds.

Every mode carries four constants (seconds):

    factory_duration   default when nothing is stored
    min_duration       lower bound for adjustments
    max_duration       upper bound for adjustments
    duration_step      one +/- adjustment step

The enum value doubles as the persistence key for a stored duration.
"""

from __future__ import annotations

from enum import Enum


class Mode(Enum):
    FOCUS = "FOCUS"
    SHORT_BREAK = "REST"
    LONG_BREAK = "LONG REST"

    @property
    def factory_duration(self) -> float:
        return _FACTORY_DURATIONS[self]

    @property
    def min_duration(self) -> float:
        return 5 * 60

    @property
    def max_duration(self) -> float:
        return _MAX_DURATIONS[self]

    @property
    def duration_step(self) -> float:
        return 5 * 60

    @property
    def is_break(self) -> bool:
        return self is not Mode.FOCUS

    @property
    def chip_label(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def accent_color(self) -> str:
        return _ACCENT_COLORS[self]

    @property
    def glow_color(self) -> str:
        return _GLOW_COLORS[self]

    @property
    def notification_body(self) -> str:
        return _NOTIFICATION_BODIES[self]

    def clamp(self, seconds: float) -> float:
        """Pin *seconds* into ``[min_duration, max_duration]``."""
        return min(max(seconds, self.min_duration), self.max_duration)


# ── constants ─────────────────────────────────────────────────────────────

_FACTORY_DURATIONS: dict[Mode, float] = {
    Mode.FOCUS: 25 * 60,
    Mode.SHORT_BREAK: 5 * 60,
    Mode.LONG_BREAK: 15 * 60,
}

_MAX_DURATIONS: dict[Mode, float] = {
    Mode.FOCUS: 120 * 60,
    Mode.SHORT_BREAK: 30 * 60,
    Mode.LONG_BREAK: 60 * 60,
}

_ACCENT_COLORS: dict[Mode, str] = {
    Mode.FOCUS: "#F5F0EB",
    Mode.SHORT_BREAK: "#7EB8E0",
    Mode.LONG_BREAK: "#6A8FD4",
}

_GLOW_COLORS: dict[Mode, str] = {
    Mode.FOCUS: "#D4C5A9",
    Mode.SHORT_BREAK: "#5E9EFF",
    Mode.LONG_BREAK: "#3D6BB5",
}

_NOTIFICATION_BODIES: dict[Mode, str] = {
    Mode.FOCUS: "Focus session complete! Time for a break.",
    Mode.SHORT_BREAK: "Break's over! Ready to focus again?",
    Mode.LONG_BREAK: "Long break done! Start a new cycle.",
}
