"""Progress through one cycle of focus sessions."""

from __future__ import annotations

from dataclasses import dataclass, field


SESSIONS_PER_CYCLE = 4


@dataclass
class SessionCounter:
    """Which focus session of the cycle is current (1-based).

    ``advance()`` is called once per finished focus session and wraps
    back to 1 after the last one.  Breaks never advance the counter.
    """

    current: int = 1
    total: int = field(default=SESSIONS_PER_CYCLE, init=False)

    @property
    def is_last_session(self) -> bool:
        return self.current >= self.total

    @property
    def progress_fraction(self) -> float:
        """Fraction of the cycle completed before the current session."""
        return (self.current - 1) / self.total

    def advance(self) -> None:
        if self.current < self.total:
            self.current += 1
        else:
            self.current = 1

    def reset(self) -> None:
        self.current = 1
