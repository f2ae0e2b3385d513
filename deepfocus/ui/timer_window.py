"""Main timer display.

Layout (top → bottom):
    - Title
    - Mode chips (FOCUS / REST / LONG REST)
    - ProgressRing with the countdown, flanked by − / + duration buttons
    - Reset · Start/Pause
    - Session progress card
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QColor, QKeySequence, QPainter, QShortcut
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QFrame,
    QButtonGroup, QMessageBox,
)

from ..timer.engine import TimerEngine
from ..timer.modes import Mode
from .progress_ring import ProgressRing
from .styles import PALETTE, build_stylesheet


RUNNING_DOT = "● "
_MODES = list(Mode)

INFO_TEXT = (
    "<p><b>DEEPFOCUS</b> v1.0</p>"
    "<p>Work in focused sessions separated by short rests. "
    "After the fourth session, take a long rest and start a new cycle.</p>"
    "<p>Use − / + to change a mode's length. "
    "Pick another mode while the timer runs to preview it; "
    "pressing Start there switches to it.</p>"
    "<p>Space: start/pause · R: reset · ←/→: mode · ↑/↓: length</p>"
)


# ── session progress ─────────────────────────────────────────────────────


class _SegmentBar(QWidget):
    """One thin bar per session; the current one fills fractionally."""

    SEGMENT_GAP = 8
    SEGMENT_HEIGHT = 4

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFixedHeight(self.SEGMENT_HEIGHT)
        self._fills: list[float] = []
        self._accent = QColor(Mode.FOCUS.accent_color)

    @property
    def fills(self) -> list[float]:
        return list(self._fills)

    def set_fills(self, fills: list[float], accent: str) -> None:
        self._fills = fills
        self._accent = QColor(accent)
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        if not self._fills:
            return
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.setPen(Qt.PenStyle.NoPen)
        count = len(self._fills)
        width = (self.width() - self.SEGMENT_GAP * (count - 1)) / count
        for i, fill in enumerate(self._fills):
            x = i * (width + self.SEGMENT_GAP)
            p.setBrush(QColor(PALETTE["track"]))
            p.drawRoundedRect(QRectF(x, 0, width, self.SEGMENT_HEIGHT), 2, 2)
            if fill > 0:
                p.setBrush(self._accent)
                p.drawRoundedRect(QRectF(x, 0, width * fill, self.SEGMENT_HEIGHT), 2, 2)
        p.end()


class SessionProgress(QFrame):
    """Caption ("SESSION  n of 4") over the segment bar."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("sessionCard")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(14)

        row = QHBoxLayout()
        caption = QLabel("SESSION", self)
        caption.setObjectName("sessionCaption")
        self._count_label = QLabel("1 of 4", self)
        row.addWidget(caption)
        row.addStretch()
        row.addWidget(self._count_label)
        layout.addLayout(row)

        self._bar = _SegmentBar(self)
        layout.addWidget(self._bar)

    @property
    def count_text(self) -> str:
        return self._count_label.text()

    @property
    def fills(self) -> list[float]:
        return self._bar.fills

    def update_progress(
        self, current: int, total: int, progress: float, accent: str,
    ) -> None:
        self._count_label.setText(f"{current} of {total}")
        # Share of the current session derived from whole-cycle progress
        partial = max(0.0, min(1.0, progress * total - (current - 1)))
        fills = []
        for session in range(1, total + 1):
            if session < current:
                fills.append(1.0)
            elif session == current:
                fills.append(partial)
            else:
                fills.append(0.0)
        self._bar.set_fills(fills, accent)


# ── window ───────────────────────────────────────────────────────────────


class TimerWindow(QWidget):
    """Everything the user sees.  Reads from and commands a TimerEngine."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self.setWindowTitle("DeepFocus")
        self._styled_mode: Mode | None = None
        self._build_ui()
        self._build_shortcuts()
        self._connect_signals()
        self.refresh()

    # ── build ─────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 20, 24, 24)
        root.setSpacing(16)

        # ── header ───────────────────────────────────────────────────
        header = QHBoxLayout()
        titles = QVBoxLayout()
        titles.setSpacing(2)
        title = QLabel("DEEPFOCUS", self)
        title.setObjectName("title")
        subtitle = QLabel("stay in the zone", self)
        subtitle.setObjectName("subtitle")
        titles.addWidget(title)
        titles.addWidget(subtitle)
        header.addLayout(titles)
        header.addStretch()
        self._info_btn = QPushButton("i", self)
        self._info_btn.setFixedSize(28, 28)
        header.addWidget(self._info_btn)
        root.addLayout(header)

        # ── mode chips ───────────────────────────────────────────────
        chips = QHBoxLayout()
        chips.setSpacing(8)
        chips.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._chip_group = QButtonGroup(self)
        self._chip_group.setExclusive(True)
        self._chips: dict[Mode, QPushButton] = {}
        for mode in _MODES:
            chip = QPushButton(mode.chip_label, self)
            chip.setObjectName("chip")
            chip.setCheckable(True)
            chip.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            self._chip_group.addButton(chip)
            chips.addWidget(chip)
            self._chips[mode] = chip
        root.addLayout(chips)

        # ── ring + duration buttons ──────────────────────────────────
        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._minus_btn = QPushButton("−", self)
        self._plus_btn = QPushButton("+", self)
        for btn in (self._minus_btn, self._plus_btn):
            btn.setFixedSize(36, 36)
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self._ring = ProgressRing(self)
        ring_row.addWidget(self._minus_btn)
        ring_row.addWidget(self._ring)
        ring_row.addWidget(self._plus_btn)
        root.addLayout(ring_row)

        # ── controls ─────────────────────────────────────────────────
        controls = QHBoxLayout()
        controls.setSpacing(12)
        controls.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._reset_btn = QPushButton("Reset", self)
        self._start_pause_btn = QPushButton("Start", self)
        self._start_pause_btn.setObjectName("primaryButton")
        for btn in (self._reset_btn, self._start_pause_btn):
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        controls.addWidget(self._reset_btn)
        controls.addWidget(self._start_pause_btn)
        root.addLayout(controls)

        root.addStretch()

        # ── session progress ─────────────────────────────────────────
        self._session_progress = SessionProgress(self)
        root.addWidget(self._session_progress)

    def _build_shortcuts(self) -> None:
        bindings = {
            Qt.Key.Key_Space: self._engine.toggle_start_pause,
            Qt.Key.Key_R: self._engine.reset,
            Qt.Key.Key_Left: lambda: self._step_viewed(-1),
            Qt.Key.Key_Right: lambda: self._step_viewed(1),
            Qt.Key.Key_Up: lambda: self._engine.adjust_duration(1),
            Qt.Key.Key_Down: lambda: self._engine.adjust_duration(-1),
        }
        for key, handler in bindings.items():
            QShortcut(QKeySequence(key), self).activated.connect(handler)

    def _connect_signals(self) -> None:
        for mode, chip in self._chips.items():
            chip.clicked.connect(lambda _checked, m=mode: self._engine.switch_viewed(m))
        self._minus_btn.clicked.connect(lambda: self._engine.adjust_duration(-1))
        self._plus_btn.clicked.connect(lambda: self._engine.adjust_duration(1))
        self._start_pause_btn.clicked.connect(self._engine.toggle_start_pause)
        self._reset_btn.clicked.connect(self._engine.reset)
        self._info_btn.clicked.connect(self._show_info)

        self._engine.state_changed.connect(self.refresh)
        self._engine.remaining_changed.connect(lambda _r: self.refresh())
        self._engine.running_changed.connect(lambda _r: self.refresh())

    # ── view update ───────────────────────────────────────────────────

    def refresh(self) -> None:
        engine = self._engine
        viewed = engine.viewed_mode

        for mode, chip in self._chips.items():
            chip.setChecked(mode == viewed)
            indicator = (
                mode == engine.active_mode and engine.is_running and mode != viewed
            )
            chip.setText((RUNNING_DOT if indicator else "") + mode.chip_label)

        self._ring.set_colors(viewed.accent_color, viewed.glow_color)
        self._ring.set_fraction(engine.progress_fraction)
        self._ring.set_time_text(engine.display_time)
        self._ring.set_label(viewed.display_name)

        can_adjust = engine.can_adjust_duration
        self._minus_btn.setEnabled(can_adjust)
        self._plus_btn.setEnabled(can_adjust)

        pausing = engine.is_running and engine.is_viewing_active_mode
        self._start_pause_btn.setText("Pause" if pausing else "Start")

        session = engine.session
        self._session_progress.update_progress(
            session.current,
            session.total,
            engine.session_progress_fraction,
            engine.active_mode.accent_color,
        )
        if viewed != self._styled_mode:
            self._styled_mode = viewed
            self.setStyleSheet(build_stylesheet(viewed))

    # ── helpers ───────────────────────────────────────────────────────

    def _step_viewed(self, delta: int) -> None:
        index = _MODES.index(self._engine.viewed_mode)
        self._engine.switch_viewed(_MODES[(index + delta) % len(_MODES)])

    def _show_info(self) -> None:
        QMessageBox.about(self, "About DeepFocus", INFO_TEXT)
