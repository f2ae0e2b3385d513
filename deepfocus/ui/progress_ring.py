"""Circular progress ring rendered with QPainter.

Fills clockwise as the countdown runs and shows ``mm:ss`` plus the
mode name in the centre.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QColor, QFont, QPainter, QPen
from PyQt6.QtWidgets import QWidget

from .styles import PALETTE


class ProgressRing(QWidget):
    """Custom-painted circular timer ring."""

    RING_DIAMETER = 260
    RING_THICKNESS = 6

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.RING_DIAMETER + 24, self.RING_DIAMETER + 24)
        self._fraction: float = 0.0
        self._time_text: str = "25:00"
        self._label: str = ""
        self._accent = QColor("#F5F0EB")
        self._glow = QColor("#D4C5A9")

    # ── public API ────────────────────────────────────────────────────

    @property
    def fraction(self) -> float:
        return self._fraction

    @property
    def time_text(self) -> str:
        return self._time_text

    def set_fraction(self, fraction: float) -> None:
        self._fraction = max(0.0, min(1.0, fraction))
        self.update()

    def set_time_text(self, text: str) -> None:
        self._time_text = text
        self.update()

    def set_label(self, text: str) -> None:
        self._label = text
        self.update()

    def set_colors(self, accent: str, glow: str) -> None:
        self._accent = QColor(accent)
        self._glow = QColor(glow)
        self.update()

    # ── painting ──────────────────────────────────────────────────────

    def paintEvent(self, event) -> None:  # noqa: N802
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)

        side = min(self.width(), self.height()) - self.RING_THICKNESS * 4
        rect = QRectF(
            (self.width() - side) / 2, (self.height() - side) / 2, side, side,
        )

        # Track
        track_pen = QPen(QColor(PALETTE["track"]), self.RING_THICKNESS)
        p.setPen(track_pen)
        p.drawEllipse(rect)

        # Glow under the arc
        if self._fraction > 0:
            glow = QColor(self._glow)
            glow.setAlpha(60)
            glow_pen = QPen(glow, self.RING_THICKNESS * 2.5)
            glow_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            p.setPen(glow_pen)
            # Qt angles: 1/16 degree, 0 at 3 o'clock, counter-clockwise
            span = -int(self._fraction * 360 * 16)
            p.drawArc(rect, 90 * 16, span)

            arc_pen = QPen(self._accent, self.RING_THICKNESS)
            arc_pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            p.setPen(arc_pen)
            p.drawArc(rect, 90 * 16, span)

        # Time
        p.setPen(QColor(PALETTE["text"]))
        font = QFont()
        font.setPointSize(44)
        font.setWeight(QFont.Weight.Light)
        p.setFont(font)
        p.drawText(rect, Qt.AlignmentFlag.AlignCenter, self._time_text)

        # Mode label below the time
        if self._label:
            font.setPointSize(10)
            font.setWeight(QFont.Weight.DemiBold)
            font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 2)
            p.setFont(font)
            p.setPen(QColor(PALETTE["text_muted"]))
            label_rect = QRectF(rect.left(), rect.center().y() + 36, rect.width(), 20)
            p.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, self._label)

        p.end()
