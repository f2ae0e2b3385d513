"""Main application window for DeepFocus."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QGuiApplication, QIcon, QPainter, QPixmap
from PyQt6.QtWidgets import QMainWindow, QSystemTrayIcon, QWidget

from .audio.sounds import SoundManager
from .database.durations import DurationRepository
from .notifications import TrayNotifier
from .settings import Settings, load_settings, save_settings
from .timer.engine import TimerEngine
from .timer.modes import Mode
from .ui.timer_window import TimerWindow


logger = logging.getLogger(__name__)

_SUSPENDED_STATES = (
    Qt.ApplicationState.ApplicationHidden,
    Qt.ApplicationState.ApplicationSuspended,
)


def make_icon(mode: Mode = Mode.FOCUS) -> QIcon:
    """A filled circle in *mode*'s accent colour."""
    size = 64
    pix = QPixmap(size, size)
    pix.fill(QColor(0, 0, 0, 0))
    p = QPainter(pix)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    colour = QColor(mode.accent_color)
    p.setBrush(colour)
    p.setPen(colour.darker(120))
    p.drawEllipse(4, 4, size - 8, size - 8)
    p.end()
    return QIcon(pix)


class DeepFocusApp(QMainWindow):
    """Owns the engine and its collaborators and hosts the timer view.

    Application state changes are forwarded to the engine: hidden or
    suspended suspends it, active or merely inactive resumes it.
    """

    def __init__(
        self,
        parent: QWidget | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        super().__init__(parent)
        self._settings: Settings = settings or load_settings()

        # ── system tray icon ──────────────────────────────────────────
        self._tray_icon = QSystemTrayIcon(make_icon(), self)
        self._tray_icon.setToolTip("DeepFocus")
        self._tray_icon.activated.connect(self._on_tray_activated)
        if QSystemTrayIcon.isSystemTrayAvailable():
            self._tray_icon.show()

        # ── collaborators ─────────────────────────────────────────────
        self._sound_manager = SoundManager(parent=self)
        self._sound_manager.set_volume(self._settings.sound_volume)
        self._sound_manager.set_enabled(self._settings.sound_enabled)

        self._notifier = TrayNotifier(
            self._tray_icon, self,
            enabled=self._settings.notifications_enabled,
        )

        # ── engine ────────────────────────────────────────────────────
        self._timer_engine = TimerEngine(
            self,
            store=DurationRepository(),
            feedback=self._sound_manager,
            notifier=self._notifier,
            auto_resume_delay=self._settings.auto_resume_delay,
        )

        # ── view ──────────────────────────────────────────────────────
        self._timer_window = TimerWindow(self._timer_engine, self)
        self.setCentralWidget(self._timer_window)
        self.setWindowTitle("DeepFocus")
        self.resize(self._settings.window_width, self._settings.window_height)
        if self._settings.always_on_top:
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)

        # ── wire signals ──────────────────────────────────────────────
        self._timer_engine.duration_changed.connect(self._on_duration_changed)
        self._timer_engine.mode_completed.connect(self._on_mode_completed)
        app = QGuiApplication.instance()
        if app is not None:
            app.applicationStateChanged.connect(self._on_application_state)

    # ── public ────────────────────────────────────────────────────────

    @property
    def engine(self) -> TimerEngine:
        return self._timer_engine

    @property
    def timer_window(self) -> TimerWindow:
        return self._timer_window

    # ── slots ─────────────────────────────────────────────────────────

    def _on_application_state(self, state: Qt.ApplicationState) -> None:
        # Inactive only means another app has focus; the window still runs
        if state in _SUSPENDED_STATES:
            self._timer_engine.on_suspend()
        else:
            self._timer_engine.on_resume()

    def _on_duration_changed(self, mode: Mode, seconds: float) -> None:
        self._sound_manager.on_selection()

    def _on_mode_completed(self, mode: Mode) -> None:
        self._tray_icon.setIcon(make_icon(self._timer_engine.active_mode))

    def _on_tray_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self.showNormal()
            self.raise_()
            self.activateWindow()

    def closeEvent(self, event) -> None:  # noqa: N802
        self._settings.window_width = self.width()
        self._settings.window_height = self.height()
        try:
            save_settings(self._settings)
        except OSError:
            logger.warning("could not save settings", exc_info=True)
        self._notifier.cancel_notification()
        self._tray_icon.hide()
        super().closeEvent(event)
