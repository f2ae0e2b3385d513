"""Desktop notifications through the system tray.

``TrayNotifier`` is the timer engine's notifier collaborator.  It owns
at most one pending "countdown finished" message, armed when the app is
suspended and cancelled when it comes back.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, Qt, QTimer
from PyQt6.QtGui import QGuiApplication
from PyQt6.QtWidgets import QSystemTrayIcon

from .timer.modes import Mode


logger = logging.getLogger(__name__)

TITLE = "DeepFocus"


class TrayNotifier(QObject):
    """Shows messages on a ``QSystemTrayIcon``.

    Without a tray icon (or with notifications disabled) every call is
    a no-op.  Failures are logged and never raised.
    """

    def __init__(
        self,
        tray_icon: QSystemTrayIcon | None = None,
        parent: QObject | None = None,
        *,
        enabled: bool = True,
    ) -> None:
        super().__init__(parent)
        self._tray_icon = tray_icon
        self._enabled = enabled
        self._has_requested = False
        self._supported = False
        self._pending_mode: Mode | None = None

        self._deferred = QTimer(self)
        self._deferred.setSingleShot(True)
        self._deferred.timeout.connect(self._on_deferred)

    # ── public API ────────────────────────────────────────────────────

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled
        if not enabled:
            self.cancel_notification()

    @property
    def supported(self) -> bool:
        """Whether the desktop accepted the permission request."""
        return self._supported

    @property
    def pending_mode(self) -> Mode | None:
        return self._pending_mode

    def request_permission(self) -> None:
        """Desktop trays need no grant; record whether messages can show."""
        if self._has_requested:
            return
        self._has_requested = True
        try:
            self._supported = (
                self._tray_icon is not None
                and QSystemTrayIcon.isSystemTrayAvailable()
                and QSystemTrayIcon.supportsMessages()
            )
        except RuntimeError:
            logger.warning("notification support check failed", exc_info=True)
            self._supported = False
        if not self._supported:
            logger.info("system tray messages unavailable")

    def schedule_notification(self, after_seconds: float, mode: Mode) -> None:
        if not self._enabled:
            return
        self._pending_mode = mode
        self._deferred.start(int(max(after_seconds, 1) * 1000))

    def cancel_notification(self) -> None:
        self._deferred.stop()
        self._pending_mode = None

    def notify_completed(self, mode: Mode) -> None:
        """Announce a finished countdown, unless the user is looking."""
        if not self._enabled:
            return
        if self._app_is_active():
            return
        self._show(mode)

    # ── internal ──────────────────────────────────────────────────────

    def _app_is_active(self) -> bool:
        return QGuiApplication.applicationState() == Qt.ApplicationState.ApplicationActive

    def _on_deferred(self) -> None:
        mode = self._pending_mode
        self._pending_mode = None
        if mode is not None:
            self._show(mode)

    def _show(self, mode: Mode) -> None:
        if self._tray_icon is None:
            return
        try:
            self._tray_icon.showMessage(TITLE, mode.notification_body)
        except RuntimeError:
            logger.warning("could not show notification", exc_info=True)
