"""Desktop dialogs and notifications backed by Qt."""
from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Optional

from loguru import logger
from PyQt6.QtCore import QEventLoop, QTimer
from PyQt6.QtWidgets import QApplication, QFileDialog, QMessageBox, QStyle, QSystemTrayIcon

from ..config import APP_NAME
from ..errors import AcquisitionError
from .polling import wait_until


class NotificationLevel(Enum):
    INFO = "info"
    ERROR = "error"


def display_configured(environ=None, platform: Optional[str] = None) -> bool:
    """Whether a Qt platform plugin can be expected to start.

    On Linux Qt aborts the process when no display server is reachable, so a
    display (or an explicit ``QT_QPA_PLATFORM``) is required up front.
    """
    environ = os.environ if environ is None else environ
    platform = sys.platform if platform is None else platform
    if not platform.startswith("linux"):
        return True
    return any(environ.get(name) for name in ("DISPLAY", "WAYLAND_DISPLAY", "QT_QPA_PLATFORM"))


def gui_available() -> bool:
    return QApplication.instance() is not None or display_configured()


def tray_available() -> bool:
    return QSystemTrayIcon.isSystemTrayAvailable()


class DesktopServices:
    """File pickers, a yes/no question and tray notifications.

    The ``QApplication`` is created on first use so that runs which never
    open a dialog do not need a display.
    """

    def __init__(self, app_name: str = APP_NAME, notification_ms: int = 5000) -> None:
        self.app_name = app_name
        self.notification_ms = notification_ms
        self._app: Optional[QApplication] = None
        self._tray: Optional[QSystemTrayIcon] = None

    # ------------------------------------------------------------------
    def _application(self) -> QApplication:
        if self._app is None:
            if not gui_available():
                raise AcquisitionError("No display available for desktop dialogs")
            self._app = QApplication.instance() or QApplication([self.app_name])
            self._app.setApplicationName(self.app_name)
        return self._app

    def _tray_icon(self) -> Optional[QSystemTrayIcon]:
        app = self._application()
        if not tray_available():
            return None
        if self._tray is None:
            icon = app.style().standardIcon(QStyle.StandardPixmap.SP_ComputerIcon)
            self._tray = QSystemTrayIcon(icon)
            self._tray.setToolTip(self.app_name)
            self._tray.show()
        return self._tray

    # ------------------------------------------------------------------
    def pick_files(self, title: str, directory: str = "./") -> list[str]:
        """Multi-select file dialog; an empty list when cancelled."""
        self._application()
        paths, _ = QFileDialog.getOpenFileNames(None, title, directory, "All Files (*)")
        logger.debug("File picker returned {} path(s)", len(paths))
        return list(paths)

    def ask_yes_no(self, title: str, text: str, poll_interval_s: float = 1.0) -> bool:
        """Ask a question and poll for the answer every ``poll_interval_s``.

        Closing the box without choosing counts as "no".
        """
        self._application()
        box = QMessageBox(
            QMessageBox.Icon.Question,
            title,
            text,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
        )
        answered: list[int] = []
        box.finished.connect(answered.append)
        box.open()

        def ready(timeout_s: float) -> bool:
            if answered:
                return True
            loop = QEventLoop()
            timer = QTimer()
            timer.setSingleShot(True)
            timer.timeout.connect(loop.quit)
            box.finished.connect(loop.quit)
            timer.start(int(timeout_s * 1000))
            loop.exec()
            timer.stop()
            box.finished.disconnect(loop.quit)
            return bool(answered)

        wait_until(ready, poll_interval_s)
        clicked = box.clickedButton()
        return clicked is not None and box.standardButton(clicked) == QMessageBox.StandardButton.Yes

    def choose_save_path(self, title: str, directory: str = "./") -> str:
        """Save-location dialog; an empty string when cancelled."""
        self._application()
        path, _ = QFileDialog.getSaveFileName(None, title, directory)
        return path

    def notify(self, message: str, level: NotificationLevel = NotificationLevel.INFO) -> None:
        if not gui_available():
            logger.debug("No display available; notification shown on console only")
            return
        tray = self._tray_icon()
        if tray is None:
            logger.debug("System tray unavailable; notification shown on console only")
            return
        icon = (
            QSystemTrayIcon.MessageIcon.Critical
            if level is NotificationLevel.ERROR
            else QSystemTrayIcon.MessageIcon.Information
        )
        tray.showMessage(self.app_name, message, icon, self.notification_ms)
        self._application().processEvents()
