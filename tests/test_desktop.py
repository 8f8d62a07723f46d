from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from loguru import logger
from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication, QMessageBox

from panostitch.errors import AcquisitionError
from panostitch.ui import desktop as desktop_module
from panostitch.ui.desktop import DesktopServices, NotificationLevel


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication(["panostitch-tests"])


@pytest.fixture
def poll_counts(monkeypatch):
    counts: list[int] = []
    original = desktop_module.wait_until

    def wrapper(ready, interval_s):
        polls = original(ready, interval_s)
        counts.append(polls)
        return polls

    monkeypatch.setattr(desktop_module, "wait_until", wrapper)
    return counts


@pytest.fixture
def log_messages():
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


def _answer_question_later(respond, delay_ms: int = 50) -> None:
    def answer() -> None:
        for widget in QApplication.topLevelWidgets():
            if isinstance(widget, QMessageBox) and widget.isVisible():
                respond(widget)
                return

    QTimer.singleShot(delay_ms, answer)


def test_yes_answer_is_picked_up_by_polling(qapp, poll_counts):
    _answer_question_later(lambda box: box.button(QMessageBox.StandardButton.Yes).click())

    answer = DesktopServices().ask_yes_no("Save image?", "Would you like to save the panorama image?", 1.0)

    assert answer is True
    assert len(poll_counts) == 1
    assert poll_counts[0] >= 1


def test_no_answer_returns_false(qapp, poll_counts):
    _answer_question_later(lambda box: box.button(QMessageBox.StandardButton.No).click())

    assert DesktopServices().ask_yes_no("Save image?", "Save?", 1.0) is False
    assert poll_counts[0] >= 1


def test_closing_the_question_returns_false(qapp):
    _answer_question_later(lambda box: box.reject())

    assert DesktopServices().ask_yes_no("Save image?", "Save?", 1.0) is False


def test_slow_answer_takes_several_polls(qapp, poll_counts):
    _answer_question_later(lambda box: box.button(QMessageBox.StandardButton.Yes).click(), delay_ms=250)

    assert DesktopServices().ask_yes_no("Save image?", "Save?", 0.1) is True
    assert poll_counts[0] >= 2


class _FileDialog:
    def __init__(self, open_result: list[str], save_result: str) -> None:
        self.open_result = open_result
        self.save_result = save_result
        self.calls: list[tuple] = []

    def getOpenFileNames(self, parent, title, directory, file_filter):
        self.calls.append(("open", title, directory, file_filter))
        return self.open_result, file_filter

    def getSaveFileName(self, parent, title, directory):
        self.calls.append(("save", title, directory))
        return self.save_result, ""


def test_file_dialogs_return_selection(qapp, monkeypatch):
    dialog = _FileDialog(["/tmp/a.png", "/tmp/b.png"], "/tmp/pano.jpg")
    monkeypatch.setattr(desktop_module, "QFileDialog", dialog)
    services = DesktopServices()

    assert services.pick_files("Select images to create panorama of") == ["/tmp/a.png", "/tmp/b.png"]
    assert services.choose_save_path("Choose save location") == "/tmp/pano.jpg"
    assert dialog.calls[0] == ("open", "Select images to create panorama of", "./", "All Files (*)")


def test_cancelled_file_dialogs_return_empty(qapp, monkeypatch):
    monkeypatch.setattr(desktop_module, "QFileDialog", _FileDialog([], ""))
    services = DesktopServices()

    assert services.pick_files("Select images") == []
    assert services.choose_save_path("Choose save location") == ""


def test_notify_without_tray_only_logs(qapp, monkeypatch, log_messages):
    monkeypatch.setattr(desktop_module, "tray_available", lambda: False)
    services = DesktopServices()

    services.notify("Panorama successfully created!", NotificationLevel.INFO)

    assert services._tray is None
    assert any("System tray unavailable" in message for message in log_messages)


def test_notify_without_display_never_starts_qt(monkeypatch, log_messages):
    monkeypatch.setattr(desktop_module, "gui_available", lambda: False)
    services = DesktopServices()

    services.notify("Not enough images provided", NotificationLevel.ERROR)

    assert services._app is None
    assert any("No display available" in message for message in log_messages)


def test_dialogs_without_display_raise(monkeypatch):
    monkeypatch.setattr(desktop_module, "gui_available", lambda: False)

    with pytest.raises(AcquisitionError, match="No display available"):
        DesktopServices().pick_files("Select images")


def test_display_detection_on_linux():
    assert not desktop_module.display_configured({}, "linux")
    assert not desktop_module.display_configured({"DISPLAY": ""}, "linux")
    assert desktop_module.display_configured({"DISPLAY": ":0"}, "linux")
    assert desktop_module.display_configured({"WAYLAND_DISPLAY": "wayland-0"}, "linux")
    assert desktop_module.display_configured({"QT_QPA_PLATFORM": "offscreen"}, "linux")


def test_display_assumed_outside_linux():
    assert desktop_module.display_configured({}, "win32")
    assert desktop_module.display_configured({}, "darwin")
