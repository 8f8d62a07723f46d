"""User-facing status reporting: a colored console line plus a desktop notification."""
from __future__ import annotations

from loguru import logger

from .desktop import NotificationLevel


def show_notification(desktop, message: str) -> None:
    logger.success(message)
    desktop.notify(message, NotificationLevel.INFO)


def show_error(desktop, message: str) -> None:
    logger.error(message)
    desktop.notify(message, NotificationLevel.ERROR)
