"""Logging configuration helpers."""
from __future__ import annotations

from loguru import logger

_LEVEL_COLORS = {
    "INFO": "<cyan>",
    "WARNING": "<yellow>",
    "SUCCESS": "<green>",
    "ERROR": "<red>",
}


def configure_logging(verbose: bool = False) -> None:
    """Configure loguru with a colored console sink.

    Level colors stand in for the status colors of the console output:
    progress in cyan, hints in yellow, notifications in green and errors in red.
    """
    logger.remove()
    for level, color in _LEVEL_COLORS.items():
        logger.level(level, color=color)
    logger.add(
        sink=lambda msg: print(msg, end=""),
        level="DEBUG" if verbose else "INFO",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
    )
