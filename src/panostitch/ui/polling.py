"""Cooperative poll-with-timeout helper."""
from __future__ import annotations

from typing import Callable

from loguru import logger


def wait_until(ready: Callable[[float], bool], interval_s: float) -> int:
    """Call ``ready(interval_s)`` until it returns ``True``.

    ``ready`` is expected to block for at most ``interval_s`` seconds while it
    waits for its event. Returns the number of polls it took.
    """
    polls = 1
    while not ready(interval_s):
        polls += 1
        logger.trace("Still waiting after {} poll(s)", polls - 1)
    return polls
