"""Periodic frame sampling from video files.

Frames are taken at a fixed stride derived from the total frame count:
``stride = int(frame_count * frequency)``. After each decoded frame the read
cursor is moved ``stride`` frames past the previously reported position, so
for 100 frames at frequency 0.1 the sampled positions are 0, 10, ..., 90.
"""
from __future__ import annotations

from pathlib import Path

import cv2
import numpy as np
from loguru import logger

from ..config import DEFAULT_VIDEO_FREQUENCY
from ..errors import AcquisitionError, ConfigurationError


def validate_frequency(frequency: float) -> float:
    """Return ``frequency`` if it lies strictly between 0 and 1."""
    if not 0.0 < frequency < 1.0:
        raise ConfigurationError(f"Sampling frequency must be in the open interval (0, 1), got {frequency}")
    return frequency


def compute_stride(frame_count: int, frequency: float) -> int:
    """Number of frames between two samples.

    Raises
    ------
    ConfigurationError
        If ``frequency`` is outside (0, 1) or the stride rounds down to zero,
        which happens for clips shorter than ``1 / frequency`` frames and for
        backends that cannot report a frame count.
    """
    validate_frequency(frequency)
    stride = int(frame_count * frequency)
    if stride <= 0:
        raise ConfigurationError(
            f"Video with {frame_count} frame(s) is too short to sample at frequency {frequency}"
        )
    return stride


def sample_frames(capture, frequency: float) -> list[np.ndarray]:
    """Read frames from an opened ``cv2.VideoCapture``-like object.

    Reading stops quietly at the first failed read (end of stream or a decode
    error). The capture is left open; the caller owns it.
    """
    frame_count = int(capture.get(cv2.CAP_PROP_FRAME_COUNT))
    stride = compute_stride(frame_count, frequency)
    position = int(capture.get(cv2.CAP_PROP_POS_FRAMES))
    logger.debug("Sampling {} frame(s) with stride {} from position {}", frame_count, stride, position)

    frames: list[np.ndarray] = []
    while True:
        ok, frame = capture.read()
        if not ok or frame is None:
            break
        frames.append(frame)
        if not capture.set(cv2.CAP_PROP_POS_FRAMES, position + stride):
            logger.debug("Backend refused to seek to frame {}; stopping", position + stride)
            break
        position = int(capture.get(cv2.CAP_PROP_POS_FRAMES))

    logger.info("Sampled {} frame(s) from video", len(frames))
    return frames


def sample_video(
    path: Path,
    frequency: float = DEFAULT_VIDEO_FREQUENCY,
    *,
    open_capture=cv2.VideoCapture,
) -> list[np.ndarray]:
    """Open ``path`` and sample it with :func:`sample_frames`.

    The frequency is validated before the file is opened, and the capture is
    released on every exit path.
    """
    validate_frequency(frequency)
    capture = open_capture(str(path))
    try:
        if not capture.isOpened():
            raise AcquisitionError(f"Unable to open video: {path}")
        return sample_frames(capture, frequency)
    finally:
        capture.release()
