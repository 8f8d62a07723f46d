"""Interactive frame capture from a camera."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

import cv2
import numpy as np
from loguru import logger

from ..config import ESCAPE_KEYS, RETURN_KEYS, StitchSettings
from ..errors import AcquisitionError
from ..ui.preview import PreviewWindows

INSTRUCTIONS = "Press RETURN to capture frame or ESC to exit"


class CaptureState(Enum):
    PREVIEWING = "previewing"
    DONE = "done"


def overlay_instructions(frame: np.ndarray, text: str = INSTRUCTIONS) -> np.ndarray:
    """Return a copy of ``frame`` with ``text`` drawn near the bottom edge.

    The text is drawn twice, a thick black outline then a thin white fill.
    """
    display = frame.copy()
    origin = (20, display.shape[0] - 30)
    for color, thickness in (((0, 0, 0), 3), ((255, 255, 255), 1)):
        cv2.putText(display, text, origin, cv2.FONT_HERSHEY_COMPLEX_SMALL, 1.0, color, thickness)
    return display


class CameraCaptureSession:
    """Preview loop that lets the user accept camera frames one at a time.

    RETURN appends the raw frame (never the annotated preview) and ESC
    finishes. The loop also finishes when the camera stops delivering frames.
    """

    def __init__(
        self,
        settings: Optional[StitchSettings] = None,
        *,
        open_capture: Callable = cv2.VideoCapture,
        windows: Optional[PreviewWindows] = None,
    ) -> None:
        self.settings = settings or StitchSettings()
        self._open_capture = open_capture
        self._windows = windows or PreviewWindows()
        self.state = CaptureState.PREVIEWING
        self.frames: list[np.ndarray] = []

    def run(self) -> list[np.ndarray]:
        capture = self._open_capture(self.settings.camera_index)
        try:
            if not capture.isOpened():
                raise AcquisitionError(f"Unable to open camera {self.settings.camera_index}")
            while self.state is CaptureState.PREVIEWING:
                self._step(capture)
        finally:
            capture.release()
            self._windows.close_all()
        return self.frames

    def _step(self, capture) -> None:
        ok, frame = capture.read()
        if not ok or frame is None:
            logger.debug("Camera returned no frame; finishing capture")
            self.state = CaptureState.DONE
            return

        self._windows.show(self.settings.camera_window, overlay_instructions(frame))
        key = self._windows.poll_key(self.settings.key_poll_ms)
        if key in RETURN_KEYS:
            logger.info("Adding frame...")
            self.frames.append(frame)
        elif key in ESCAPE_KEYS:
            logger.info("Finished taking images...")
            self.state = CaptureState.DONE


def capture_from_camera(settings: Optional[StitchSettings] = None, **kwargs) -> list[np.ndarray]:
    """Run a :class:`CameraCaptureSession` and return the accepted frames."""
    return CameraCaptureSession(settings, **kwargs).run()
