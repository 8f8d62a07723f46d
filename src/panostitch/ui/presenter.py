"""Presentation of the stitched panorama."""
from __future__ import annotations

from typing import Callable, Optional

import cv2
import numpy as np
from loguru import logger

from ..config import StitchSettings
from ..models.panorama_result import PanoramaResult
from .notifications import show_error, show_notification
from .preview import PreviewWindows

FAILURE_MESSAGE = "Panorama could not be created."


class ResultPresenter:
    """Show a successful panorama and offer to save it, or report the failure."""

    def __init__(
        self,
        desktop,
        settings: Optional[StitchSettings] = None,
        *,
        windows: Optional[PreviewWindows] = None,
        write_image: Callable[[str, np.ndarray], bool] = cv2.imwrite,
    ) -> None:
        self.desktop = desktop
        self.settings = settings or StitchSettings()
        self.windows = windows or PreviewWindows()
        self._write_image = write_image

    def present(self, result: PanoramaResult) -> Optional[str]:
        """Return the path the panorama was saved to, if any."""
        if not result.ok:
            logger.debug("Stitcher status {}: {}", result.status, result.description)
            show_error(self.desktop, FAILURE_MESSAGE)
            return None

        show_notification(self.desktop, "Panorama successfully created!")
        try:
            self.windows.show(self.settings.panorama_window, result.image)
            self.windows.poll_key(0)
            return self.prompt_save(result.image)
        finally:
            self.windows.close_all()

    def prompt_save(self, image: np.ndarray) -> Optional[str]:
        wants_save = self.desktop.ask_yes_no(
            "Save image?",
            "Would you like to save the panorama image?",
            self.settings.dialog_poll_s,
        )
        if not wants_save:
            return None

        path = self.desktop.choose_save_path("Choose save location", "./")
        if not path:
            logger.debug("Save location selection cancelled")
            return None

        try:
            written = self._write_image(path, image)
        except cv2.error as exc:
            logger.debug("OpenCV rejected {}: {}", path, exc)
            written = False
        if not written:
            show_error(self.desktop, f"Panorama could not be saved at: {path}")
            return None
        show_notification(self.desktop, f"Panorama saved at: {path}")
        return path
