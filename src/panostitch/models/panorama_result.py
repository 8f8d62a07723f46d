"""Outcome of a single stitching call."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import cv2
import numpy as np

_STATUS_DESCRIPTIONS = {
    cv2.Stitcher_OK: "Panorama composed",
    cv2.Stitcher_ERR_NEED_MORE_IMGS: "Not enough overlapping features; check that the images overlap",
    cv2.Stitcher_ERR_HOMOGRAPHY_EST_FAIL: "Homography estimation failed; the images may not overlap enough",
    cv2.Stitcher_ERR_CAMERA_PARAMS_ADJUST_FAIL: "Camera parameter adjustment failed",
}


def describe_status(status: int) -> str:
    """Human readable text for an OpenCV stitcher status code."""
    return _STATUS_DESCRIPTIONS.get(status, f"Stitcher returned status {status}")


@dataclass(slots=True, frozen=True)
class PanoramaResult:
    """Stitcher status plus the composed image on success."""

    status: int
    image: Optional[np.ndarray] = None

    @property
    def ok(self) -> bool:
        return self.status == cv2.Stitcher_OK and self.image is not None

    @property
    def description(self) -> str:
        return describe_status(self.status)
