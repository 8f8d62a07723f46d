"""Panorama composition through ``cv2.Stitcher``."""
from __future__ import annotations

from typing import Callable, Sequence

import cv2
import numpy as np
from loguru import logger

from ..errors import CompositionError, InsufficientInputError
from ..models.panorama_result import PanoramaResult

MIN_IMAGES = 2


def compose_panorama(
    images: Sequence[np.ndarray],
    mode: int = cv2.Stitcher_PANORAMA,
    *,
    create_stitcher: Callable = cv2.Stitcher.create,
) -> PanoramaResult:
    """Stitch ``images`` in order with a single call; failures are not retried.

    Callers are expected to check the image count first. The check here only
    guards against handing OpenCV an input it cannot work with.
    """
    if len(images) < MIN_IMAGES:
        raise InsufficientInputError("Not enough images provided")

    logger.info("Creating panorama...")
    stitcher = create_stitcher(mode)
    try:
        status, panorama = stitcher.stitch(list(images))
    except cv2.error as exc:
        raise CompositionError(f"Panorama could not be created: {exc}") from exc
    result = PanoramaResult(status, panorama if status == cv2.Stitcher_OK else None)
    if result.ok:
        logger.debug("Panorama composed with shape {}", panorama.shape)
    else:
        logger.debug("Stitcher failed with status {}: {}", status, result.description)
    return result
