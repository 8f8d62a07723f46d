"""Image file loading."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import cv2
import numpy as np
from loguru import logger


def load_image(path: Path | str) -> Optional[np.ndarray]:
    """Decode an image as BGR, returning ``None`` when OpenCV cannot read it."""
    image = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if image is None or image.size == 0:
        return None
    logger.debug("Loaded image {} with shape {}", path, image.shape)
    return image


def load_images(paths: Iterable[Path | str]) -> list[np.ndarray]:
    """Decode ``paths`` in order.

    Files that are missing or cannot be decoded are skipped with a warning,
    so the returned list only ever holds valid images in source order.
    """
    images: list[np.ndarray] = []
    skipped = 0
    for path in paths:
        image = load_image(path)
        if image is None:
            logger.warning("Skipping unreadable image {}", path)
            skipped += 1
            continue
        images.append(image)

    logger.info("Loaded {} image(s), skipped {}", len(images), skipped)
    return images
