"""OpenCV highgui preview windows."""
from __future__ import annotations

import cv2
import numpy as np

NO_KEY = -1


class PreviewWindows:
    """Thin wrapper around ``cv2.imshow``/``cv2.waitKey``."""

    def show(self, title: str, image: np.ndarray) -> None:
        cv2.imshow(title, image)

    def poll_key(self, delay_ms: int) -> int:
        """Wait up to ``delay_ms`` (0 = forever) and return the key code or ``NO_KEY``."""
        key = cv2.waitKey(delay_ms)
        if key == NO_KEY:
            return NO_KEY
        return key & 0xFF

    def close_all(self) -> None:
        cv2.destroyAllWindows()
