"""Runtime settings and the bundled demo dataset table."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

import cv2

APP_NAME = "Panorama Stitcher"

RETURN_KEYS = frozenset({10, 13})
ESCAPE_KEYS = frozenset({27})

DEFAULT_VIDEO_FREQUENCY = 0.1

STITCHER_MODES: Mapping[str, int] = MappingProxyType(
    {
        "panorama": cv2.Stitcher_PANORAMA,
        "scans": cv2.Stitcher_SCANS,
    }
)


@dataclass(slots=True, frozen=True)
class DemoDataset:
    """A bundled image set stored as ``<root>/<name>/<name>-NN.png``."""

    name: str
    frames: int


DEMO_DATASETS: tuple[DemoDataset, ...] = (
    DemoDataset("carmel", 18),
    DemoDataset("diamondhead", 23),
    DemoDataset("example", 2),
    DemoDataset("fishbowl", 13),
    DemoDataset("goldengate", 6),
    DemoDataset("halfdome", 14),
    DemoDataset("hotel", 8),
    DemoDataset("office", 4),
    DemoDataset("rio", 56),
    DemoDataset("shanghai", 30),
    DemoDataset("yard", 9),
)

DEMO_DATASETS_BY_NAME: Mapping[str, DemoDataset] = MappingProxyType(
    {dataset.name: dataset for dataset in DEMO_DATASETS}
)


@dataclass(slots=True, frozen=True)
class StitchSettings:
    """Knobs shared by the acquisition, stitching and presentation stages."""

    camera_index: int = 0
    stitcher_mode: str = "panorama"
    demo_root: str = "./demos"
    key_poll_ms: int = 1
    dialog_poll_s: float = 1.0
    camera_window: str = "Camera feed"
    panorama_window: str = "Panorama"
    strict_exit: bool = False

    @property
    def stitcher_mode_flag(self) -> int:
        """OpenCV constant for :attr:`stitcher_mode`."""
        return STITCHER_MODES[self.stitcher_mode]


def demo_image_paths(index: int, root: str = "./demos") -> list[str]:
    """Return the ordered frame paths of the demo dataset at ``index``."""
    if not 0 <= index < len(DEMO_DATASETS):
        raise IndexError(f"Demo index must be in 0..{len(DEMO_DATASETS) - 1}, got {index}")
    dataset = DEMO_DATASETS[index]
    return [f"{root}/{dataset.name}/{dataset.name}-{frame:02d}.png" for frame in range(dataset.frames)]
