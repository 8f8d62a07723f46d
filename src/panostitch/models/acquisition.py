"""Acquisition request model."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from ..config import DEFAULT_VIDEO_FREQUENCY


class AcquisitionMode(Enum):
    """Mutually exclusive ways of gathering the input images."""

    FILES = "files"
    DEMO = "demo"
    CAMERA = "camera"
    PICKER = "picker"
    VIDEO = "video"


@dataclass(slots=True, frozen=True)
class AcquisitionRequest:
    """One acquisition strategy together with the payload it needs.

    Only the fields belonging to ``mode`` are meaningful; use the
    constructors below instead of filling fields by hand.
    """

    mode: AcquisitionMode
    files: tuple[str, ...] = ()
    demo_index: Optional[int] = None
    camera_index: int = 0
    video_path: Optional[Path] = None
    frequency: float = DEFAULT_VIDEO_FREQUENCY

    @classmethod
    def from_files(cls, files) -> "AcquisitionRequest":
        return cls(AcquisitionMode.FILES, files=tuple(str(item) for item in files))

    @classmethod
    def demo(cls, index: int) -> "AcquisitionRequest":
        return cls(AcquisitionMode.DEMO, demo_index=index)

    @classmethod
    def camera(cls, index: int = 0) -> "AcquisitionRequest":
        return cls(AcquisitionMode.CAMERA, camera_index=index)

    @classmethod
    def picker(cls) -> "AcquisitionRequest":
        return cls(AcquisitionMode.PICKER)

    @classmethod
    def video(cls, path: Path, frequency: float = DEFAULT_VIDEO_FREQUENCY) -> "AcquisitionRequest":
        return cls(AcquisitionMode.VIDEO, video_path=Path(path), frequency=frequency)
