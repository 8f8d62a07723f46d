"""Dispatch of an acquisition request to its image source."""
from __future__ import annotations

from dataclasses import replace
from types import MappingProxyType
from typing import Callable, Mapping, Optional

import numpy as np
from loguru import logger

from ..config import StitchSettings, demo_image_paths
from ..models.acquisition import AcquisitionMode, AcquisitionRequest
from .camera_capture import capture_from_camera
from .loader import load_images
from .video_sampler import sample_video

PICKER_TITLE = "Select images to create panorama of"


def _from_files(request: AcquisitionRequest, settings: StitchSettings, desktop) -> list[np.ndarray]:
    return load_images(request.files)


def _from_demo(request: AcquisitionRequest, settings: StitchSettings, desktop) -> list[np.ndarray]:
    return load_images(demo_image_paths(request.demo_index, settings.demo_root))


def _from_camera(request: AcquisitionRequest, settings: StitchSettings, desktop) -> list[np.ndarray]:
    return capture_from_camera(replace(settings, camera_index=request.camera_index))


def _from_picker(request: AcquisitionRequest, settings: StitchSettings, desktop) -> list[np.ndarray]:
    return load_images(desktop.pick_files(PICKER_TITLE, "./"))


def _from_video(request: AcquisitionRequest, settings: StitchSettings, desktop) -> list[np.ndarray]:
    return sample_video(request.video_path, request.frequency)


SourceHandler = Callable[[AcquisitionRequest, StitchSettings, object], list[np.ndarray]]

SOURCES: Mapping[AcquisitionMode, SourceHandler] = MappingProxyType(
    {
        AcquisitionMode.FILES: _from_files,
        AcquisitionMode.DEMO: _from_demo,
        AcquisitionMode.CAMERA: _from_camera,
        AcquisitionMode.PICKER: _from_picker,
        AcquisitionMode.VIDEO: _from_video,
    }
)


def acquire_images(
    request: AcquisitionRequest,
    desktop=None,
    settings: Optional[StitchSettings] = None,
    *,
    sources: Mapping[AcquisitionMode, SourceHandler] = SOURCES,
) -> list[np.ndarray]:
    """Gather the ordered image sequence for ``request``."""
    settings = settings or StitchSettings()
    logger.info("Acquiring images from {}", request.mode.value)
    images = sources[request.mode](request, settings, desktop)
    logger.debug("Acquired {} image(s)", len(images))
    return images
