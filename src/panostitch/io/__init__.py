"""Image acquisition and composition helpers."""

from .camera_capture import CameraCaptureSession, capture_from_camera
from .loader import load_images
from .sources import acquire_images
from .stitching import compose_panorama
from .video_sampler import sample_frames, sample_video

__all__ = [
    "CameraCaptureSession",
    "acquire_images",
    "capture_from_camera",
    "compose_panorama",
    "load_images",
    "sample_frames",
    "sample_video",
]
