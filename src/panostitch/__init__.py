"""Panorama stitching from image files, a camera, a video or a file picker."""

__version__ = "0.1.0"
