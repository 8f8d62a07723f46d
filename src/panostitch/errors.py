"""Exception hierarchy for acquisition and stitching failures."""
from __future__ import annotations


class PanoStitchError(Exception):
    """Base class for failures reported to the user."""


class ConfigurationError(PanoStitchError, ValueError):
    """Malformed or conflicting options, detected before any capture starts."""


class InsufficientInputError(PanoStitchError, ValueError):
    """Fewer than two images are available for composition."""


class AcquisitionError(PanoStitchError, RuntimeError):
    """A camera or video source could not be opened."""


class CompositionError(PanoStitchError, RuntimeError):
    """OpenCV raised while composing the panorama."""
