"""Command-line parsing into an acquisition request and settings."""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import APP_NAME, DEFAULT_VIDEO_FREQUENCY, DEMO_DATASETS, STITCHER_MODES, StitchSettings
from .errors import ConfigurationError
from .io.video_sampler import validate_frequency
from .models.acquisition import AcquisitionRequest


_DEFAULTS = StitchSettings()


class _Parser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting on bad input."""

    def error(self, message: str):
        raise ConfigurationError(f"Error parsing args: {message}")


@dataclass(slots=True, frozen=True)
class CommandLine:
    """Parsed invocation; ``request`` is ``None`` when no source was chosen."""

    request: Optional[AcquisitionRequest]
    settings: StitchSettings
    verbose: bool = False


def _frequency(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid frequency: {raw}") from exc
    try:
        return validate_frequency(value)
    except ConfigurationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    demo_help = ", ".join(f"{index}={dataset.name}" for index, dataset in enumerate(DEMO_DATASETS))
    parser = _Parser(prog=prog, description=APP_NAME)

    sources = parser.add_mutually_exclusive_group()
    sources.add_argument("-c", "--camera", action="store_true", help="Enable camera input")
    sources.add_argument("-s", "--select", action="store_true", help="Use file select GUI")
    sources.add_argument("-i", "--images", nargs="+", metavar="FILE", help="Input image files")
    sources.add_argument("-v", "--video", type=Path, metavar="FILE", help="Input video file")
    sources.add_argument(
        "-d",
        "--demo",
        type=int,
        choices=range(len(DEMO_DATASETS)),
        metavar="N",
        help=f"Try demo image sets 0..{len(DEMO_DATASETS) - 1} ({demo_help})",
    )

    parser.add_argument(
        "-f",
        "--frequency",
        type=_frequency,
        default=DEFAULT_VIDEO_FREQUENCY,
        help="Fraction of the video length between sampled frames, in (0, 1) (default: %(default)s)",
    )
    parser.add_argument(
        "--camera-index",
        type=int,
        default=_DEFAULTS.camera_index,
        help="Camera device index (default: %(default)s)",
    )
    parser.add_argument(
        "--mode",
        choices=sorted(STITCHER_MODES),
        default=_DEFAULTS.stitcher_mode,
        help="Stitcher mode (default: %(default)s)",
    )
    parser.add_argument(
        "--demo-root",
        default=_DEFAULTS.demo_root,
        help="Directory holding the demo image sets (default: %(default)s)",
    )
    parser.add_argument(
        "--strict-exit",
        action="store_true",
        help="Return a non-zero exit code when no panorama is produced",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_command_line(argv: Sequence[str], prog: Optional[str] = None) -> CommandLine:
    """Parse ``argv`` (without the program name).

    Raises
    ------
    ConfigurationError
        For unknown, malformed or conflicting options.
    """
    args = build_parser(prog).parse_args(list(argv))
    settings = StitchSettings(
        camera_index=args.camera_index,
        stitcher_mode=args.mode,
        demo_root=args.demo_root,
        strict_exit=args.strict_exit,
    )

    request: Optional[AcquisitionRequest] = None
    if args.demo is not None:
        request = AcquisitionRequest.demo(args.demo)
    elif args.camera:
        request = AcquisitionRequest.camera(args.camera_index)
    elif args.select:
        request = AcquisitionRequest.picker()
    elif args.images:
        request = AcquisitionRequest.from_files(args.images)
    elif args.video is not None:
        request = AcquisitionRequest.video(args.video, args.frequency)

    return CommandLine(request=request, settings=settings, verbose=args.verbose)


def strict_exit_requested(argv: Sequence[str]) -> bool:
    """Whether ``--strict-exit`` (or an accepted abbreviation) appears in ``argv``.

    Used when the full parse failed, so every other option is ignored.
    """
    parser = _Parser(add_help=False)
    parser.add_argument("--strict-exit", action="store_true")
    try:
        args, _ = parser.parse_known_args(list(argv))
    except ConfigurationError:
        return False
    return args.strict_exit
