"""Application entry point: parse, acquire, stitch, present."""
from __future__ import annotations

import sys
from enum import Enum
from typing import Callable, Optional

from loguru import logger

from .cli import CommandLine, parse_command_line, strict_exit_requested
from .errors import InsufficientInputError, PanoStitchError
from .io.sources import acquire_images
from .io.stitching import MIN_IMAGES, compose_panorama
from .logging import configure_logging
from .ui.desktop import DesktopServices
from .ui.notifications import show_error
from .ui.presenter import ResultPresenter


class RunStatus(Enum):
    OK = "ok"
    EXIT = "exit"
    ERROR = "error"


def run(
    command_line: CommandLine,
    desktop=None,
    *,
    acquire: Callable = acquire_images,
    compose: Callable = compose_panorama,
    presenter: Optional[ResultPresenter] = None,
) -> RunStatus:
    """Execute one invocation. Reported failures never propagate."""
    if desktop is None:
        desktop = DesktopServices()
    settings = command_line.settings
    if command_line.request is None:
        logger.warning("Use -h or --help for more information")
        return RunStatus.EXIT

    try:
        images = acquire(command_line.request, desktop, settings)
        if len(images) < MIN_IMAGES:
            raise InsufficientInputError("Not enough images provided")
        result = compose(images, settings.stitcher_mode_flag)
    except PanoStitchError as exc:
        show_error(desktop, str(exc))
        return RunStatus.ERROR

    presenter = presenter or ResultPresenter(desktop, settings)
    presenter.present(result)
    return RunStatus.OK if result.ok else RunStatus.ERROR


def main(argv: Optional[list[str]] = None) -> int:
    """Run the panorama stitcher from the command line.

    Failures are reported on the console and as desktop notifications. The
    exit code is 0 unless ``--strict-exit`` is given.
    """
    configure_logging()
    argv = list(sys.argv[1:] if argv is None else argv)

    try:
        command_line = parse_command_line(argv)
    except PanoStitchError as exc:
        show_error(DesktopServices(), str(exc))
        return 1 if strict_exit_requested(argv) else 0

    configure_logging(command_line.verbose)
    status = run(command_line)
    if status is RunStatus.ERROR and command_line.settings.strict_exit:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
