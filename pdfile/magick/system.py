"""Locating and running the ImageMagick binary."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from ..core.utils import get_logger
from ..exceptions import MagickError

LOGGER = get_logger("pdfile.magick")

EXECUTABLES = ("convert", "magick")
INSTALL_HINT = "Install ImageMagick: sudo apt install imagemagick"


def which(executables: Sequence[str]) -> str | None:
    """Return the first executable from *executables* found on ``PATH``."""

    for candidate in executables:
        found = shutil.which(candidate)
        if found:
            LOGGER.debug("Detected external tool: %s -> %s", candidate, found)
            return found
    return None


def find_magick() -> str | None:
    return which(EXECUTABLES)


def check_imagemagick() -> bool:
    return find_magick() is not None


def run_magick(args: Sequence[str | Path]) -> subprocess.CompletedProcess[str]:
    """Run ImageMagick with *args*, raising :class:`MagickError` on failure."""

    executable = find_magick()
    if executable is None:
        raise MagickError(f"ImageMagick not found. {INSTALL_HINT}")

    command = [executable, *(str(arg) for arg in args)]
    LOGGER.debug("Executing command: %s", " ".join(command))
    try:
        completed = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=True,
            text=True,
        )
    except subprocess.CalledProcessError as exc:
        raise MagickError(
            f"ImageMagick exited with code {exc.returncode}: {(exc.stderr or '').strip()}"
        ) from exc
    except OSError as exc:
        raise MagickError(f"Failed to run {executable}: {exc}") from exc
    LOGGER.debug("Command finished with exit code %s", completed.returncode)
    return completed


__all__ = ["EXECUTABLES", "INSTALL_HINT", "which", "find_magick", "check_imagemagick", "run_magick"]
