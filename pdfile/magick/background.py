"""Background removal through ImageMagick."""

from __future__ import annotations

from pathlib import Path

from ..exceptions import MagickError
from . import commands
from .system import LOGGER, run_magick


def remove_background(source: Path, output: Path, color: str, fuzz: float) -> bool:
    """Make every pixel close to *color* transparent."""

    try:
        run_magick(commands.remove_background_args(source, output, color, fuzz))
    except MagickError as exc:
        LOGGER.debug("Background removal failed for %s: %s", source, exc)
        return False
    return True


def remove_background_border_only(source: Path, output: Path, color: str, fuzz: float) -> bool:
    """Flood-fill *color* from the image border only, keeping enclosed areas."""

    try:
        run_magick(commands.border_only_args(source, output, color, fuzz))
    except MagickError as exc:
        LOGGER.debug("Border background removal failed for %s: %s", source, exc)
        return False
    return True


def remove_background_edge_aware(
    source: Path,
    output: Path,
    color: str,
    fuzz: float,
    feather: float = 50,
) -> bool:
    """Border flood-fill followed by a soft alpha edge.

    Falls back to :func:`remove_background_border_only` when the feathered
    pipeline fails.
    """

    try:
        run_magick(commands.edge_aware_args(source, output, color, fuzz, feather))
    except MagickError as exc:
        LOGGER.warning("Edge-aware removal failed (%s); using border flood-fill", exc)
        return remove_background_border_only(source, output, color, fuzz)
    return True


def feather_alpha(source: Path, output: Path, amount: float) -> bool:
    try:
        run_magick(commands.feather_alpha_args(source, output, amount))
    except MagickError as exc:
        LOGGER.debug("Feathering failed for %s: %s", source, exc)
        return False
    return True


__all__ = [
    "remove_background",
    "remove_background_border_only",
    "remove_background_edge_aware",
    "feather_alpha",
]
