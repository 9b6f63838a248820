"""Colour filters and format conversion through ImageMagick."""

from __future__ import annotations

from pathlib import Path

from ..exceptions import MagickError
from . import commands
from .system import LOGGER, run_magick


def apply_filter(name: str, source: Path, output: Path, *, intensity: float = 80) -> bool:
    """Apply the filter called *name*; see :data:`commands.FILTER_NAMES`."""

    if name not in commands.FILTER_NAMES:
        raise ValueError(f"Unknown filter {name!r}. Use: {', '.join(commands.FILTER_NAMES)}")
    try:
        run_magick(commands.filter_args(name, source, output, intensity=intensity))
    except MagickError as exc:
        LOGGER.debug("Filter %s failed for %s: %s", name, source, exc)
        return False
    return True


def filter_grayscale(source: Path, output: Path) -> bool:
    return apply_filter("grayscale", source, output)


def filter_sepia(source: Path, output: Path, intensity: float = 80) -> bool:
    return apply_filter("sepia", source, output, intensity=intensity)


def filter_invert(source: Path, output: Path) -> bool:
    return apply_filter("invert", source, output)


def filter_vintage(source: Path, output: Path) -> bool:
    return apply_filter("vintage", source, output)


def filter_vivid(source: Path, output: Path) -> bool:
    return apply_filter("vivid", source, output)


def convert_to_png(source: Path, output: Path) -> None:
    """Write *source* as a 32-bit PNG, raising :class:`MagickError` on failure."""

    run_magick(commands.to_png_args(source, output))


__all__ = [
    "apply_filter",
    "filter_grayscale",
    "filter_sepia",
    "filter_invert",
    "filter_vintage",
    "filter_vivid",
    "convert_to_png",
]
