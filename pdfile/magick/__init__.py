"""ImageMagick adapter used for background removal and image filters."""

from __future__ import annotations

from .background import (
    feather_alpha,
    remove_background,
    remove_background_border_only,
    remove_background_edge_aware,
)
from .commands import FILTER_NAMES, feather_radius
from .filters import (
    apply_filter,
    convert_to_png,
    filter_grayscale,
    filter_invert,
    filter_sepia,
    filter_vintage,
    filter_vivid,
)
from .system import INSTALL_HINT, check_imagemagick, find_magick, run_magick

__all__ = [
    "FILTER_NAMES",
    "INSTALL_HINT",
    "apply_filter",
    "check_imagemagick",
    "convert_to_png",
    "feather_alpha",
    "feather_radius",
    "filter_grayscale",
    "filter_invert",
    "filter_sepia",
    "filter_vintage",
    "filter_vivid",
    "find_magick",
    "remove_background",
    "remove_background_border_only",
    "remove_background_edge_aware",
    "run_magick",
]
