"""CLI helpers for the ImageMagick backed image commands."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction
from pathlib import Path

from ...config import PdfileConfig
from ...core.paths import ensure_output_dir, get_output_path, normalize_path
from ...core.utils import get_logger
from ...exceptions import MagickError, PdfValidationError
from ...magick import (
    FILTER_NAMES,
    INSTALL_HINT,
    apply_filter,
    check_imagemagick,
    remove_background,
    remove_background_border_only,
    remove_background_edge_aware,
)
from .common import add_output_option, output_file

LOGGER = get_logger("pdfile.cli")

DEFAULT_FILTER = "grayscale"
BACKGROUND_MODES = {
    "simple": remove_background,
    "border": remove_background_border_only,
}


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    filter_parser = subparsers.add_parser("filter", help="Apply a colour filter to an image")
    filter_parser.add_argument("image", help="Input image")
    filter_parser.add_argument(
        "-f",
        "--filter",
        dest="filter_name",
        default=DEFAULT_FILTER,
        help=f"Filter name: {', '.join(FILTER_NAMES)}",
    )
    add_output_option(filter_parser)
    filter_parser.set_defaults(handler=handle_filter)

    bg_parser = subparsers.add_parser("remove-bg", help="Make an image's background transparent")
    bg_parser.add_argument("image", help="Input image")
    bg_parser.add_argument("--color", default="white", help="Background colour to remove")
    bg_parser.add_argument("--fuzz", type=float, default=10, help="Colour tolerance (%%)")
    bg_parser.add_argument("--feather", type=float, default=50, help="Edge softening from 0 to 100")
    bg_parser.add_argument(
        "--mode",
        default="edge",
        help="simple (every matching pixel), border (flood fill from the edges) or edge",
    )
    add_output_option(bg_parser)
    bg_parser.set_defaults(handler=handle_remove_bg)


def _source_image(value: str) -> Path:
    source = normalize_path(value)
    if not source.is_file():
        raise PdfValidationError(f"Image file not found: {source}")
    return source


def _require_magick() -> None:
    if not check_imagemagick():
        raise MagickError(f"ImageMagick not found. {INSTALL_HINT}")


def _destination(args, source: Path, suffix: str, settings: PdfileConfig, new_extension: str | None = None) -> Path:
    explicit = output_file(args.output)
    if explicit is not None:
        return explicit
    ensure_output_dir(source, settings.output)
    return get_output_path(source, suffix, new_extension, settings.output)


def handle_filter(args, settings: PdfileConfig) -> int:
    if args.filter_name not in FILTER_NAMES:
        raise PdfValidationError(f"Unknown filter {args.filter_name!r}. Use: {', '.join(FILTER_NAMES)}")
    source = _source_image(args.image)
    _require_magick()
    output = _destination(args, source, f"_{args.filter_name}", settings)
    if not apply_filter(args.filter_name, source, output):
        LOGGER.error("Failed to apply %s filter to %s", args.filter_name, source)
        return 1
    LOGGER.info("Filtered image saved to %s", output)
    return 0


def handle_remove_bg(args, settings: PdfileConfig) -> int:
    if args.mode not in (*BACKGROUND_MODES, "edge"):
        raise PdfValidationError(f"Unknown mode {args.mode!r}. Use: simple, border, edge")
    source = _source_image(args.image)
    _require_magick()
    output = _destination(args, source, "_nobg", settings, ".png")
    if args.mode == "edge":
        succeeded = remove_background_edge_aware(source, output, args.color, args.fuzz, args.feather)
    else:
        succeeded = BACKGROUND_MODES[args.mode](source, output, args.color, args.fuzz)
    if not succeeded:
        LOGGER.error("Failed to remove background from %s", source)
        return 1
    LOGGER.info("Image without background saved to %s", output)
    return 0
