"""Argument builders for ImageMagick invocations.

Every builder returns the argument list that follows the executable name.
Animated GIF inputs are coalesced first so each frame is edited as a full
image; no layer optimisation is applied on output.
"""

from __future__ import annotations

from pathlib import Path

FLOOD_FILL = "matte 0,0 floodfill"

FILTERS: dict[str, list[str]] = {
    "grayscale": ["-colorspace", "Gray"],
    "invert": ["-negate"],
    "vintage": ["-modulate", "100,70,100", "-fill", "#704214", "-colorize", "15%"],
    "vivid": ["-modulate", "100,130,100"],
}


def is_gif(path: str | Path) -> bool:
    return str(path).lower().endswith(".gif")


def coalesce_args(path: str | Path) -> list[str]:
    return ["-coalesce"] if is_gif(path) else []


def input_selector(path: str | Path) -> str:
    """Select the largest image of an ICO file; other inputs pass through."""

    text = str(path)
    return f"{text}[0]" if text.lower().endswith(".ico") else text


def feather_radius(amount: float) -> float:
    """Map a 0-100 feather amount onto a 0.5-3.0 pixel blur radius."""

    amount = min(max(amount, 0.0), 100.0)
    return 0.5 + (amount / 100) * 2.5


def _blur(radius: float) -> str:
    return f"0x{radius:g}"


def _border_flood_fill(color: str, fuzz: float) -> list[str]:
    return [
        "-bordercolor", color,
        "-border", "1x1",
        "-fill", "none",
        "-fuzz", f"{fuzz:g}%",
        "-draw", FLOOD_FILL,
        "-shave", "1x1",
    ]


def remove_background_args(source: Path, output: Path, color: str, fuzz: float) -> list[str]:
    return [
        str(source),
        *coalesce_args(source),
        "-fuzz", f"{fuzz:g}%",
        "-transparent", color,
        str(output),
    ]


def border_only_args(source: Path, output: Path, color: str, fuzz: float) -> list[str]:
    return [str(source), *coalesce_args(source), *_border_flood_fill(color, fuzz), str(output)]


def edge_aware_args(
    source: Path, output: Path, color: str, fuzz: float, feather: float
) -> list[str]:
    radius = _blur(feather_radius(feather))
    if is_gif(source):
        feathering = ["-channel", "A", "-blur", radius, "+channel"]
    else:
        feathering = [
            "(", "+clone", "-alpha", "extract", "-blur", radius, ")",
            "-compose", "CopyOpacity", "-composite",
        ]
    return [
        str(source),
        *coalesce_args(source),
        *_border_flood_fill(color, fuzz),
        *feathering,
        str(output),
    ]


def feather_alpha_args(source: Path, output: Path, amount: float) -> list[str]:
    return [
        str(source),
        *coalesce_args(source),
        "-channel", "A",
        "-blur", _blur(feather_radius(amount)),
        "+channel",
        str(output),
    ]


def filter_args(name: str, source: Path, output: Path, *, intensity: float = 80) -> list[str]:
    if name == "sepia":
        operation = ["-sepia-tone", f"{intensity:g}%"]
    else:
        operation = FILTERS[name]
    return [str(source), *coalesce_args(source), *operation, str(output)]


def to_png_args(source: Path, output: Path) -> list[str]:
    return [input_selector(source), f"PNG32:{output}"]


FILTER_NAMES = tuple(sorted([*FILTERS, "sepia"]))
