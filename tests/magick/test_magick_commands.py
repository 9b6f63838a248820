from __future__ import annotations

from pathlib import Path

import pytest

from pdfile.magick import commands
from pdfile.magick.commands import (
    FLOOD_FILL,
    border_only_args,
    coalesce_args,
    edge_aware_args,
    feather_alpha_args,
    feather_radius,
    filter_args,
    remove_background_args,
    to_png_args,
)

SRC = Path("/work/in.png")
OUT = Path("/work/out.png")


def test_feather_radius_is_clamped() -> None:
    assert feather_radius(0) == 0.5
    assert feather_radius(100) == 3.0
    assert feather_radius(50) == pytest.approx(1.75)
    assert feather_radius(-10) == 0.5
    assert feather_radius(250) == 3.0


def test_gif_inputs_are_coalesced() -> None:
    assert coalesce_args("anim.GIF") == ["-coalesce"]
    assert coalesce_args("still.png") == []
    assert remove_background_args(Path("a.gif"), OUT, "white", 10)[1] == "-coalesce"


def test_remove_background_args() -> None:
    assert remove_background_args(SRC, OUT, "white", 15) == [
        "/work/in.png",
        "-fuzz",
        "15%",
        "-transparent",
        "white",
        "/work/out.png",
    ]


def test_border_only_uses_flood_fill() -> None:
    args = border_only_args(SRC, OUT, "#ffffff", 10)
    assert args[0] == "/work/in.png" and args[-1] == "/work/out.png"
    assert args[args.index("-draw") + 1] == FLOOD_FILL
    assert "-transparent" not in args


def test_edge_aware_blurs_alpha() -> None:
    args = edge_aware_args(SRC, OUT, "white", 10, 50)
    assert FLOOD_FILL in args
    assert args[args.index("-blur") + 1] == "0x1.75"
    assert "CopyOpacity" in args

    gif_args = edge_aware_args(Path("a.gif"), Path("b.gif"), "white", 10, 0)
    assert gif_args[gif_args.index("-channel") + 1] == "A"
    assert "CopyOpacity" not in gif_args


def test_feather_alpha_args() -> None:
    args = feather_alpha_args(SRC, OUT, 20)
    assert args == ["/work/in.png", "-channel", "A", "-blur", "0x1", "+channel", "/work/out.png"]


def test_filter_args() -> None:
    assert filter_args("grayscale", SRC, OUT) == ["/work/in.png", "-colorspace", "Gray", "/work/out.png"]
    assert filter_args("sepia", SRC, OUT, intensity=60)[1:3] == ["-sepia-tone", "60%"]
    assert set(commands.FILTER_NAMES) == {"grayscale", "invert", "sepia", "vintage", "vivid"}


def test_to_png_args_selects_first_ico_frame() -> None:
    assert to_png_args(Path("/work/icon.ico"), OUT) == ["/work/icon.ico[0]", "PNG32:/work/out.png"]
    assert to_png_args(Path("/work/pic.bmp"), OUT) == ["/work/pic.bmp", "PNG32:/work/out.png"]
