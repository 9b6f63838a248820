"""Page-level tools: remove, reorder, move and rotate."""

from __future__ import annotations

from .remove import RemovePagesTool, remove_pages
from .reorder import MovePageTool, ReorderPagesTool, move_page, moved_order, reorder_pages
from .rotate import VALID_ROTATIONS, RotatePagesTool, rotate_pages

__all__ = [
    "remove_pages",
    "reorder_pages",
    "move_page",
    "moved_order",
    "rotate_pages",
    "VALID_ROTATIONS",
    "RemovePagesTool",
    "ReorderPagesTool",
    "MovePageTool",
    "RotatePagesTool",
]
