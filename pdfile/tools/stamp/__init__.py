"""Tools that draw onto existing pages: dates, signatures and images."""

from __future__ import annotations

from .date import DATE_FORMATS, DateOptions, InsertDateTool, format_date, insert_date
from .overlay import AddImageOverlayTool, OverlayOptions, add_image_overlay
from .signature import AddSignatureTool, SignatureOptions, add_signature

__all__ = [
    "DATE_FORMATS",
    "DateOptions",
    "format_date",
    "insert_date",
    "SignatureOptions",
    "add_signature",
    "OverlayOptions",
    "add_image_overlay",
    "InsertDateTool",
    "AddSignatureTool",
    "AddImageOverlayTool",
]
