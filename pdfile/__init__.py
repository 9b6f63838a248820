"""Command line PDF toolkit: merge, stamp, reorder, rotate and convert PDFs."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Sequence

from .config import DEFAULT_CONFIG, PdfileConfig, load_config, reset_config, save_config
from .core.pages import parse_page_list
from .core.paths import get_output_path, normalize_path, windows_to_wsl, wsl_to_windows
from .exceptions import (
    ConfigError,
    InvalidPageSelectionError,
    MagickError,
    PdfileError,
    PdfOperationError,
    PdfValidationError,
)
from .tools import load_builtin_plugins
from .tools.common.interfaces import BaseTool, ToolContext
from .tools.common.pipeline import ToolRegistry, register_tool, registry
from .tools.converter import pdf_to_word
from .tools.merger import merge_pdfs
from .tools.pages import move_page, remove_pages, reorder_pages, rotate_pages
from .tools.stamp import (
    DateOptions,
    OverlayOptions,
    SignatureOptions,
    add_image_overlay,
    add_signature,
    insert_date,
)

load_builtin_plugins()


def _execute(
    tool_name: str,
    input: str | Path | None,
    output: str | Path | None,
    settings: PdfileConfig,
    **config: Any,
) -> bool:
    context = ToolContext(input_path=input, output_path=output, settings=settings, config=config)
    return registry.execute(tool_name, context)


def merge_documents(
    inputs: Iterable[str | Path],
    output: str | Path | None = None,
    *,
    settings: PdfileConfig = DEFAULT_CONFIG,
) -> bool:
    """Convenience wrapper around the merge plugin."""

    return _execute("merge", None, output, settings, inputs=list(inputs))


def remove_document_pages(
    input: str | Path,
    indices: Sequence[int],
    output: str | Path | None = None,
    *,
    settings: PdfileConfig = DEFAULT_CONFIG,
) -> bool:
    """Convenience wrapper around the remove-pages plugin; *indices* are 0-based."""

    return _execute("remove_pages", input, output, settings, pages=list(indices))


def reorder_document_pages(
    input: str | Path,
    order: Sequence[int],
    output: str | Path | None = None,
    *,
    settings: PdfileConfig = DEFAULT_CONFIG,
) -> bool:
    return _execute("reorder", input, output, settings, order=list(order))


def move_document_page(
    input: str | Path,
    index: int,
    direction: str,
    output: str | Path | None = None,
    *,
    settings: PdfileConfig = DEFAULT_CONFIG,
) -> bool:
    return _execute("move_page", input, output, settings, page=index, direction=direction)


def rotate_document_pages(
    input: str | Path,
    indices: Sequence[int],
    rotation: int,
    output: str | Path | None = None,
    *,
    settings: PdfileConfig = DEFAULT_CONFIG,
) -> bool:
    return _execute("rotate", input, output, settings, pages=list(indices), rotation=rotation)


def insert_document_date(
    input: str | Path,
    options: DateOptions | None = None,
    output: str | Path | None = None,
    *,
    settings: PdfileConfig = DEFAULT_CONFIG,
) -> bool:
    return _execute("insert_date", input, output, settings, options=options or DateOptions())


def sign_document(
    input: str | Path,
    options: SignatureOptions,
    output: str | Path | None = None,
    *,
    settings: PdfileConfig = DEFAULT_CONFIG,
) -> bool:
    return _execute("sign", input, output, settings, options=options)


def overlay_document_image(
    input: str | Path,
    options: OverlayOptions,
    output: str | Path | None = None,
    *,
    settings: PdfileConfig = DEFAULT_CONFIG,
) -> bool:
    return _execute("add_image", input, output, settings, options=options)


def convert_document_to_word(
    input: str | Path,
    output: str | Path | None = None,
    *,
    settings: PdfileConfig = DEFAULT_CONFIG,
) -> bool:
    """Convenience wrapper around the PDF to Word plugin."""

    return _execute("to_word", input, output, settings)


__all__ = [
    "BaseTool",
    "ConfigError",
    "DEFAULT_CONFIG",
    "DateOptions",
    "InvalidPageSelectionError",
    "MagickError",
    "OverlayOptions",
    "PdfOperationError",
    "PdfValidationError",
    "PdfileConfig",
    "PdfileError",
    "SignatureOptions",
    "ToolContext",
    "ToolRegistry",
    "add_image_overlay",
    "add_signature",
    "convert_document_to_word",
    "get_output_path",
    "insert_date",
    "insert_document_date",
    "load_config",
    "merge_documents",
    "merge_pdfs",
    "move_document_page",
    "move_page",
    "normalize_path",
    "overlay_document_image",
    "parse_page_list",
    "pdf_to_word",
    "register_tool",
    "registry",
    "remove_document_pages",
    "remove_pages",
    "reorder_document_pages",
    "reorder_pages",
    "reset_config",
    "rotate_document_pages",
    "rotate_pages",
    "save_config",
    "sign_document",
    "windows_to_wsl",
    "wsl_to_windows",
]
