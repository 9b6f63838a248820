"""Validation helpers shared by pdfile tools."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from ..exceptions import PdfValidationError
from .utils import has_extension, resolve_path

PDF_EXTENSIONS = (".pdf",)


def split_by_extension(
    files: Iterable[str | Path],
    extensions: tuple[str, ...] = PDF_EXTENSIONS,
) -> tuple[list[Path], list[Path]]:
    """Partition *files* into ``(valid, invalid)`` by extension."""

    valid: list[Path] = []
    invalid: list[Path] = []
    for file in files:
        (valid if has_extension(file, extensions) else invalid).append(Path(file))
    return valid, invalid


def ensure_file(path: str | Path, extensions: tuple[str, ...], label: str = "Input") -> Path:
    resolved = resolve_path(path)
    if not has_extension(resolved, extensions):
        raise PdfValidationError(
            f"{label} must be a {'/'.join(ext.lstrip('.').upper() for ext in extensions)} file: {resolved}"
        )
    if not resolved.is_file():
        raise PdfValidationError(f"{label} file not found: {resolved}")
    return resolved


def ensure_pdf_exists(path: str | Path) -> Path:
    return ensure_file(path, PDF_EXTENSIONS)


__all__ = ["PDF_EXTENSIONS", "split_by_extension", "ensure_file", "ensure_pdf_exists"]
