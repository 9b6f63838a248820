"""Loading and saving documents for pdfile tools."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import BinaryIO, Callable

from pypdf import PdfReader, PdfWriter

from ..config import CompressionSettings
from ..exceptions import PdfOperationError
from .utils import get_logger

LOGGER = get_logger("pdfile.core.document")

QUALITY_TO_ZLIB_LEVEL = {"low": 1, "medium": 6, "high": 9}


def load_reader(path: Path) -> PdfReader:
    """Open *path*, unlocking documents encrypted with an empty password."""

    try:
        reader = PdfReader(str(path))
    except Exception as exc:
        raise PdfOperationError(f"Unable to read PDF: {path}") from exc
    if reader.is_encrypted:
        LOGGER.debug("Attempting to decrypt encrypted PDF %s", path)
        try:
            reader.decrypt("")
        except Exception as exc:  # pragma: no cover - decrypt errors vary
            raise PdfOperationError(f"Unable to decrypt encrypted PDF: {path}") from exc
    return reader


def writer_from(reader: PdfReader) -> PdfWriter:
    """Return a writer holding every page of *reader*."""

    writer = PdfWriter()
    for page in reader.pages:
        writer.add_page(page)
    return writer


def compress_writer(writer: PdfWriter, settings: CompressionSettings) -> None:
    if not settings.enabled:
        return
    level = QUALITY_TO_ZLIB_LEVEL.get(settings.quality, -1)
    for page in writer.pages:
        page.compress_content_streams(level=level)
    writer.compress_identical_objects()


def atomic_write(destination: Path, write: Callable[[BinaryIO], None]) -> Path:
    """Write through a temporary file next to *destination*, then rename it."""

    destination.parent.mkdir(parents=True, exist_ok=True)
    handle, temp_name = tempfile.mkstemp(
        prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
    )
    temp_path = Path(temp_name)
    try:
        with os.fdopen(handle, "wb") as stream:
            write(stream)
        os.replace(temp_path, destination)
    except Exception as exc:
        temp_path.unlink(missing_ok=True)
        raise PdfOperationError(f"Failed to write {destination}") from exc
    return destination


def write_pdf(
    writer: PdfWriter,
    destination: Path,
    compression: CompressionSettings | None = None,
) -> Path:
    settings = compression or CompressionSettings()
    compress_writer(writer, settings)
    LOGGER.debug(
        "Writing %d page(s) to %s (compression=%s)",
        len(writer.pages),
        destination,
        settings.quality if settings.enabled else "off",
    )
    return atomic_write(destination, writer.write)


__all__ = ["load_reader", "writer_from", "compress_writer", "atomic_write", "write_pdf"]
