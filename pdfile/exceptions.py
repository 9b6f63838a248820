"""Custom exceptions raised by :mod:`pdfile`."""

from __future__ import annotations

from typing import Iterable


class PdfileError(Exception):
    """Base exception for all errors raised by :mod:`pdfile`."""


class PdfValidationError(PdfileError):
    """Raised when an input file or option fails validation."""


class InvalidPageSelectionError(PdfileError):
    """Raised when page numbers cannot be parsed or do not fit the document."""

    def __init__(self, pages: Iterable[object], reason: str | None = None) -> None:
        self.pages = list(pages)
        self.reason = reason
        message = f"Invalid page selection: {self.pages!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class PdfOperationError(PdfileError):
    """Raised when loading, transforming or saving a document fails."""


class MagickError(PdfileError):
    """Raised when the ImageMagick binary is missing or exits with an error."""


class ConfigError(PdfileError):
    """Raised when the configuration file cannot be written."""


__all__ = [
    "PdfileError",
    "PdfValidationError",
    "InvalidPageSelectionError",
    "PdfOperationError",
    "MagickError",
    "ConfigError",
]
