"""Argument helpers shared by the command modules."""

from __future__ import annotations

from argparse import ArgumentParser
from pathlib import Path

from ...core.pages import parse_page_list
from ...core.paths import normalize_path
from ...core.validator import ensure_file
from ...exceptions import PdfValidationError
from ..prompts import ask_required


def add_output_option(parser: ArgumentParser) -> None:
    parser.add_argument("-o", "--output", help="Output file path")


def add_yes_option(parser: ArgumentParser) -> None:
    parser.add_argument("-y", "--yes", action="store_true", help="Use defaults, skip prompts")


def input_file(value: str, extensions: tuple[str, ...], label: str = "Input") -> Path:
    """Normalise a user supplied path and check its extension and existence."""

    return ensure_file(normalize_path(value), extensions, label)


def output_file(value: str | None) -> Path | None:
    return normalize_path(value) if value else None


def page_option(value: str | None) -> list[int] | None:
    """Parse an optional 1-based page list; ``None`` when it was not given."""

    if value is None:
        return None
    return parse_page_list(value)


def required_pages(value: str | None, *, yes: bool, flag: str, question: str) -> list[int]:
    """Return the 0-based pages from *value*, asking for them when missing.

    Raises:
        PdfValidationError: If the option is missing and prompting is disabled.
        Cancelled: If the user answers the prompt with nothing.
    """

    if value is None:
        if yes:
            raise PdfValidationError(f"{flag} option is required with --yes flag")
        value = ask_required(question)
    pages = parse_page_list(value)
    if not pages:
        raise PdfValidationError(f"{flag} must list at least one page number")
    return pages


__all__ = [
    "add_output_option",
    "add_yes_option",
    "input_file",
    "output_file",
    "page_option",
    "required_pages",
]
