"""Convert a PDF into a Word document.

Only text survives the conversion: it is extracted page by page with pypdf,
split into lines and written as paragraphs with python-docx.  Short lines
that are all caps, or that look like a ``Label:`` prefix, become level-2
headings.  Layout, images and tables are not carried over.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator

from docx import Document

from ...core.document import atomic_write, load_reader
from ...core.utils import get_logger, resolve_path
from ..common.interfaces import BaseTool
from ..common.pipeline import register_tool

LOGGER = get_logger("pdfile.tools.to_word")

HEADING_MAX_LENGTH = 100
HEADING_LEVEL = 2
_LABEL_PATTERN = re.compile(r"^[A-Z][a-z\s]+:")


def is_heading(line: str) -> bool:
    if not line or len(line) >= HEADING_MAX_LENGTH:
        return False
    if any(char.isalpha() for char in line) and line == line.upper():
        return True
    return _LABEL_PATTERN.match(line) is not None


def extract_text(path: Path) -> str:
    reader = load_reader(path)
    texts = []
    for page_number, page in enumerate(reader.pages, start=1):
        text = page.extract_text() or ""
        LOGGER.debug("Extracted %d characters from page %d", len(text), page_number)
        texts.append(text)
    return "\n".join(texts)


def classify_lines(text: str) -> Iterator[tuple[str, str]]:
    """Yield ``(kind, line)`` pairs where kind is heading, body or blank."""

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            yield "blank", ""
        elif is_heading(line):
            yield "heading", line
        else:
            yield "body", line


def build_document(blocks: Iterable[tuple[str, str]]):
    document = Document()
    for kind, line in blocks:
        if kind == "heading":
            document.add_heading(line, level=HEADING_LEVEL)
        else:
            document.add_paragraph(line)
    return document


def pdf_to_word(input: str | Path, output: str | Path) -> Path:
    source = resolve_path(input)
    destination = resolve_path(output)

    LOGGER.debug("Starting conversion: %s -> %s", source, destination)
    document = build_document(classify_lines(extract_text(source)))
    atomic_write(destination, document.save)
    LOGGER.info("Word document saved to %s", destination)
    return destination


@register_tool("to_word")
class PdfToWordTool(BaseTool):
    name = "to_word"
    output_suffix = "_converted"

    def run(self) -> Path:
        context = self.context
        source = context.require_input()
        output = context.resolve_output(source, self.output_suffix, ".docx")
        return pdf_to_word(source, output)


__all__ = ["is_heading", "classify_lines", "extract_text", "build_document", "pdf_to_word", "PdfToWordTool"]
