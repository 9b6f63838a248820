"""Document conversion tools."""

from __future__ import annotations

from .pdf_to_word import PdfToWordTool, classify_lines, is_heading, pdf_to_word

__all__ = ["pdf_to_word", "is_heading", "classify_lines", "PdfToWordTool"]
