"""Merge utilities exposed through the pdfile tools namespace."""

from __future__ import annotations

from .merge import MergeTool, merge_pdfs, validate_merge_inputs

__all__ = ["merge_pdfs", "validate_merge_inputs", "MergeTool"]
