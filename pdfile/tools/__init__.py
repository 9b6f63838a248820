"""Namespace for pluggable pdfile tools."""

from __future__ import annotations

from .common.pipeline import registry


def load_builtin_plugins() -> None:
    from .merger import merge  # noqa: F401
    from .pages import remove, reorder, rotate  # noqa: F401
    from .stamp import date, overlay, signature  # noqa: F401
    from .converter import pdf_to_word  # noqa: F401


__all__ = ["registry", "load_builtin_plugins"]
