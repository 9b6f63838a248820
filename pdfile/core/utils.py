"""Utilities shared by pdfile tools."""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER_NAME = "pdfile"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def configure_logging(verbose: bool = False) -> None:
    """Set the level for every ``pdfile.*`` logger."""

    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)


def resolve_path(path: str | Path | None) -> Path:
    if path is None:
        raise ValueError("Path must not be None")
    resolved = Path(path).expanduser().resolve()
    return resolved


def has_extension(path: str | Path, extensions: tuple[str, ...]) -> bool:
    return Path(path).suffix.lower() in extensions
