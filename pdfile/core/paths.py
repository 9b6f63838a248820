"""Path helpers: Windows/WSL translation and default output locations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from ..config import OutputSettings

_WINDOWS_PATH = re.compile(r"^([A-Za-z]):[/\\](.*)$", re.DOTALL)
_WSL_PATH = re.compile(r"^/mnt/([A-Za-z])/(.*)$", re.DOTALL)

DEFAULT_OUTPUT = OutputSettings()


def windows_to_wsl(path: str) -> str:
    """Translate ``C:\\Users\\me`` into ``/mnt/c/Users/me``."""

    if path.startswith("/mnt/"):
        return path
    match = _WINDOWS_PATH.match(path)
    if match:
        drive = match.group(1).lower()
        rest = match.group(2).replace("\\", "/")
        return f"/mnt/{drive}/{rest}"
    return path


def wsl_to_windows(path: str) -> str:
    """Translate ``/mnt/c/Users/me`` into ``C:\\Users\\me``."""

    match = _WSL_PATH.match(path)
    if match:
        drive = match.group(1).upper()
        rest = match.group(2).replace("/", "\\")
        return f"{drive}:\\{rest}"
    return path


def is_windows_path(path: str) -> bool:
    return _WINDOWS_PATH.match(path) is not None


def normalize_path(path: str | Path) -> Path:
    """Return an absolute path, translating Windows drive paths for WSL."""

    text = str(path)
    if is_windows_path(text):
        return Path(windows_to_wsl(text))
    return Path(text).expanduser().resolve()


@dataclass(frozen=True)
class FileInfo:
    dirname: Path
    basename: str
    filename: str
    extension: str


def get_file_info(path: str | Path) -> FileInfo:
    file_path = Path(path)
    return FileInfo(
        dirname=file_path.parent,
        basename=file_path.name,
        filename=file_path.stem,
        extension=file_path.suffix,
    )


def get_output_dir(input_path: str | Path, settings: OutputSettings = DEFAULT_OUTPUT) -> Path:
    """Return the directory default outputs for *input_path* are written to.

    With subdirectories enabled this is ``<dir>/<subdirectory_name>``, unless
    the input already lives in a directory of that name.
    """

    directory = Path(input_path).parent
    if not settings.use_subdirectory:
        return directory
    if directory.name == settings.subdirectory_name:
        return directory
    return directory / settings.subdirectory_name


def ensure_output_dir(input_path: str | Path, settings: OutputSettings = DEFAULT_OUTPUT) -> Path:
    output_dir = get_output_dir(input_path, settings)
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def get_output_path(
    input_path: str | Path,
    suffix: str,
    new_extension: str | None = None,
    settings: OutputSettings = DEFAULT_OUTPUT,
) -> Path:
    info = get_file_info(input_path)
    extension = new_extension if new_extension is not None else info.extension
    return get_output_dir(input_path, settings) / f"{info.filename}{suffix}{extension}"


__all__ = [
    "FileInfo",
    "windows_to_wsl",
    "wsl_to_windows",
    "is_windows_path",
    "normalize_path",
    "get_file_info",
    "get_output_dir",
    "ensure_output_dir",
    "get_output_path",
]
