"""Persistent user configuration for pdfile.

The configuration lives in a small JSON document::

    {
      "compression": {"enabled": true, "quality": "high"},
      "output": {"useSubdirectory": true, "subdirectoryName": "PDFile"}
    }

It is read once by the command line entry point and handed to the pieces
that need it.  Every field is validated on load; anything missing or of the
wrong type falls back to its default so a hand-edited file can never leave
the toolkit half configured.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .core.utils import get_logger
from .exceptions import ConfigError

LOGGER = get_logger("pdfile.config")

CONFIG_ENV_VAR = "PDFILE_CONFIG"
QUALITY_LEVELS = ("low", "medium", "high")


@dataclass(frozen=True)
class CompressionSettings:
    """Controls how output PDFs are compressed on save."""

    enabled: bool = True
    quality: str = "high"


@dataclass(frozen=True)
class OutputSettings:
    """Controls where default output files are placed."""

    use_subdirectory: bool = True
    subdirectory_name: str = "PDFile"


@dataclass(frozen=True)
class PdfileConfig:
    compression: CompressionSettings = field(default_factory=CompressionSettings)
    output: OutputSettings = field(default_factory=OutputSettings)


DEFAULT_CONFIG = PdfileConfig()


def get_config_path() -> Path:
    """Return the location of the configuration file."""

    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "pdfile" / "config.json"


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    return value if isinstance(value, Mapping) else {}


def _bool(section: Mapping[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    return value if isinstance(value, bool) else default


def config_from_dict(data: Mapping[str, Any]) -> PdfileConfig:
    """Build a :class:`PdfileConfig` from decoded JSON, field by field."""

    defaults = DEFAULT_CONFIG
    compression = _section(data, "compression")
    output = _section(data, "output")

    quality = compression.get("quality", defaults.compression.quality)
    if quality not in QUALITY_LEVELS:
        LOGGER.debug("Ignoring unknown compression quality %r", quality)
        quality = defaults.compression.quality

    subdirectory_name = output.get("subdirectoryName", defaults.output.subdirectory_name)
    if not isinstance(subdirectory_name, str) or not subdirectory_name.strip():
        subdirectory_name = defaults.output.subdirectory_name

    return PdfileConfig(
        compression=CompressionSettings(
            enabled=_bool(compression, "enabled", defaults.compression.enabled),
            quality=quality,
        ),
        output=OutputSettings(
            use_subdirectory=_bool(output, "useSubdirectory", defaults.output.use_subdirectory),
            subdirectory_name=subdirectory_name.strip(),
        ),
    )


def config_to_dict(config: PdfileConfig) -> dict[str, dict[str, Any]]:
    return {
        "compression": {
            "enabled": config.compression.enabled,
            "quality": config.compression.quality,
        },
        "output": {
            "useSubdirectory": config.output.use_subdirectory,
            "subdirectoryName": config.output.subdirectory_name,
        },
    }


def load_config(path: str | Path | None = None) -> PdfileConfig:
    """Load the configuration, falling back to defaults when unreadable."""

    config_path = Path(path) if path is not None else get_config_path()
    if not config_path.exists():
        return DEFAULT_CONFIG

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        LOGGER.debug("Failed to read configuration %s: %s", config_path, exc)
        return DEFAULT_CONFIG

    if not isinstance(data, Mapping):
        return DEFAULT_CONFIG
    return config_from_dict(data)


def save_config(config: PdfileConfig, path: str | Path | None = None) -> Path:
    config_path = Path(path) if path is not None else get_config_path()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(config_to_dict(config), indent=2), encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to write configuration to {config_path}") from exc
    LOGGER.debug("Saved configuration to %s", config_path)
    return config_path


def reset_config(path: str | Path | None = None) -> Path:
    """Overwrite the configuration file with the built-in defaults."""

    return save_config(DEFAULT_CONFIG, path)


__all__ = [
    "CompressionSettings",
    "OutputSettings",
    "PdfileConfig",
    "DEFAULT_CONFIG",
    "QUALITY_LEVELS",
    "get_config_path",
    "config_from_dict",
    "config_to_dict",
    "load_config",
    "save_config",
    "reset_config",
]
