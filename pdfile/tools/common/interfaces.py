"""Core interfaces and context objects shared by pdfile tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...config import DEFAULT_CONFIG, PdfileConfig
from ...core.paths import get_output_path
from ...core.utils import get_logger, resolve_path

LOGGER = get_logger("pdfile.tools")


@dataclass
class ToolContext:
    """Holds shared execution state for a tool invocation."""

    input_path: Path | None = None
    output_path: Path | None = None
    settings: PdfileConfig = DEFAULT_CONFIG
    resources: dict[str, Any] = field(default_factory=dict)
    config: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.input_path, (str, Path)):
            self.input_path = resolve_path(self.input_path)
        if isinstance(self.output_path, (str, Path)):
            self.output_path = resolve_path(self.output_path)

    def require_input(self) -> Path:
        if self.input_path is None:
            raise ValueError("ToolContext requires an input_path")
        return self.input_path

    def resolve_output(self, source: Path, suffix: str, new_extension: str | None = None) -> Path:
        """Return the explicit output path or the default one for *source*.

        Nothing is created here; the directory appears with the first write.
        """

        if self.output_path is not None:
            return self.output_path
        return get_output_path(source, suffix, new_extension, self.settings.output)


class BaseTool:
    """Base class for all pluggable pdfile tools."""

    name: str
    output_suffix: str = ""

    def __init__(self, context: ToolContext) -> None:
        self.context = context

    def run(self) -> Any:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError

    def execute(self) -> bool:
        """Run the tool, reporting failures as ``False`` instead of raising."""

        try:
            result = self.run()
        except Exception as exc:
            LOGGER.error("%s failed: %s", self.name, exc)
            LOGGER.debug("%s failure details", self.name, exc_info=True)
            return False
        self.context.resources["result"] = result
        return True

