"""Tool registry: maps tool names to :class:`BaseTool` subclasses."""

from __future__ import annotations

from typing import Dict, Tuple

from ...core.utils import get_logger
from .interfaces import BaseTool, ToolContext

LOGGER = get_logger("pdfile.tools")


class ToolRegistry:
    """Name to tool class mapping, filled by :func:`register_tool`."""

    def __init__(self) -> None:
        self._tools: Dict[str, type[BaseTool]] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def register(self, name: str, tool_class: type[BaseTool]) -> None:
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
        self._tools[name] = tool_class

    def get(self, name: str) -> type[BaseTool] | None:
        return self._tools.get(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._tools))

    def create(self, name: str, context: ToolContext) -> BaseTool:
        tool_class = self.get(name)
        if tool_class is None:
            raise KeyError(f"Tool '{name}' is not registered. Available: {', '.join(self.names())}")
        return tool_class(context)

    def execute(self, name: str, context: ToolContext) -> bool:
        """Create the tool called *name* and run it, returning its success."""

        LOGGER.debug("Running tool %s", name)
        return self.create(name, context).execute()


registry = ToolRegistry()


def register_tool(name: str):
    def decorator(cls: type[BaseTool]) -> type[BaseTool]:
        registry.register(name, cls)
        return cls

    return decorator


__all__ = ["ToolRegistry", "registry", "register_tool", "ToolContext", "BaseTool"]
