"""Core components: tool protocol models and the tool registry"""

from .protocol import (
    ContentItem,
    ToolResult,
    ToolDefinition,
    CurrentTimeArgs,
    RandomNumberArgs,
    SearchArgs,
    WeatherArgs,
    SearchRequest,
    WeatherRequest,
)
from .registry import (
    ToolRegistry,
    RegistryError,
    DuplicateToolError,
    RegistryFrozenError,
)

__all__ = [
    "ContentItem",
    "ToolResult",
    "ToolDefinition",
    "CurrentTimeArgs",
    "RandomNumberArgs",
    "SearchArgs",
    "WeatherArgs",
    "SearchRequest",
    "WeatherRequest",
    # Registry
    "ToolRegistry",
    "RegistryError",
    "DuplicateToolError",
    "RegistryFrozenError",
]
