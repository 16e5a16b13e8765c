"""
Tool Registry

Static table mapping a tool name to its parameter schema and handler.
The registry is filled once at process start and then frozen; every call
goes through :meth:`ToolRegistry.dispatch`, which validates the raw
arguments before the handler runs.

Dispatch never raises for per-call problems (unknown tool, bad arguments):
those come back as failed :class:`ToolResult` objects so the calling agent
can react.  Registration problems are configuration errors and do raise.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from src.core.protocol import ToolDefinition, ToolResult
from src.utils.logging import get_logger

logger = get_logger(__name__)


class RegistryError(RuntimeError):
    """Base class for registry configuration errors (fatal at startup)."""


class DuplicateToolError(RegistryError):
    """A tool with the same name is already registered."""


class RegistryFrozenError(RegistryError):
    """The registry no longer accepts registrations."""


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


class ToolRegistry:
    """Insertion-ordered registry of :class:`ToolDefinition` objects."""

    def __init__(self) -> None:
        self._tools: Dict[str, ToolDefinition] = {}
        self._frozen = False

    # ── registration ───────────────────────────────────────────────────────

    def register(self, definition: ToolDefinition) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{definition.name}': registry is frozen"
            )
        if definition.name in self._tools:
            raise DuplicateToolError(f"Tool already registered: {definition.name}")
        self._tools[definition.name] = definition
        logger.debug("Registered tool %s", definition.name)

    def freeze(self) -> "ToolRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── lookup ─────────────────────────────────────────────────────────────

    def get(self, name: str) -> Optional[ToolDefinition]:
        return self._tools.get(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def list_tools(self) -> List[Dict[str, Any]]:
        """Describe every tool as ``{name, description, inputSchema}``."""
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "inputSchema": tool.input_schema(),
            }
            for tool in self._tools.values()
        ]

    # ── dispatch ───────────────────────────────────────────────────────────

    def dispatch(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Validate *arguments* against the tool's schema and invoke its handler.

        Parameters
        ----------
        name : str
            Registered tool name.
        arguments : dict | None
            Raw, unvalidated arguments from the client.

        Returns
        -------
        ToolResult
            The handler's result, or a failed result describing an unknown
            tool or invalid arguments (the handler is not invoked then).
        """
        tool = self._tools.get(name)
        if tool is None:
            logger.warning("Call to unknown tool %s", name)
            return ToolResult.error(f"Unknown tool: {name}")

        try:
            validated = tool.parameter_schema.model_validate(arguments or {})
        except ValidationError as exc:
            detail = _format_validation_error(exc)
            logger.info("Rejected %s call: %s", name, detail)
            return ToolResult.error(f"Invalid arguments for {name}: {detail}")

        logger.info("Dispatching %s", name)
        return tool.handler(validated)
