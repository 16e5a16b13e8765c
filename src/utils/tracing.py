"""
LangSmith Tracing Helper

Provides the ``@traceable`` decorator so tool handlers can log runs to
LangSmith with a single import line.

Set these variables in .env to enable tracing:
    LANGCHAIN_TRACING_V2=true
    LANGCHAIN_API_KEY=ls__...
    LANGCHAIN_PROJECT=mcp4vapi   (optional, default project name)

When the variables are missing the decorator returns the function unchanged.
"""

from __future__ import annotations

import os
from typing import Any, Callable, TypeVar

from src.utils.logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _tracing_enabled() -> bool:
    return (
        os.getenv("LANGCHAIN_TRACING_V2", "").lower() in ("true", "1", "yes")
        and bool(os.getenv("LANGCHAIN_API_KEY", "").strip())
    )


def traceable(
    name: str | None = None,
    run_type: str = "tool",
    tags: list[str] | None = None,
) -> Callable[[F], F]:
    """
    Decorator that wraps a function with LangSmith tracing.

    Tracing is decided when the decorated module is imported, so the
    environment (or .env) must be loaded before that.

    Parameters
    ----------
    name : str | None
        Display name in the LangSmith UI (defaults to the function name).
    run_type : str
        One of "chain", "llm", "tool", "retriever" (default "tool").
    tags : list[str] | None
        Optional list of tags visible in the LangSmith UI.

    Usage
    -----
    from src.utils.tracing import traceable

    @traceable(name="web_search", tags=["webhook"])
    def web_search(args: SearchArgs) -> ToolResult:
        ...
    """
    def decorator(func: F) -> F:
        if not _tracing_enabled():
            return func

        from langsmith import traceable as ls_traceable  # noqa: PLC0415

        logger.info(
            "LangSmith tracing enabled for '%s'. Project: %s",
            name or func.__name__,
            os.getenv("LANGCHAIN_PROJECT", "default"),
        )
        return ls_traceable(  # type: ignore[return-value]
            run_type=run_type,
            name=name or func.__name__,
            tags=tags or [],
        )(func)

    return decorator
