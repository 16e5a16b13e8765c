"""Unit tests for src/core/registry.py"""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest


def _definition(name="echo", handler=None):
    from src.core.protocol import SearchArgs, ToolDefinition, ToolResult
    if handler is None:
        handler = MagicMock(return_value=ToolResult.from_text("ok"))
    return ToolDefinition(
        name=name,
        description="Echo the query",
        parameter_schema=SearchArgs,
        handler=handler,
    )


class TestRegistration:

    def test_register_and_get(self):
        from src.core.registry import ToolRegistry
        registry = ToolRegistry()
        definition = _definition()
        registry.register(definition)
        assert registry.get("echo") is definition
        assert "echo" in registry
        assert len(registry) == 1

    def test_duplicate_name_raises(self):
        from src.core.registry import DuplicateToolError, ToolRegistry
        registry = ToolRegistry()
        registry.register(_definition())
        with pytest.raises(DuplicateToolError):
            registry.register(_definition())

    def test_frozen_registry_rejects_registration(self):
        from src.core.registry import RegistryFrozenError, ToolRegistry
        registry = ToolRegistry().freeze()
        assert registry.frozen is True
        with pytest.raises(RegistryFrozenError):
            registry.register(_definition())

    def test_names_preserve_insertion_order(self):
        from src.core.registry import ToolRegistry
        registry = ToolRegistry()
        for name in ("b", "a", "c"):
            registry.register(_definition(name))
        assert registry.names() == ("b", "a", "c")

    def test_list_tools_shape(self):
        from src.core.registry import ToolRegistry
        registry = ToolRegistry()
        registry.register(_definition())
        [tool] = registry.list_tools()
        assert tool["name"] == "echo"
        assert tool["description"] == "Echo the query"
        assert "query" in tool["inputSchema"]["properties"]
        assert tool["inputSchema"]["required"] == ["query"]


class TestDispatch:

    def test_valid_arguments_reach_handler(self):
        from src.core.registry import ToolRegistry
        registry = ToolRegistry()
        definition = _definition()
        registry.register(definition)
        result = registry.dispatch("echo", {"query": "cats", "freshness": "pd"})
        assert result.text == "ok"
        validated = definition.handler.call_args[0][0]
        assert validated.query == "cats"
        assert validated.freshness == "pd"

    def test_invalid_arguments_skip_handler(self):
        from src.core.registry import ToolRegistry
        registry = ToolRegistry()
        definition = _definition()
        registry.register(definition)
        result = registry.dispatch("echo", {"freshness": "pd"})
        assert result.is_error is True
        assert result.text.startswith("Invalid arguments for echo:")
        assert "query" in result.text
        definition.handler.assert_not_called()

    def test_bad_enum_value_is_reported(self):
        from src.core.registry import ToolRegistry
        registry = ToolRegistry()
        registry.register(_definition())
        result = registry.dispatch("echo", {"query": "cats", "freshness": "yesterday"})
        assert result.is_error is True
        assert "freshness" in result.text

    def test_unknown_tool_returns_error_result(self):
        from src.core.registry import ToolRegistry
        result = ToolRegistry().dispatch("nope", {})
        assert result.is_error is True
        assert result.text == "Unknown tool: nope"

    def test_none_arguments_treated_as_empty(self):
        from src.core.protocol import CurrentTimeArgs, ToolDefinition, ToolResult
        from src.core.registry import ToolRegistry
        handler = MagicMock(return_value=ToolResult.from_text("ok"))
        registry = ToolRegistry()
        registry.register(ToolDefinition(
            name="clock", description="", parameter_schema=CurrentTimeArgs, handler=handler,
        ))
        registry.dispatch("clock", None)
        assert handler.call_args[0][0].timezone == "UTC"


class TestBuildRegistry:

    def test_all_five_tools_registered(self):
        from src.tools import build_registry
        from src.utils.config import Settings
        registry = build_registry(Settings())
        assert registry.names() == (
            "getcurrenttime",
            "getrandomnumber",
            "web_search",
            "news_search",
            "weather_lookup",
        )

    def test_built_registry_is_frozen(self):
        from src.tools import build_registry
        from src.utils.config import Settings
        assert build_registry(Settings()).frozen is True

    @pytest.mark.parametrize("arguments", [
        {"x": "nan", "y": 1},
        {"x": float("-inf"), "y": 0},
        {"x": 0, "y": float("inf")},
    ])
    def test_non_finite_random_bounds_become_error_results(self, arguments):
        from src.tools import build_registry
        from src.utils.config import Settings
        result = build_registry(Settings()).dispatch("getrandomnumber", arguments)
        assert result.is_error is True
        assert result.text.startswith("Invalid arguments for getrandomnumber")
