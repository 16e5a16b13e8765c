"""
Tools package: the five tools exposed over MCP.

    getcurrenttime    Current time in an IANA timezone
    getrandomnumber   Uniform random integer between x and y
    web_search        Web search via the search webhook
    news_search       News search via the news webhook
    weather_lookup    Current weather and forecast via the weather webhook

``build_registry(settings)`` assembles and freezes the registry once at
process start.
"""

from __future__ import annotations

from functools import partial
from typing import Optional

from src.core.protocol import (
    CurrentTimeArgs,
    RandomNumberArgs,
    SearchArgs,
    ToolDefinition,
    WeatherArgs,
)
from src.core.registry import ToolRegistry
from src.utils.config import Settings, get_settings

from .random_tools import get_random_number
from .search_tools import news_search, web_search
from .time_tools import get_current_time
from .weather_tools import weather_lookup


def build_registry(settings: Optional[Settings] = None) -> ToolRegistry:
    """Register every tool against *settings* and return the frozen registry."""
    settings = settings or get_settings()
    registry = ToolRegistry()

    registry.register(ToolDefinition(
        name="getcurrenttime",
        description=(
            "Get the current time in a specified timezone "
            "(e.g., 'America/New_York', 'Europe/London', 'Asia/Tokyo')"
        ),
        parameter_schema=CurrentTimeArgs,
        handler=get_current_time,
    ))
    registry.register(ToolDefinition(
        name="getrandomnumber",
        description="Generate a random number",
        parameter_schema=RandomNumberArgs,
        handler=get_random_number,
    ))
    registry.register(ToolDefinition(
        name="web_search",
        description="Search the internet",
        parameter_schema=SearchArgs,
        handler=partial(web_search, settings=settings),
    ))
    registry.register(ToolDefinition(
        name="news_search",
        description="Get the news",
        parameter_schema=SearchArgs,
        handler=partial(news_search, settings=settings),
    ))
    registry.register(ToolDefinition(
        name="weather_lookup",
        description="Find current and future weather information",
        parameter_schema=WeatherArgs,
        handler=partial(weather_lookup, settings=settings),
    ))

    return registry.freeze()


__all__ = ["build_registry"]
