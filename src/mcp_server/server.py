"""
MCP4VAPI — MCP Server
=====================
Exposes the tool registry (time, random number, web search, news search,
weather) as Model Context Protocol tools via FastMCP.

Each tool below is a thin wrapper: it forwards its arguments to
``REGISTRY.dispatch`` in a worker thread and relays the ToolResult.  A failed
result is raised as ``ToolError`` so FastMCP reports it with ``isError: true``
and the same text.

─────────────────────────────────────────
HTTP MODE (SSE + streamable HTTP, default):
    python -m src.web_app.server
    # SSE at http://localhost:8000/sse, streamable HTTP at http://localhost:8000/mcp

─────────────────────────────────────────
LOCAL DEV (stdio, MCP Inspector in browser):
    MCP_TRANSPORT=stdio python -m src.mcp_server.server

─────────────────────────────────────────
CLAUDE DESKTOP / VAPI CONFIG (remote SSE):
{
  "mcpServers": {
    "mcp4vapi": {
      "url": "http://localhost:8000/sse"
    }
  }
}
"""

import asyncio
from typing import Annotated, Any, Dict, Optional

# Load .env early, before @traceable decorators are evaluated at import time.
from dotenv import load_dotenv
load_dotenv()

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import BaseModel, Field

from src.core.protocol import (
    CurrentTimeArgs,
    Freshness,
    RandomNumberArgs,
    SearchArgs,
    WeatherArgs,
)
from src.tools import build_registry
from src.utils.config import get_settings
from src.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

settings = get_settings()
configure_logging(settings.log_level)
REGISTRY = build_registry(settings)

mcp = FastMCP(
    name=settings.server_name,
    version=settings.server_version,
    instructions=(
        "Utility tools for voice and chat agents: current time in any timezone, "
        "random numbers, web search, news search and weather lookup."
    ),
)


async def _call(name: str, arguments: Dict[str, Any]) -> str:
    """Dispatch through the registry off the event loop and relay the result."""
    arguments = {k: v for k, v in arguments.items() if v is not None}
    result = await asyncio.to_thread(REGISTRY.dispatch, name, arguments)
    if result.is_error:
        raise ToolError(result.text)
    return result.text


def _description(name: str) -> str:
    return REGISTRY.get(name).description


def _param(schema: type[BaseModel], field: str) -> Any:
    return Field(description=schema.model_fields[field].description)


# ── Tool 1: Current time ───────────────────────────────────────────────────

@mcp.tool(name="getcurrenttime", description=_description("getcurrenttime"))
async def getcurrenttime(
    timezone: Annotated[str, _param(CurrentTimeArgs, "timezone")] = "UTC",
) -> str:
    return await _call("getcurrenttime", {"timezone": timezone})


# ── Tool 2: Random number ──────────────────────────────────────────────────

@mcp.tool(name="getrandomnumber", description=_description("getrandomnumber"))
async def getrandomnumber(
    x: Annotated[float, _param(RandomNumberArgs, "x")],
    y: Annotated[float, _param(RandomNumberArgs, "y")],
) -> str:
    return await _call("getrandomnumber", {"x": x, "y": y})


# ── Tool 3: Web search ─────────────────────────────────────────────────────

@mcp.tool(name="web_search", description=_description("web_search"))
async def web_search(
    query: Annotated[str, _param(SearchArgs, "query")],
    freshness: Annotated[Optional[Freshness], _param(SearchArgs, "freshness")] = None,
) -> str:
    return await _call("web_search", {"query": query, "freshness": freshness})


# ── Tool 4: News search ────────────────────────────────────────────────────

@mcp.tool(name="news_search", description=_description("news_search"))
async def news_search(
    query: Annotated[str, _param(SearchArgs, "query")],
    freshness: Annotated[Optional[Freshness], _param(SearchArgs, "freshness")] = None,
) -> str:
    return await _call("news_search", {"query": query, "freshness": freshness})


# ── Tool 5: Weather ────────────────────────────────────────────────────────

@mcp.tool(name="weather_lookup", description=_description("weather_lookup"))
async def weather_lookup(
    location: Annotated[str, _param(WeatherArgs, "location")],
    options: Annotated[Optional[str], _param(WeatherArgs, "options")] = None,
) -> str:
    return await _call("weather_lookup", {"location": location, "options": options})


logger.info("MCP server '%s' ready with tools: %s", settings.server_name, ", ".join(REGISTRY.names()))


# ── Entry point ────────────────────────────────────────────────────────────

if __name__ == "__main__":
    if settings.transport == "stdio":
        # stdio mode for local process-based MCP client config.
        mcp.run(transport="stdio")
    else:
        from src.web_app.server import run
        run()
