"""
Web and news search tools.

Both proxy the query to a configured webhook and relay the JSON response
behind a short banner.  Failures never raise: they come back as an error
result so the agent can tell the user.

Request body
------------
    {"q": "<query>", "freshness": "pd" | "pw" | "pm" | "py"}   # freshness optional
"""

from __future__ import annotations

import json
from typing import Optional

from src.core.protocol import SearchArgs, SearchRequest, ToolResult
from src.tools.webhook import post_json
from src.utils.config import Settings
from src.utils.logging import get_logger
from src.utils.tracing import traceable

logger = get_logger(__name__)

SEARCH_BANNER = "Search Results:\n\n"
NEWS_BANNER = "News Results:\n\n"


def dump_compact(data: object) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def proxy_search(
    url: Optional[str],
    banner: str,
    args: SearchArgs,
    settings: Settings,
) -> ToolResult:
    """POST the search request to *url* and wrap the response."""
    body = SearchRequest(q=args.query, freshness=args.freshness).to_body()
    try:
        data = post_json(url, body, settings)
    except Exception as exc:
        logger.warning("Search webhook failed [query=%s]: %s", args.query[:60], exc)
        return ToolResult.error(f"Error performing search: {exc}")

    return ToolResult.from_text(banner + dump_compact(data))


@traceable(name="web_search", tags=["webhook"])
def web_search(args: SearchArgs, settings: Settings) -> ToolResult:
    return proxy_search(settings.web_search_url, SEARCH_BANNER, args, settings)


@traceable(name="news_search", tags=["webhook"])
def news_search(args: SearchArgs, settings: Settings) -> ToolResult:
    return proxy_search(settings.news_search_url, NEWS_BANNER, args, settings)
