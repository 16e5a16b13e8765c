"""Weather lookup proxied to the weather webhook; the JSON is relayed as-is."""
from __future__ import annotations

from src.core.protocol import ToolResult, WeatherArgs, WeatherRequest
from src.tools.search_tools import dump_compact
from src.tools.webhook import post_json
from src.utils.config import Settings
from src.utils.logging import get_logger
from src.utils.tracing import traceable

logger = get_logger(__name__)


@traceable(name="weather_lookup", tags=["webhook"])
def weather_lookup(args: WeatherArgs, settings: Settings) -> ToolResult:
    body = WeatherRequest(location=args.location, options=args.options).to_body()
    try:
        data = post_json(settings.weather_url, body, settings)
    except Exception as exc:
        logger.warning("Weather webhook failed [location=%s]: %s", args.location[:60], exc)
        return ToolResult.error(f"Error performing search: {exc}")

    return ToolResult.from_text(dump_compact(data))
