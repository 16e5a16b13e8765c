"""Current-time lookup for a named IANA timezone."""
from __future__ import annotations

from datetime import datetime, timezone as dt_timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.core.protocol import CurrentTimeArgs, ToolResult
from src.utils.logging import get_logger
from src.utils.tracing import traceable

logger = get_logger(__name__)

# 12-hour clock with seconds and the short zone label, e.g. "03:04:05 PM EST"
_TIME_FORMAT = "%I:%M:%S %p %Z"

_ZONE_EXAMPLES = '"America/New_York", "Europe/London", "Asia/Tokyo"'


def format_time(tz_name: str, now: Optional[datetime] = None) -> str:
    """
    Format *now* (default: the current instant) in the zone *tz_name*.

    Raises
    ------
    ZoneInfoNotFoundError
        If the identifier is unknown.
    ValueError
        If the identifier is malformed (empty, absolute path, ...).
    """
    zone = ZoneInfo(tz_name)
    instant = now or datetime.now(dt_timezone.utc)
    return instant.astimezone(zone).strftime(_TIME_FORMAT)


@traceable(name="getcurrenttime")
def get_current_time(args: CurrentTimeArgs) -> ToolResult:
    try:
        return ToolResult.from_text(format_time(args.timezone))
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        # ZoneInfoNotFoundError is a KeyError, whose str() quotes the message.
        # Bare tzdata package names ("America") and over-long names surface
        # as OSError.
        if isinstance(exc, KeyError) and exc.args:
            cause = exc.args[0]
        else:
            cause = str(exc) or "Unknown error occurred"
        logger.warning("Bad timezone %r: %s", args.timezone, cause)
        return ToolResult.error(
            f"Error: {cause}. Please provide a valid timezone identifier "
            f"(e.g., {_ZONE_EXAMPLES})."
        )
