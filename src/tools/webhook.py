"""
Outbound webhook client.

One JSON POST per call using standard-library urllib.  No retries: a failed
attempt surfaces immediately as :class:`WebhookError`.
"""
from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any, Dict, Optional

from src.utils.config import Settings
from src.utils.logging import get_logger

logger = get_logger(__name__)

_HEADERS = {
    "Content-Type": "application/json",
    "User-Agent": "mcp4vapi/1.0",
}


class WebhookError(RuntimeError):
    """Any failure talking to a webhook: config, network, status or JSON."""


def encode_body(body: Dict[str, Any]) -> bytes:
    """Compact JSON, matching what the webhooks were built against."""
    return json.dumps(body, separators=(",", ":")).encode("utf-8")


def post_json(
    url: Optional[str],
    body: Dict[str, Any],
    settings: Settings,
) -> Any:
    """
    POST *body* as JSON to *url* and return the decoded JSON response.

    The configured API key, when set, is sent in ``settings.api_key_header``.

    Raises
    ------
    WebhookError
        If *url* is empty, the request fails, the status is not 2xx, or the
        response body is not valid JSON.
    """
    if not url:
        raise WebhookError("Webhook URL is not configured")

    headers = dict(_HEADERS)
    if settings.api_key:
        headers[settings.api_key_header] = settings.api_key

    req = urllib.request.Request(url, data=encode_body(body), headers=headers, method="POST")
    try:
        with urllib.request.urlopen(req, timeout=settings.request_timeout) as resp:
            status = resp.status
            reason = resp.reason
            raw = resp.read()
    except urllib.error.HTTPError as exc:
        raise WebhookError(f"Webhook error: {exc.code} {exc.reason}") from exc
    except urllib.error.URLError as exc:
        raise WebhookError(f"Webhook unreachable: {exc.reason}") from exc
    except (TimeoutError, OSError) as exc:
        raise WebhookError(f"Webhook request failed: {exc}") from exc

    if not 200 <= status < 300:
        raise WebhookError(f"Webhook error: {status} {reason}")

    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise WebhookError(f"Invalid JSON from webhook: {exc}") from exc

    logger.debug("Webhook %s answered %s (%d bytes)", url, status, len(raw))
    return data
