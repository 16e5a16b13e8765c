"""
Transport router.

Maps an inbound request path onto one of the two MCP transport apps:

    /sse, /sse/message   → SSE (streaming) transport
    /mcp                 → streamable-HTTP (request/response) transport
    anything else        → 404 "Not found"

Routing is pure and stateless: no authentication, no rate limiting.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from src.utils.logging import get_logger

logger = get_logger(__name__)

SSE_PATH = "/sse"
SSE_MESSAGE_PATH = "/sse/message"
MCP_PATH = "/mcp"


class Transport(str, Enum):
    """Protocol binding an inbound path is served by."""
    SSE = "sse"
    HTTP = "http"


_ROUTES = {
    SSE_PATH: Transport.SSE,
    SSE_MESSAGE_PATH: Transport.SSE,
    MCP_PATH: Transport.HTTP,
}


def resolve_transport(path: str) -> Optional[Transport]:
    """Return the transport serving *path*, or None when nothing does.

    A single trailing slash is ignored: the SSE message endpoint is advertised
    to clients as ``/sse/message/``.
    """
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return _ROUTES.get(path)


class TransportRouter:
    """ASGI app forwarding each request to the transport its path resolves to."""

    def __init__(self, sse_app: ASGIApp, http_app: ASGIApp) -> None:
        self._apps = {Transport.SSE: sse_app, Transport.HTTP: http_app}

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        transport = resolve_transport(scope.get("path", ""))
        if transport is None:
            if scope["type"] == "http":
                logger.debug("No transport for %s", scope.get("path"))
                response = PlainTextResponse("Not found", status_code=404)
                await response(scope, receive, send)
            elif scope["type"] == "websocket":
                await send({"type": "websocket.close", "code": 1000})
            return
        await self._apps[transport](scope, receive, send)
