"""FastAPI host app serving the MCP transports for the MCP4VAPI tool server."""

# Load .env FIRST so LANGCHAIN_* / webhook variables are visible when the
# tool modules (and their @traceable decorators) are imported.
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastmcp import FastMCP
from fastmcp.server.http import create_sse_app

from src.mcp_server.server import mcp
from src.utils.config import get_settings
from src.utils.logging import get_logger
from src.web_app.router import MCP_PATH, SSE_MESSAGE_PATH, SSE_PATH, TransportRouter

logger = get_logger(__name__)


def create_app(server: FastMCP = mcp) -> FastAPI:
    """
    Build the ASGI app exposing *server* over both MCP transports.

    The streamable-HTTP app owns the session manager, so its lifespan becomes
    the host app's lifespan.  Every request is handed to
    :class:`TransportRouter`, which answers unknown paths with a 404.
    """
    http_app = server.http_app(path=MCP_PATH)
    sse_app = create_sse_app(
        server=server,
        message_path=SSE_MESSAGE_PATH + "/",
        sse_path=SSE_PATH,
    )

    app = FastAPI(
        title="MCP4VAPI",
        description="MCP tool server: time, random numbers, web/news search and weather.",
        version=get_settings().server_version,
        lifespan=http_app.lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.mount("/", TransportRouter(sse_app=sse_app, http_app=http_app))
    return app


app = create_app()


def run() -> None:
    """Serve :data:`app` with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    logger.info(
        "Serving MCP on http://%s:%d (SSE %s, HTTP %s)",
        settings.host, settings.port, SSE_PATH, MCP_PATH,
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# ── Entry point ────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    run()
