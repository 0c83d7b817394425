#!/usr/bin/env python3
"""
FPDS HTTP Server - Hexagonal Architecture

Browser-facing JSON proxy for the FPDS contract feed, plus MCP over SSE.

Run with: uvicorn mcp_fpds_ux.server_http:app --host 127.0.0.1 --port 5003

Routes:
- GET /api/fpds?naics=&agency=&startDate=&endDate=&setAside=&minValue=&maxValue=
- OPTIONS /api/fpds (CORS preflight)
- GET /ping (health check)
- GET /sse, POST /messages (MCP)

Configuration: see config.py (PORT, HOST, FPDS_* variables)
"""

import contextlib
import logging
import signal
from datetime import datetime, timezone
from typing import Any

from mcp.server import Server
from mcp.server.sse import SseServerTransport
from mcp.types import TextContent, Tool
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from .config import get_host, get_port
from .container import Container
from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .formatters import format_search_contracts

# Configure logging with millisecond precision
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] %(message)s",
    datefmt="%Y/%m/%d %H:%M:%S"
)


class MillisecondFormatter(logging.Formatter):
    """Custom formatter with milliseconds as :XXXX format"""
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Override formatTime to include milliseconds with : separator"""
        ct = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            s = ct.strftime("%Y/%m/%d %H:%M:%S")
            ms = int((record.created % 1) * 10000)
            return f"{s}:{ms:04d}"
        return super().formatTime(record, datefmt)


# Apply custom formatter to root logger
for handler in logging.root.handlers:
    handler.setFormatter(MillisecondFormatter(
        "[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S"
    ))

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
}

# Initialize dependency injection container
container = Container()

# Initialize MCP handlers
handlers = MCPHandlers(container)

# MCP Server instance
mcp_server = Server("fpds-ux-mcp")

# SSE transport for multi-client support
sse_transport = SseServerTransport("/messages")


@mcp_server.list_tools()  # type: ignore[misc,no-untyped-call]
async def list_tools() -> list[Tool]:
    """List available MCP tools"""
    return [Tool(**schema) for schema in TOOL_SCHEMAS.values()]


@mcp_server.call_tool()  # type: ignore[misc,no-untyped-call]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls"""
    logger.info(f"call_tool: {name} args={arguments}")

    if name != "search_contracts":
        raise ValueError(f"Unknown tool: {name}")

    try:
        result = await handlers.search_contracts(**arguments)
    except Exception as e:
        logger.error(f"call_tool: {name} FAILED: {e}")
        raise

    formatted_text = format_search_contracts(result)
    logger.info(f"call_tool: {name} returning {len(formatted_text)} chars")
    return [TextContent(type="text", text=formatted_text)]


# HTTP routes
async def handle_ping(request: Request) -> Response:
    """Health check endpoint"""
    return JSONResponse({"status": "ok"})


async def handle_fpds(request: Request) -> Response:
    """FPDS contract search for browser clients"""
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    params = dict(request.query_params)
    logger.info(f"GET /api/fpds params={params}")

    envelope = await handlers.search_contracts_raw(params)
    status_code = 200
    if not envelope.get("success") and container.settings.strict_errors:
        status_code = 500

    return JSONResponse(envelope, status_code=status_code, headers=CORS_HEADERS)


async def handle_sse(request: Request) -> Response:
    """SSE endpoint for MCP communication"""
    client_addr = request.client.host if request.client else "unknown"
    logger.info(f"SSE connect from {client_addr}")
    async with sse_transport.connect_sse(
        request.scope, request.receive, request._send
    ) as streams:
        logger.info(f"SSE session started for {client_addr}")
        await mcp_server.run(
            streams[0], streams[1], mcp_server.create_initialization_options()
        )
        logger.info(f"SSE disconnect from {client_addr}")
    return Response()


@contextlib.asynccontextmanager
async def lifespan(app: Starlette):
    yield
    container.close()


routes = [
    Route("/ping", handle_ping),
    Route("/api/fpds", handle_fpds, methods=["GET", "OPTIONS"]),
    Route("/sse", handle_sse),
    Mount("/messages", app=sse_transport.handle_post_message),
]

app = Starlette(routes=routes, lifespan=lifespan)


# Graceful shutdown on SIGTERM
def handle_sigterm(signum, frame):
    logger.info("Received SIGTERM, shutting down gracefully...")
    import sys
    sys.exit(0)


if __name__ == "__main__":
    import uvicorn
    signal.signal(signal.SIGTERM, handle_sigterm)
    port = get_port()
    logger.info(f"Starting FPDS HTTP server on port {port}")
    uvicorn.run(app, host=get_host(), port=port)
