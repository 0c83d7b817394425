"""
fpds-ux MCP Server

MCP delivery layer - wraps the search_contracts use case as an MCP tool.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .config import get_mcp_host, get_mcp_port
from .container import Container
from .adapters.mcp import MCPHandlers

# Suppress per-request INFO logs from httpx
logging.getLogger("httpx").setLevel(logging.WARNING)

# streamable-http bind address (FPDS_UX_HTTP_HOST / FPDS_UX_HTTP_PORT)
HTTP_PORT = get_mcp_port()
HTTP_HOST = get_mcp_host()

# Initialize MCP server with HTTP config
mcp = FastMCP("fpds-ux", host=HTTP_HOST, port=HTTP_PORT)

container = Container()
handlers = MCPHandlers(container)


@mcp.tool()
async def search_contracts(
    naics: Optional[str] = None,
    agency: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    set_aside: Optional[str] = None,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None
) -> dict:
    """
    Search FPDS for awarded federal contracts.

    All filters are optional. Without dates, searches contracts modified
    in the last year.

    Args:
        naics: Principal NAICS code (e.g., "541511")
        agency: Contracting agency ID (e.g., "9700" for DoD)
        start_date: Last modified on or after (YYYY-MM-DD)
        end_date: Last modified on or before (YYYY-MM-DD)
        set_aside: Type of set-aside code (e.g., "SBA", "8A")
        min_value: Minimum obligated amount in dollars
        max_value: Maximum obligated amount in dollars

    Returns:
        {success, count, data: [contract, ...], query} or {success: False, error, ...}

    Example:
        search_contracts(naics="541511")
        → {success: True, count: 10, data: [{piid: "W91QUZ24F0123", vendorName: ...}], query: ...}
    """
    return await handlers.search_contracts(
        naics=naics,
        agency=agency,
        start_date=start_date,
        end_date=end_date,
        set_aside=set_aside,
        min_value=min_value,
        max_value=max_value
    )


def main():
    """Main entry point for the MCP server."""
    parser = argparse.ArgumentParser(
        description="fpds-ux: Federal contract awards from FPDS, as an MCP server."
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http"],
        help="Transport method (default: stdio)"
    )
    args = parser.parse_args()

    # Run the server
    if args.transport == "streamable-http":
        print(f"Starting fpds-ux on http://{HTTP_HOST}:{HTTP_PORT}")
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
