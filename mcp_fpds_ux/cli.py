#!/usr/bin/env python3
"""
CLI for fpds-ux MCP - test tools without MCP restart

Usage:
  ./cli list-tools                                  # Show MCP tool definitions
  ./cli search --naics 541511                       # Contracts for a NAICS code (last year)
  ./cli search --agency 9700 --start-date 2024-01-01 --end-date 2024-12-31
  ./cli search --set-aside SBA --min-value 100000   # Small business set-asides over $100K
  ./cli search --naics 541511 --json                # Raw response envelope

Fast iteration: Uses hexagonal core directly (no MCP layer)
"""

import argparse
import asyncio
import json
import sys

from .container import Container
from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .formatters import format_search_contracts


async def list_tools_command() -> int:
    """Show MCP tool definitions"""
    print("=" * 80)
    print("MCP TOOL DEFINITIONS")
    print("=" * 80)
    print()

    for tool_name, tool_schema in TOOL_SCHEMAS.items():
        print(f"Tool: {tool_schema['name']}")
        print(f"Claude sees: mcp__fpds-ux__{tool_schema['name']}")
        print()
        print("Description:")
        print(tool_schema['description'])
        print()
        print("Input Schema:")
        print(json.dumps(tool_schema['inputSchema'], indent=2))
        print()
        print("-" * 80)
        print()

    return 0


async def search_command(
    naics: str | None,
    agency: str | None,
    start_date: str | None,
    end_date: str | None,
    set_aside: str | None,
    min_value: float | None,
    max_value: float | None,
    as_json: bool,
) -> int:
    """Search FPDS contracts"""
    container = None
    try:
        # Initialize container
        container = Container()
        handlers = MCPHandlers(container)

        # Call handler
        result = await handlers.search_contracts(
            naics=naics,
            agency=agency,
            start_date=start_date,
            end_date=end_date,
            set_aside=set_aside,
            min_value=min_value,
            max_value=max_value
        )

        if as_json:
            print(json.dumps(result, indent=2))
        else:
            # Use BBG Lite formatter
            print(format_search_contracts(result))

        if not result["success"]:
            return 1

        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1
    finally:
        if container is not None:
            container.close()


def main():
    parser = argparse.ArgumentParser(
        description="fpds-ux CLI - Test MCP tools without server restart"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # list-tools command
    subparsers.add_parser("list-tools", help="Show MCP tool definitions")

    # search command
    search_parser = subparsers.add_parser("search", help="Search FPDS contracts")
    search_parser.add_argument("--naics", help="Principal NAICS code (e.g., 541511)")
    search_parser.add_argument("--agency", help="Contracting agency ID (e.g., 9700)")
    search_parser.add_argument("--start-date", help="Last modified on or after (YYYY-MM-DD)")
    search_parser.add_argument("--end-date", help="Last modified on or before (YYYY-MM-DD)")
    search_parser.add_argument("--set-aside", help="Type of set-aside (e.g., SBA, 8A)")
    search_parser.add_argument("--min-value", type=float, help="Minimum obligated amount")
    search_parser.add_argument("--max-value", type=float, help="Maximum obligated amount")
    search_parser.add_argument("--json", action="store_true", help="Print the raw JSON envelope")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    # Run command
    if args.command == "list-tools":
        return asyncio.run(list_tools_command())
    elif args.command == "search":
        return asyncio.run(search_command(
            naics=args.naics,
            agency=args.agency,
            start_date=args.start_date,
            end_date=args.end_date,
            set_aside=args.set_aside,
            min_value=args.min_value,
            max_value=args.max_value,
            as_json=args.json
        ))
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
