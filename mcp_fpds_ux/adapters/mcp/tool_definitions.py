"""
MCP Tool Definitions

Single source of truth for tool schemas and descriptions.
Used by both stdio and HTTP/SSE servers.
"""

# Tool schemas for MCP
TOOL_SCHEMAS = {
    "search_contracts": {
        "name": "search_contracts",
        "description": """Search FPDS (Federal Procurement Data System) for awarded federal contracts.

search_contracts(naics="541511") → contracts in NAICS 541511 modified in the last year
search_contracts(agency="9700", start_date="2024-01-01", end_date="2024-12-31")
search_contracts(set_aside="SBA", min_value=100000) → small business set-asides over $100K

Returns one feed page (up to 10 contracts) with PIID, vendor, agency, amounts, dates, NAICS/PSC.
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "naics": {
                    "type": "string",
                    "description": "Principal NAICS code (e.g. 541511)"
                },
                "agency": {
                    "type": "string",
                    "description": "Contracting agency ID (e.g. 9700 for DoD, 7000 for DHS)"
                },
                "start_date": {
                    "type": "string",
                    "description": "Last-modified on or after (YYYY-MM-DD). Defaults to one year ago."
                },
                "end_date": {
                    "type": "string",
                    "description": "Last-modified on or before (YYYY-MM-DD). Defaults to today."
                },
                "set_aside": {
                    "type": "string",
                    "description": "Type of set-aside code (e.g. SBA, 8A, SDVOSBC, WOSB)"
                },
                "min_value": {
                    "type": "number",
                    "description": "Minimum obligated amount in dollars"
                },
                "max_value": {
                    "type": "number",
                    "description": "Maximum obligated amount in dollars"
                }
            },
            "required": []
        }
    }
}
