"""FPDS contract feed proxy: MCP tools, HTTP endpoint and CLI."""

__version__ = "0.1.0"
