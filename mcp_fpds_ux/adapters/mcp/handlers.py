"""
MCP Tool Handlers

Shared handlers for MCP tools that use the hexagonal core.
"""
import asyncio
from typing import Any, Mapping, Optional, Union

from ...container import Container

Number = Union[int, float, str]


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container

    async def search_contracts(
        self,
        naics: Optional[str] = None,
        agency: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        set_aside: Optional[str] = None,
        min_value: Optional[Number] = None,
        max_value: Optional[Number] = None
    ) -> dict[str, Any]:
        """Search FPDS with typed filters"""
        return await self.search_contracts_raw({
            "naics": naics,
            "agency": agency,
            "start_date": start_date,
            "end_date": end_date,
            "set_aside": set_aside,
            "min_value": min_value,
            "max_value": max_value,
        })

    async def search_contracts_raw(self, params: Mapping[str, Any]) -> dict[str, Any]:
        """Search FPDS with raw request parameters, return the envelope as a dict"""
        try:
            envelope = await asyncio.to_thread(
                self.container.search_contracts.execute,
                params
            )
            return envelope.to_dict()

        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to search contracts: {str(e)}"
            }
