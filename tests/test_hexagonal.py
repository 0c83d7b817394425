"""
Minimal tests for hexagonal architecture

Basic smoke tests to verify the architecture works.
"""
import asyncio
from unittest.mock import patch

from mcp_fpds_ux.config import Settings
from mcp_fpds_ux.container import Container
from mcp_fpds_ux.core.domain import ContractRecord, ResponseEnvelope
from mcp_fpds_ux.adapters.mcp import TOOL_SCHEMAS, MCPHandlers

from feeds import FakeFetcher


class TestDomainModels:
    """Test domain models are simple dataclasses."""

    def test_contract_record_defaults(self):
        record = ContractRecord()
        assert record.piid is None
        assert record.obligated_amount == 0.0
        assert not record.has_content()

    def test_contract_record_wire_keys(self):
        record = ContractRecord(piid="ABC123", vendor_uei="UEI1", base_and_all_options=10.0)
        result = record.to_dict()
        assert result["piid"] == "ABC123"
        assert result["vendorUEI"] == "UEI1"
        assert result["baseAndAllOptions"] == 10.0
        assert result["description"] is None
        assert len(result) == 16

    def test_envelope_ok(self):
        envelope = ResponseEnvelope.ok([ContractRecord(piid="A")], "*")
        assert envelope.to_dict() == {
            "success": True,
            "count": 1,
            "data": [ContractRecord(piid="A").to_dict()],
            "query": "*",
        }


class TestContainer:
    """Test dependency injection container."""

    def test_container_creates_all_services(self):
        container = Container(settings=Settings(), fetcher=FakeFetcher())

        assert container.fetcher is not None
        assert container.query_builder is not None
        assert container.assembler is not None
        assert container.search_contracts is not None

    def test_settings_flow_into_service(self):
        settings = Settings(feed_url="http://localhost/atom", user_agent="ua", timeout=3.0, default_window_days=0)
        container = Container(settings=settings, fetcher=FakeFetcher())

        assert container.search_contracts.feed_url == "http://localhost/atom"
        assert container.search_contracts.user_agent == "ua"
        assert container.search_contracts.timeout == 3.0
        assert container.query_builder.default_window_days == 0

    def test_default_fetcher_is_httpx(self):
        from mcp_fpds_ux.adapters import HttpxFeedFetcher

        container = Container(settings=Settings())
        try:
            assert isinstance(container.fetcher, HttpxFeedFetcher)
        finally:
            container.close()

    def test_close(self):
        fetcher = FakeFetcher()
        Container(settings=Settings(), fetcher=fetcher).close()
        assert fetcher.closed


class TestMCPHandlers:
    """Test MCP handlers use the container."""

    def test_handlers_initialization(self):
        container = Container(settings=Settings(), fetcher=FakeFetcher())
        handlers = MCPHandlers(container)

        assert handlers.container is container

    def test_search_contracts(self, army_feed):
        fetcher = FakeFetcher(body=army_feed)
        handlers = MCPHandlers(Container(settings=Settings(), fetcher=fetcher))

        result = asyncio.run(handlers.search_contracts(naics="541519", min_value=100000.0))

        assert result["success"] is True
        assert result["count"] == 1
        assert 'PRINCIPAL_NAICS_CODE:"541519"' in result["query"]
        assert "OBLIGATED_AMOUNT:[100000,*]" in result["query"]

    def test_search_contracts_raw(self, army_feed):
        handlers = MCPHandlers(Container(settings=Settings(), fetcher=FakeFetcher(body=army_feed)))

        result = asyncio.run(handlers.search_contracts_raw({"startDate": "2024-01-01", "endDate": "2024-06-30"}))

        assert result["query"] == "LAST_MOD_DATE:[2024/01/01,2024/06/30]"

    def test_error_handling(self):
        container = Container(settings=Settings(), fetcher=FakeFetcher())
        handlers = MCPHandlers(container)

        with patch.object(container.search_contracts, "execute", side_effect=Exception("Network error")):
            result = asyncio.run(handlers.search_contracts(naics="541511"))

        assert result["success"] is False
        assert "Network error" in result["error"]


class TestToolSchemas:
    """Test MCP tool definitions."""

    def test_search_contracts_schema(self):
        schema = TOOL_SCHEMAS["search_contracts"]
        properties = schema["inputSchema"]["properties"]

        assert schema["name"] == "search_contracts"
        assert set(properties) == {
            "naics", "agency", "start_date", "end_date", "set_aside", "min_value", "max_value"
        }
        assert schema["inputSchema"]["required"] == []
