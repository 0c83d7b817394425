"""
Tests for the Starlette HTTP app

Drives /api/fpds through TestClient with the feed fetcher swapped for a fake.
"""
import pytest
from starlette.testclient import TestClient

from mcp_fpds_ux import server_http
from mcp_fpds_ux.config import Settings
from mcp_fpds_ux.core.errors import TransportTimeout, UpstreamHttpError

from feeds import FakeFetcher


@pytest.fixture
def client():
    return TestClient(server_http.app)


@pytest.fixture
def use_fetcher(monkeypatch):
    def _use(fetcher: FakeFetcher) -> FakeFetcher:
        monkeypatch.setattr(server_http.container.search_contracts, "fetcher", fetcher)
        return fetcher
    return _use


class TestFpdsEndpoint:
    """Test GET/OPTIONS /api/fpds."""

    def test_preflight(self, client):
        response = client.options("/api/fpds")

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-methods"] == "GET, OPTIONS"
        assert response.headers["access-control-allow-headers"] == "Content-Type"

    def test_search(self, client, use_fetcher, army_feed):
        fetcher = use_fetcher(FakeFetcher(body=army_feed))

        response = client.get("/api/fpds", params={"naics": "541519"})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        body = response.json()
        assert body["success"] is True
        assert body["count"] == 1
        assert body["data"][0]["piid"] == "W91QUZ24C0001"
        assert body["data"][0]["agencyName"] == "DEPT OF THE ARMY"
        assert 'PRINCIPAL_NAICS_CODE:"541519"' in body["query"]
        assert len(fetcher.calls) == 1

    def test_camel_case_date_params(self, client, use_fetcher, army_feed):
        use_fetcher(FakeFetcher(body=army_feed))

        response = client.get("/api/fpds", params={"startDate": "2024-01-01", "endDate": "2024-06-30"})

        assert response.json()["query"] == "LAST_MOD_DATE:[2024/01/01,2024/06/30]"

    def test_non_numeric_amount_not_forwarded(self, client, use_fetcher, army_feed):
        fetcher = use_fetcher(FakeFetcher(body=army_feed))

        response = client.get("/api/fpds", params={"minValue": '1] PIID:"X" OBLIGATED_AMOUNT:[0'})

        assert response.json()["success"] is True
        assert "PIID" not in response.json()["query"]
        assert "PIID" not in fetcher.calls[0][0]

    def test_failure_is_200_by_default(self, client, use_fetcher, monkeypatch):
        monkeypatch.setattr(server_http.container, "settings", Settings(strict_errors=False))
        use_fetcher(FakeFetcher(error=UpstreamHttpError(502, "Bad Gateway")))

        response = client.get("/api/fpds")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "FPDS returned status 502"
        assert body["details"] == "Bad Gateway"

    def test_failure_is_500_in_strict_mode(self, client, use_fetcher, monkeypatch):
        monkeypatch.setattr(server_http.container, "settings", Settings(strict_errors=True))
        use_fetcher(FakeFetcher(error=TransportTimeout(15.0)))

        response = client.get("/api/fpds")

        assert response.status_code == 500
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.json()["error"] == "FPDS request timed out after 15 seconds"

    def test_success_is_200_in_strict_mode(self, client, use_fetcher, monkeypatch, army_feed):
        monkeypatch.setattr(server_http.container, "settings", Settings(strict_errors=True))
        use_fetcher(FakeFetcher(body=army_feed))

        assert client.get("/api/fpds").status_code == 200


class TestPing:
    """Test health check."""

    def test_ping(self, client):
        response = client.get("/ping")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
