"""
Tests for the HTTP tool API.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from chaos_mcp.dispatcher import Dispatcher
from chaos_mcp.http_app import create_app

PAGE_ID = "0c9e1a2b-3d4e-4f5a-8b6c-7d8e9f0a1b2c"


@pytest.fixture
def fake_client():
    client = AsyncMock()
    client.call_tool.return_value = {"content": [{"type": "text", "text": "page body"}]}
    return client


@pytest.fixture
def http(fake_client):
    with TestClient(create_app(Dispatcher(fake_client))) as client:
        yield client


class TestToolEndpoints:
    """Test catalog listing endpoints."""

    def test_health(self, http):
        response = http.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "tools_loaded": 25}

    def test_root(self, http):
        data = http.get("/").json()
        assert data["service"] == "chaos-intelligence"
        assert data["tools_count"] == 25

    def test_list_tools(self, http):
        data = http.get("/tools").json()
        assert data["total"] == 25
        names = {tool["name"] for tool in data["tools"]}
        assert "get_topic_clusters" in names

    def test_schema(self, http):
        tools = http.get("/tools/schema").json()["tools"]
        by_name = {tool["name"]: tool for tool in tools}
        assert by_name["update_page"]["inputSchema"]["required"] == ["page_id"]

    def test_tool_info(self, http):
        data = http.get("/tools/search_pages").json()
        assert data["category"] == "pages"
        params = {p["name"]: p for p in data["parameters"]}
        assert params["query"]["required"] is True
        assert params["limit"]["default"] == 10

    def test_unknown_tool_info(self, http):
        response = http.get("/tools/nope")
        assert response.status_code == 404


class TestExecute:
    """Test tool execution over HTTP."""

    def test_execute(self, http, fake_client):
        response = http.post(
            "/tools/get_page/execute",
            json={"arguments": {"page_id": PAGE_ID}},
        )

        assert response.status_code == 200
        assert response.json() == {
            "content": [{"type": "text", "text": "page body"}],
            "isError": False,
        }
        fake_client.call_tool.assert_awaited_once_with("get_page", {"page_id": PAGE_ID})

    def test_execute_invalid(self, http, fake_client):
        response = http.post(
            "/tools/get_page/execute",
            json={"arguments": {"page_id": "page-1"}},
        )

        assert response.status_code == 200
        assert response.json()["isError"] is True
        fake_client.call_tool.assert_not_awaited()

    def test_execute_unknown(self, http):
        data = http.post("/tools/nope/execute", json={"arguments": {}}).json()
        assert data["isError"] is True
        assert data["content"][0]["text"] == "Unknown tool: nope"

    @pytest.mark.parametrize("remote", [{"content": "oops"}, {"content": [1, 2]}])
    def test_execute_malformed_remote_result(self, http, fake_client, remote):
        """Test a result that is not tool-result shaped still comes back as a result."""
        fake_client.call_tool.return_value = remote

        response = http.post("/tools/get_stats/execute", json={"arguments": {}})

        assert response.status_code == 200
        assert response.json() == {
            "content": [{"type": "text", "text": "Invalid tool result from API"}],
            "isError": True,
        }

    def test_execute_passes_extra_fields(self, http, fake_client):
        fake_client.call_tool.return_value = {
            "content": [{"type": "text", "text": "ok"}],
            "structuredContent": {"count": 3},
        }

        data = http.post("/tools/get_stats/execute", json={"arguments": {}}).json()

        assert data["structuredContent"] == {"count": 3}
        assert data["isError"] is False

    def test_client_closed_on_shutdown(self, fake_client):
        with TestClient(create_app(Dispatcher(fake_client))):
            pass
        fake_client.aclose.assert_awaited_once()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
