"""
Tests for configuration, process bootstrap and the MCP server handlers.
"""

from unittest.mock import AsyncMock, patch

import pytest
from mcp import types

from chaos_mcp.base import ConfigurationError
from chaos_mcp.config import API_ENDPOINT, Settings, validate_api_key
from chaos_mcp.dispatcher import Dispatcher
from chaos_mcp.server import build_server, main, to_call_tool_result

VALID_KEY = "chaos_" + "Z9y8X7w6" * 4


class TestApiKey:
    """Test credential format checks."""

    def test_valid_key(self):
        assert validate_api_key(VALID_KEY) == VALID_KEY

    @pytest.mark.parametrize(
        "key",
        [
            "chaos_" + "a" * 31,
            "chaos_" + "a" * 33,
            "chaoz_" + "a" * 32,
            "CHAOS_" + "a" * 32,
            "chaos_" + "a" * 31 + "-",
            VALID_KEY + "\n",
            " " + VALID_KEY,
        ],
    )
    def test_malformed_key(self, key):
        with pytest.raises(ConfigurationError) as exc:
            validate_api_key(key)
        assert "invalid format" in exc.value.message

    @pytest.mark.parametrize("key", [None, ""])
    def test_missing_key(self, key):
        with pytest.raises(ConfigurationError) as exc:
            validate_api_key(key)
        assert exc.value.message == "CHAOS_API_KEY environment variable is required."
        assert "settings/api" in exc.value.details["hint"]


class TestSettings:
    """Test Settings.from_env."""

    def test_defaults(self):
        settings = Settings.from_env({"CHAOS_API_KEY": VALID_KEY})
        assert settings.api_key == VALID_KEY
        assert settings.api_url == API_ENDPOINT
        assert settings.log_level == "INFO"

    def test_overrides(self):
        settings = Settings.from_env({
            "CHAOS_API_KEY": VALID_KEY,
            "CHAOS_API_URL": "http://localhost:54321/functions/v1/chaos-mcp-server",
            "CHAOS_LOG_LEVEL": "debug",
        })
        assert settings.api_url == "http://localhost:54321/functions/v1/chaos-mcp-server"
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("level", ["verbose", "10", "INF"])
    def test_unknown_log_level(self, level):
        with pytest.raises(ConfigurationError) as exc:
            Settings.from_env({"CHAOS_API_KEY": VALID_KEY, "CHAOS_LOG_LEVEL": level})
        assert "CHAOS_LOG_LEVEL" in exc.value.message

    def test_repr_hides_key(self):
        assert VALID_KEY not in repr(Settings.from_env({"CHAOS_API_KEY": VALID_KEY}))


class TestBootstrap:
    """Test main() exits before serving when the key is bad."""

    @pytest.fixture(autouse=True)
    def no_dotenv(self):
        with patch("chaos_mcp.config.load_dotenv"):
            yield

    @pytest.mark.parametrize("key", [None, "chaos_short"])
    def test_bad_key_exits_nonzero(self, monkeypatch, key):
        if key is None:
            monkeypatch.delenv("CHAOS_API_KEY", raising=False)
        else:
            monkeypatch.setenv("CHAOS_API_KEY", key)

        with patch("chaos_mcp.server.serve_stdio", new_callable=AsyncMock) as serve:
            with pytest.raises(SystemExit) as exc:
                main([])

        assert exc.value.code == 1
        serve.assert_not_called()

    def test_bad_log_level_exits_nonzero(self, monkeypatch):
        monkeypatch.setenv("CHAOS_API_KEY", VALID_KEY)
        monkeypatch.setenv("CHAOS_LOG_LEVEL", "chatty")

        with patch("chaos_mcp.server.serve_stdio", new_callable=AsyncMock) as serve:
            with pytest.raises(SystemExit) as exc:
                main([])

        assert exc.value.code == 1
        serve.assert_not_called()

    def test_valid_key_serves_stdio(self, monkeypatch):
        monkeypatch.setenv("CHAOS_API_KEY", VALID_KEY)

        with patch("chaos_mcp.server.serve_stdio", new_callable=AsyncMock) as serve:
            main([])

        serve.assert_awaited_once()
        settings = serve.await_args.args[0]
        assert settings.api_key == VALID_KEY

    def test_http_flag(self, monkeypatch):
        monkeypatch.setenv("CHAOS_API_KEY", VALID_KEY)

        with patch("chaos_mcp.server.serve_http") as serve:
            main(["--http", "--port", "9000"])

        serve.assert_called_once()
        assert serve.call_args.args[1:] == ("127.0.0.1", 9000)


class TestCallToolResult:
    """Test conversion into the SDK result type."""

    def test_absent_is_error_reads_false(self):
        result = to_call_tool_result({"content": [{"type": "text", "text": "42 thoughts"}]})
        assert result.isError is False
        assert result.content[0].text == "42 thoughts"

    def test_error_kept(self):
        result = to_call_tool_result(
            {"content": [{"type": "text", "text": "not found"}], "isError": True}
        )
        assert result.isError is True

    def test_malformed_result(self):
        result = to_call_tool_result({"content": "not a list"})
        assert result.isError is True
        assert result.content[0].text == "Invalid tool result from API"


class TestMcpHandlers:
    """Test the handlers registered on the MCP low-level server."""

    @pytest.fixture
    def fake_client(self):
        client = AsyncMock()
        client.call_tool.return_value = {"content": [{"type": "text", "text": "3 streams"}]}
        return client

    @pytest.fixture
    def server(self, fake_client):
        return build_server(Dispatcher(fake_client))

    @pytest.mark.asyncio
    async def test_list_tools(self, server):
        handler = server.request_handlers[types.ListToolsRequest]
        response = await handler(types.ListToolsRequest(method="tools/list"))

        tools = {tool.name: tool for tool in response.root.tools}
        assert len(tools) == 25
        assert tools["get_page"].inputSchema["required"] == ["page_id"]

    @pytest.mark.asyncio
    async def test_call_tool(self, server, fake_client):
        handler = server.request_handlers[types.CallToolRequest]
        request = types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="search_streams", arguments={"query": "work"}),
        )
        response = await handler(request)

        assert response.root.isError is False
        assert response.root.content[0].text == "3 streams"
        fake_client.call_tool.assert_awaited_once_with("search_streams", {"query": "work"})

    @pytest.mark.asyncio
    async def test_call_tool_validation_failure(self, server, fake_client):
        handler = server.request_handlers[types.CallToolRequest]
        request = types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="search_streams", arguments={"limit": 500}),
        )
        response = await handler(request)

        assert response.root.isError is True
        assert "search_streams" in response.root.content[0].text
        fake_client.call_tool.assert_not_awaited()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
