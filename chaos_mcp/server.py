#!/usr/bin/env python3
"""
MCP Server Entrypoint

Serves the Chaos Intelligence tool catalog over MCP stdio (default) or the
HTTP tool API (--http). Every call is proxied to the hosted service.
"""

import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError as PydanticValidationError

from .base import ConfigurationError, error_result
from .client import ChaosApiClient
from .config import SERVER_NAME, SERVER_VERSION, Settings
from .dispatcher import Dispatcher

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    # stdout carries the MCP stream; logs go to stderr
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def to_call_tool_result(result: Dict[str, Any]) -> types.CallToolResult:
    """Convert a normalized result dict into the SDK's CallToolResult."""
    try:
        return types.CallToolResult.model_validate(result)
    except PydanticValidationError:
        logger.error("Remote result does not match the CallToolResult shape")
        return types.CallToolResult.model_validate(
            error_result("Invalid tool result from API")
        )


def build_server(dispatcher: Dispatcher) -> Server:
    """Register the dispatcher's catalog with an MCP low-level server."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool.model_validate(definition.to_mcp_schema())
            for definition in dispatcher.list_tools()
        ]

    # Arguments are validated by the dispatcher, not by the SDK's jsonschema pass
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
        result = await dispatcher.call(name, arguments)
        return to_call_tool_result(result)

    return server


def load_settings() -> Settings:
    """Read settings or exit the process with guidance."""
    try:
        return Settings.from_env()
    except ConfigurationError as e:
        logger.error(f"Error: {e.message}")
        if e.details.get("hint"):
            logger.error(e.details["hint"])
        sys.exit(1)


async def serve_stdio(settings: Settings) -> None:
    async with ChaosApiClient(settings.api_key, endpoint=settings.api_url) as client:
        dispatcher = Dispatcher(client)
        server = build_server(dispatcher)
        logger.info(f"MCP Server starting with {len(dispatcher.tools)} tools")

        async with stdio_server() as (read_stream, write_stream):
            logger.info("Chaos Intelligence MCP server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def serve_http(settings: Settings, host: str, port: int) -> None:
    import uvicorn

    from .http_app import create_app

    client = ChaosApiClient(settings.api_key, endpoint=settings.api_url)
    app = create_app(Dispatcher(client))
    uvicorn.run(app, host=host, port=port)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="chaos-mcp",
        description="Chaos Intelligence MCP server",
    )
    parser.add_argument("--http", action="store_true", help="serve the HTTP tool API instead of stdio")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging()
    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)

    if args.http:
        serve_http(settings, args.host, args.port)
    else:
        asyncio.run(serve_stdio(settings))


if __name__ == "__main__":
    main()
