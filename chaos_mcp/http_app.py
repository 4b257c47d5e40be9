"""
HTTP Tool API

FastAPI app that exposes the same catalog and dispatcher as the stdio
server, for callers that speak plain HTTP.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .base import ToolDefinition, error_result
from .config import SERVER_NAME, SERVER_VERSION
from .dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class ToolRequest(BaseModel):
    """Request body for tool execution."""

    arguments: Dict[str, Any] = {}


class ToolResponse(BaseModel):
    """Response from tool execution. Extra result fields pass through."""

    content: List[Dict[str, Any]] = []
    isError: bool = False

    model_config = {"extra": "allow"}


def _describe(tool: ToolDefinition) -> Dict[str, Any]:
    return {
        "name": tool.name,
        "description": tool.description,
        "category": tool.category,
        "parameters": [
            {
                "name": p.name,
                "type": p.type,
                "description": p.description,
                "required": p.required,
                "default": p.default,
            }
            for p in tool.parameters
        ],
    }


def create_app(dispatcher: Dispatcher) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        logger.info(f"HTTP tool API starting with {len(dispatcher.tools)} tools")
        yield
        await dispatcher.client.aclose()
        logger.info("HTTP tool API shutting down")

    app = FastAPI(
        title="Chaos Intelligence Tool API",
        description="HTTP access to the Chaos Intelligence MCP tools",
        version=SERVER_VERSION,
        lifespan=lifespan,
    )

    # ============== API Endpoints ==============

    @app.get("/")
    async def root():
        return {
            "service": SERVER_NAME,
            "version": SERVER_VERSION,
            "tools_count": len(dispatcher.tools),
            "endpoints": {
                "list_tools": "/tools",
                "tool_schema": "/tools/schema",
                "execute": "/tools/{tool_name}/execute",
                "health": "/health",
            },
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy", "tools_loaded": len(dispatcher.tools)}

    @app.get("/tools")
    async def list_tools():
        tools = dispatcher.list_tools()
        return {
            "total": len(tools),
            "tools": [_describe(tool) for tool in tools],
        }

    @app.get("/tools/schema")
    async def get_tools_schema():
        return {"tools": [tool.to_mcp_schema() for tool in dispatcher.list_tools()]}

    @app.get("/tools/{tool_name}")
    async def get_tool_info(tool_name: str):
        tool = dispatcher.get_tool(tool_name)
        if tool is None:
            raise HTTPException(status_code=404, detail=f"Tool not found: {tool_name}")
        return _describe(tool)

    @app.post("/tools/{tool_name}/execute", response_model=ToolResponse)
    async def execute_tool_endpoint(tool_name: str, request: ToolRequest):
        result = await dispatcher.call(tool_name, request.arguments)
        try:
            return ToolResponse.model_validate(result)
        except PydanticValidationError:
            logger.error(f"Result from {tool_name} does not match the tool result shape")
            return ToolResponse.model_validate(error_result("Invalid tool result from API"))

    return app
