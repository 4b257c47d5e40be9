"""
Tool Dispatcher

Binds every catalog entry to the shared ChaosApiClient. Arguments are
validated locally first; invalid calls never reach the network.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from .base import ToolDefinition, ValidationError, error_result
from .client import ChaosApiClient
from .registry import get_all_tools

logger = logging.getLogger(__name__)

Handler = Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]


class Dispatcher:
    """
    Routes tool invocations by name.

    Holds the catalog and one client; nothing else.
    """

    def __init__(
        self,
        client: ChaosApiClient,
        tools: Optional[Dict[str, ToolDefinition]] = None,
    ) -> None:
        self.client = client
        self.tools = dict(tools) if tools is not None else get_all_tools()
        self._handlers: Dict[str, Handler] = {
            name: self._bind(definition) for name, definition in self.tools.items()
        }

    def _bind(self, definition: ToolDefinition) -> Handler:
        async def handler(arguments: Dict[str, Any]) -> Dict[str, Any]:
            try:
                validated = definition.validate(arguments)
            except ValidationError as e:
                logger.error(f"Validation error in {definition.name}: {e.message}")
                return error_result(e.message)
            return await self.client.call_tool(definition.name, validated)

        return handler

    def list_tools(self) -> List[ToolDefinition]:
        return list(self.tools.values())

    def get_tool(self, name: str) -> Optional[ToolDefinition]:
        return self.tools.get(name)

    async def call(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Invoke a tool by name. Always returns a result dict."""
        handler = self._handlers.get(name)
        if handler is None:
            logger.error(f"Unknown tool: {name}")
            return error_result(f"Unknown tool: {name}")
        return await handler(arguments or {})
