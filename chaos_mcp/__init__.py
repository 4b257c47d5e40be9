"""
Chaos Intelligence MCP proxy

Exposes the Chaos Intelligence tool catalog over MCP and forwards each call
to the hosted service. The catalog is auto-discovered via registry.py.
"""

from .base import ToolDefinition, ToolParameter
from .client import ChaosApiClient
from .dispatcher import Dispatcher
from .registry import get_all_tools, get_tool

__all__ = [
    "ChaosApiClient",
    "Dispatcher",
    "ToolDefinition",
    "ToolParameter",
    "get_all_tools",
    "get_tool",
]
