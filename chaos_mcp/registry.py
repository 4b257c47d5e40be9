"""
MCP Tool Registry

Single Source of Truth (SSOT) for the tool catalog.
Collects the TOOLS list of every module in chaos_mcp/tools/ once.
"""

import importlib
import logging
import pkgutil
from pathlib import Path
from typing import Dict, Optional

from .base import ToolDefinition

logger = logging.getLogger(__name__)

# Global registry
_tool_registry: Dict[str, ToolDefinition] = {}
_initialized: bool = False


def _discover_tools() -> None:
    """
    Import every module in chaos_mcp/tools/ and register its TOOLS.
    This is the ONLY place where tools are collected.
    """
    global _tool_registry, _initialized

    if _initialized:
        return

    tools_package = f"{__package__}.tools"
    tools_path = Path(__file__).parent / "tools"

    registry: Dict[str, ToolDefinition] = {}
    for _, module_name, _ in pkgutil.iter_modules([str(tools_path)]):
        if module_name.startswith("_"):
            continue

        module = importlib.import_module(f"{tools_package}.{module_name}")
        definitions = getattr(module, "TOOLS", None)
        if definitions is None:
            logger.debug(f"No tools in module: {module_name}")
            continue

        for definition in definitions:
            if definition.name in registry:
                raise ValueError(f"Duplicate tool name: {definition.name} ({module_name})")
            registry[definition.name] = definition
            logger.debug(f"Registered tool: {definition.name} ({module_name})")

    _tool_registry = registry
    _initialized = True
    logger.info(f"Tool discovery complete. Total tools: {len(_tool_registry)}")


def get_all_tools() -> Dict[str, ToolDefinition]:
    """
    Get all registered tools.
    This is the public API for accessing tools.
    """
    _discover_tools()
    return _tool_registry.copy()


def get_tool(name: str) -> Optional[ToolDefinition]:
    """
    Get a specific tool by name.
    Returns None if tool not found.
    """
    _discover_tools()
    return _tool_registry.get(name)


def reset_registry() -> None:
    """Reset the registry (mainly for testing)."""
    global _tool_registry, _initialized
    _tool_registry = {}
    _initialized = False
