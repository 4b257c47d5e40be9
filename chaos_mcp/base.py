"""
MCP Tool Base Classes

Declarative tool definitions, local argument validation, and the shared
error types used by every layer of the proxy.
"""

import functools
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Type

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, create_model
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)

UUID_PATTERN = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


class MCPToolError(Exception):
    """Base exception for MCP tool errors."""
    def __init__(self, message: str, tool_name: str = None, details: Dict = None):
        self.message = message
        self.tool_name = tool_name
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(MCPToolError):
    """Raised when tool input validation fails."""
    pass


class ConfigurationError(MCPToolError):
    """Raised when the process cannot be configured (missing or bad credential)."""
    pass


DATETIME_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})"
)


def _check_datetime(value: str) -> str:
    # RFC 3339 date-time only; no bare dates, week dates or basic format
    if DATETIME_PATTERN.fullmatch(value) is None:
        raise ValueError("must be an ISO 8601 datetime (e.g. 2024-01-01T00:00:00Z)")
    try:
        datetime.fromisoformat(value)
    except ValueError:
        raise ValueError("must be an ISO 8601 datetime (e.g. 2024-01-01T00:00:00Z)")
    return value


def _check_integer_input(value: Any) -> Any:
    # integral floats (10.0) are fine, bools and numeric strings are not
    if isinstance(value, (bool, str)):
        raise ValueError("must be an integer")
    return value


_TYPE_MAP: Dict[str, Any] = {
    "string": Annotated[str, Field(strict=True)],
    "integer": Annotated[int, BeforeValidator(_check_integer_input)],
    "number": Annotated[float, Field(strict=True)],
    "boolean": Annotated[bool, Field(strict=True)],
}


@dataclass(frozen=True)
class ToolParameter:
    """Definition of a tool parameter."""
    name: str
    type: str
    description: str
    required: bool = True
    default: Any = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    enum: Optional[Tuple[str, ...]] = None
    format: Optional[str] = None
    max_items: Optional[int] = None
    items_type: str = "string"

    def annotation(self) -> Any:
        """Python type (with constraints) used to validate this parameter."""
        if self.enum:
            return Literal[tuple(self.enum)]

        if self.type == "array":
            item = _TYPE_MAP[self.items_type]
            return Annotated[List[item], Field(max_length=self.max_items)]

        base = _TYPE_MAP[self.type]
        if self.format == "uuid":
            return Annotated[base, Field(pattern=UUID_PATTERN)]
        if self.format == "date-time":
            return Annotated[base, AfterValidator(_check_datetime)]
        if self.minimum is not None or self.maximum is not None:
            return Annotated[base, Field(ge=self.minimum, le=self.maximum)]
        return base

    def to_json_schema(self) -> Dict[str, Any]:
        prop: Dict[str, Any] = {"description": self.description}

        if self.type == "array":
            prop["type"] = "array"
            prop["items"] = {"type": self.items_type}
            if self.max_items is not None:
                prop["maxItems"] = self.max_items
        else:
            prop["type"] = self.type

        if self.enum:
            prop["enum"] = list(self.enum)
        if self.format:
            prop["format"] = self.format
        if self.minimum is not None:
            prop["minimum"] = self.minimum
        if self.maximum is not None:
            prop["maximum"] = self.maximum
        if self.default is not None:
            prop["default"] = self.default

        return prop


@dataclass(frozen=True)
class ToolDefinition:
    """Complete definition of a remote tool exposed through the proxy."""
    name: str
    description: str
    parameters: List[ToolParameter] = field(default_factory=list)
    category: str = "general"

    @functools.cached_property
    def arguments_model(self) -> Type[BaseModel]:
        """Pydantic model mirroring the parameter list. Built on first use."""
        fields = {}
        for param in self.parameters:
            if param.required:
                fields[param.name] = (param.annotation(), Field(..., description=param.description))
            else:
                fields[param.name] = (param.annotation(), Field(None, description=param.description))

        model_name = "".join(part.title() for part in self.name.split("_")) + "Arguments"
        return create_model(
            model_name,
            __config__=ConfigDict(extra="forbid"),
            **fields,
        )

    def validate(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate an argument bag against the declared parameters.

        Returns only the fields the caller supplied, with their original
        values. Raises ValidationError if anything is missing, unknown,
        mistyped or out of bounds.
        """
        try:
            validated = self.arguments_model.model_validate(arguments)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid arguments for {self.name}: {_format_errors(e)}",
                tool_name=self.name,
                details={"errors": e.errors(include_url=False)},
            )

        return {
            p.name: arguments[p.name]
            for p in self.parameters
            if p.name in validated.model_fields_set
        }

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema advertised to MCP clients for this tool."""
        properties = {p.name: p.to_json_schema() for p in self.parameters}
        required = [p.name for p in self.parameters if p.required]

        schema: Dict[str, Any] = {
            "type": "object",
            "properties": properties,
            "additionalProperties": False,
        }
        if required:
            schema["required"] = required
        return schema

    def to_mcp_schema(self) -> Dict[str, Any]:
        """Entry in the shape MCP clients receive from tools/list."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


def _format_errors(exc: PydanticValidationError) -> str:
    messages = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"]) or "arguments"
        messages.append(f"{location}: {error['msg']}")
    return "; ".join(messages)


def error_result(message: str) -> Dict[str, Any]:
    """Build the single-text-block error shape returned for every failure."""
    return {"content": [{"type": "text", "text": message}], "isError": True}
