#!/usr/bin/env python3
"""
Data model shared by the registry, validator and dispatcher.

These types carry no protocol dependencies; the transport adapter converts
them to and from the MCP wire shapes.
"""

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping


@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and input schema of a tool. Immutable once built."""
    name: str
    description: str
    input_schema: Mapping[str, Any]

    def __post_init__(self):
        if not self.name:
            raise ValueError("Tool name must be a non-empty string")
        # Own a private copy so later mutation of the caller's dict is not observed
        frozen = MappingProxyType(copy.deepcopy(dict(self.input_schema)))
        object.__setattr__(self, "input_schema", frozen)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(dict(self.input_schema)),
        }


@dataclass(frozen=True)
class Invocation:
    """One request to run a named tool with concrete arguments."""
    tool_name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TextContent:
    text: str
    type: str = "text"

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ToolResult:
    """
    Outcome of a tool call.

    ``is_error`` is authoritative: when set, the content is a human readable
    failure message and callers must not treat it as a successful payload.
    """
    content: List[TextContent]
    is_error: bool = False

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)])

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(content=[TextContent(text=message)], is_error=True)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"content": [block.to_dict() for block in self.content]}
        if self.is_error:
            payload["isError"] = True
        return payload
