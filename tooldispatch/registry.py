#!/usr/bin/env python3
"""
Tool registry.

Holds the declared tools in registration order. The registry is filled at
startup and treated as read-only once the server is running.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel

from .errors import DuplicateToolError, UnknownToolError
from .types import ToolDescriptor

ToolHandler = Callable[[Any], Any]


@dataclass(frozen=True)
class RegisteredTool:
    """A descriptor together with the handler that implements it."""
    descriptor: ToolDescriptor
    handler: ToolHandler
    args_model: Optional[Type[BaseModel]] = None

    @property
    def name(self) -> str:
        return self.descriptor.name


class ToolRegistry:
    """Ordered set of uniquely named tools."""

    def __init__(self):
        self._tools: Dict[str, RegisteredTool] = {}

    def register(
        self,
        descriptor: ToolDescriptor,
        handler: ToolHandler,
        args_model: Optional[Type[BaseModel]] = None,
    ) -> RegisteredTool:
        """
        Register a tool.

        Args:
            descriptor: The tool's name, description and input schema
            handler: Callable (sync or async) receiving the validated arguments
            args_model: Optional pydantic model the arguments are converted to
                before the handler runs

        Returns:
            The registered tool entry

        Raises:
            DuplicateToolError: if a tool with the same name already exists
        """
        if descriptor.name in self._tools:
            raise DuplicateToolError(descriptor.name)
        tool = RegisteredTool(descriptor=descriptor, handler=handler, args_model=args_model)
        self._tools[descriptor.name] = tool
        return tool

    def list(self) -> List[ToolDescriptor]:
        """Descriptors in registration order."""
        return [tool.descriptor for tool in self._tools.values()]

    def resolve(self, name: str) -> RegisteredTool:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def names(self) -> List[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
