#!/usr/bin/env python3
"""
Structured error taxonomy for tool dispatch.

Each error carries the JSON-RPC code the transport reports to the client.
Handler-level operational failures are not represented here; handlers
render those as error results instead.
"""

from typing import Optional

from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class ToolServerError(Exception):
    """Base class for errors that are surfaced to the caller verbatim."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_error_data(self) -> ErrorData:
        return ErrorData(code=self.code, message=self.message)


class UnknownToolError(ToolServerError):
    """The invoked tool name is not registered."""

    code = METHOD_NOT_FOUND

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class InvalidParamsError(ToolServerError):
    """Arguments failed schema validation or a handler precondition."""

    code = INVALID_PARAMS

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InternalError(ToolServerError):
    """A handler or one of its dependencies failed unexpectedly."""

    code = INTERNAL_ERROR


class DuplicateToolError(ToolServerError):
    """A tool with the same name is already registered."""

    def __init__(self, tool_name: str):
        super().__init__(f"Tool already registered: {tool_name}")
        self.tool_name = tool_name
