#!/usr/bin/env python3
"""
Tool dispatcher.

Routes an invocation to its handler: resolve the tool, validate the
arguments, build the handler's typed arguments and run the handler inside an
error boundary. Anything the handler raises that is not a structured
``ToolServerError`` is reported as an ``InternalError``.
"""

import inspect
import logging
from typing import Any, List, Mapping, Optional

from pydantic import ValidationError

from .errors import InternalError, InvalidParamsError, ToolServerError
from .registry import RegisteredTool, ToolRegistry
from .types import Invocation, ToolDescriptor, ToolResult
from .validator import RequestValidator


class Dispatcher:
    """Protocol-independent front door for listing and calling tools."""

    def __init__(self, registry: ToolRegistry, logger: logging.Logger, validator: Optional[RequestValidator] = None):
        self.registry = registry
        self.validator = validator or RequestValidator()
        self.logger = logger

    def list_tools(self) -> List[ToolDescriptor]:
        return self.registry.list()

    async def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        return await self.dispatch(Invocation(tool_name=name, arguments=arguments or {}))

    async def dispatch(self, invocation: Invocation) -> ToolResult:
        """
        Run one invocation.

        Args:
            invocation: Tool name plus raw arguments

        Returns:
            The handler's result, unchanged

        Raises:
            UnknownToolError: the tool is not registered
            InvalidParamsError: the arguments do not satisfy the tool's schema
            InternalError: the handler failed with an unrecognised error
        """
        name = invocation.tool_name
        try:
            tool = self.registry.resolve(name)
            arguments = self.validator.validate(tool.descriptor.input_schema, invocation.arguments)
            params = self._build_params(tool, arguments)
        except ToolServerError as e:
            self.logger.warning(
                "Rejected tool invocation",
                extra={'extra_data': {'tool': name, 'code': e.code, 'reason': e.message}}
            )
            raise

        self.logger.info("Dispatching tool invocation", extra={'extra_data': {'tool': name}})
        result = await self._run_handler(tool, params)

        self.logger.info(
            "Tool invocation completed",
            extra={'extra_data': {'tool': name, 'is_error': result.is_error}}
        )
        return result

    def _build_params(self, tool: RegisteredTool, arguments: dict) -> Any:
        if tool.args_model is None:
            return arguments
        try:
            return tool.args_model.model_validate(arguments)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first.get("loc", ())) or None
            raise InvalidParamsError(f"Invalid argument {field}: {first.get('msg')}", field=field) from e

    async def _run_handler(self, tool: RegisteredTool, params: Any) -> ToolResult:
        try:
            result = tool.handler(params)
            if inspect.isawaitable(result):
                result = await result
        except ToolServerError as e:
            self.logger.warning(
                "Tool handler raised a structured error",
                extra={'extra_data': {'tool': tool.name, 'code': e.code, 'reason': e.message}}
            )
            raise
        except Exception as e:
            self.logger.error("Tool handler failed", exc_info=True, extra={'extra_data': {'tool': tool.name}})
            raise InternalError(str(e) or type(e).__name__) from e

        if not isinstance(result, ToolResult):
            self.logger.error(
                "Tool handler returned an unexpected value",
                extra={'extra_data': {'tool': tool.name, 'type': type(result).__name__}}
            )
            raise InternalError(f"Tool {tool.name} returned {type(result).__name__} instead of a result")
        return result
