#!/usr/bin/env python3
"""
FastMCP transport adapter.

Exposes every tool of a Dispatcher on a FastMCP server. FastMCP lists the
tools, but ``tools/call`` requests bypass its tool manager and go straight
to the Dispatcher: error results reach the client with ``isError`` set, and
structured dispatch errors are raised as ``McpError`` so the client receives
a JSON-RPC error carrying their protocol code and message.
"""

import sys
from typing import Any, Dict, List, Optional

import mcp.types as mcp_types
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import Tool
from fastmcp.tools.tool import ToolResult as MCPToolResult
from mcp.shared.exceptions import McpError
from pydantic import Field

from .config import SERVER_HOST, SERVER_VERSION
from .dispatcher import Dispatcher
from .errors import ToolServerError
from .types import ToolResult


def _wire_content(result: ToolResult) -> List[mcp_types.TextContent]:
    return [mcp_types.TextContent(type="text", text=block.text) for block in result.content]


async def _dispatch(dispatcher: Dispatcher, name: str, arguments: Optional[Dict[str, Any]]) -> ToolResult:
    try:
        return await dispatcher.call_tool(name, arguments or {})
    except ToolServerError as e:
        raise McpError(e.to_error_data()) from e


class DispatchedTool(Tool):
    """A FastMCP tool whose calls are routed through a Dispatcher."""

    dispatcher: Any = Field(exclude=True, repr=False)

    async def run(self, arguments: Dict[str, Any]) -> MCPToolResult:
        result = await _dispatch(self.dispatcher, self.name, arguments)
        if result.is_error:
            raise ToolError("\n".join(block.text for block in result.content))
        return MCPToolResult(content=_wire_content(result))


def _call_tool_handler(dispatcher: Dispatcher):
    async def handle_call_tool(req: mcp_types.CallToolRequest) -> mcp_types.ServerResult:
        result = await _dispatch(dispatcher, req.params.name, req.params.arguments)
        return mcp_types.ServerResult(
            mcp_types.CallToolResult(content=_wire_content(result), isError=result.is_error)
        )

    return handle_call_tool


def build_server(name: str, dispatcher: Dispatcher) -> FastMCP:
    """Create a FastMCP server exposing the dispatcher's tools in registration order."""
    mcp = FastMCP(name, version=SERVER_VERSION)
    for descriptor in dispatcher.list_tools():
        wire = descriptor.to_dict()
        mcp.add_tool(DispatchedTool(
            name=wire["name"],
            description=wire["description"],
            parameters=wire["inputSchema"],
            dispatcher=dispatcher,
        ))
    # The low-level call_tool wrapper turns every exception into an error
    # result, so the raw request handler is replaced to let McpError through.
    mcp._mcp_server.request_handlers[mcp_types.CallToolRequest] = _call_tool_handler(dispatcher)
    return mcp


def run_server(mcp: FastMCP, logger, port: int, argv: Optional[List[str]] = None):
    """
    Run the server on the transport named by the first command line argument.

    Args:
        mcp: The server to run
        logger: Logger instance
        port: Port for the sse and http transports
        argv: Arguments after the program name; defaults to sys.argv[1:]
    """
    if argv is None:
        argv = sys.argv[1:]

    logger.info(f"{mcp.name} starting up")

    transport = argv[0].lower() if argv else "stdio"

    if transport == "sse":
        logger.info(f"Running with SSE transport on http://{SERVER_HOST}:{port}")
        mcp.run(transport="sse", host=SERVER_HOST, port=port)
    elif transport == "http":
        logger.info(f"Running with HTTP transport on http://{SERVER_HOST}:{port}/mcp")
        mcp.run(transport="http", host=SERVER_HOST, port=port, path="/mcp")
    elif transport == "stdio":
        logger.info("Running with STDIO transport")
        mcp.run(transport="stdio")
    else:
        # stdout carries the protocol, so usage goes to stderr
        print(f"Usage: {mcp.name} [stdio|sse|http]", file=sys.stderr)
        print("Default: stdio", file=sys.stderr)
        logger.info("Running with default STDIO transport")
        mcp.run()
