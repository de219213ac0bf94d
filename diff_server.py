#!/usr/bin/env python3
"""
MCP server for generating line diffs between files.

This server provides one tool:
1. generate_diff: diff two text files and write the result to a third file

Usage:
    python diff_server.py [stdio|sse|http]
"""

from tooldispatch.config import DIFF_SERVER_PORT
from tooldispatch.dispatcher import Dispatcher
from tooldispatch.logger import install_error_sink, setup_logging
from tooldispatch.registry import ToolRegistry
from tooldispatch.transport import build_server, run_server
from tools.diff_tools import register_diff_tools

SERVER_NAME = "diff-server"


def create_server(logger):
    registry = ToolRegistry()
    register_diff_tools(registry, logger)
    return build_server(SERVER_NAME, Dispatcher(registry, logger))


def main():
    logger = setup_logging(SERVER_NAME)
    install_error_sink(logger)
    run_server(create_server(logger), logger, DIFF_SERVER_PORT)


if __name__ == "__main__":
    main()
