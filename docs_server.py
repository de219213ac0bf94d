#!/usr/bin/env python3
"""
MCP server for searching and reading the Astro documentation.

This server provides tools to:
1. Search the documentation sitemap by fuzzy keyword match (search_docs)
2. Retrieve the main content of a documentation page (get_page)

Fetched pages and the sitemap index are cached in memory for an hour.

Usage:
    python docs_server.py [stdio|sse|http]
"""

from tooldispatch.config import DOCS_SERVER_PORT
from tooldispatch.dispatcher import Dispatcher
from tooldispatch.logger import install_error_sink, setup_logging
from tooldispatch.registry import ToolRegistry
from tooldispatch.transport import build_server, run_server
from tools.docs_tools import register_docs_tools

SERVER_NAME = "astro-docs-server"


def create_server(logger):
    registry = ToolRegistry()
    register_docs_tools(registry, logger)
    return build_server(SERVER_NAME, Dispatcher(registry, logger))


def main():
    logger = setup_logging(SERVER_NAME)
    install_error_sink(logger)
    run_server(create_server(logger), logger, DOCS_SERVER_PORT)


if __name__ == "__main__":
    main()
