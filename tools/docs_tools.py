#!/usr/bin/env python3
"""
Tool registrations for the documentation server.

This module declares search_docs and get_page and wires them to the core
implementation. The page and index caches are created here, once per
registry, and shared by every scraper session the tools open.
"""

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict

from tooldispatch.cache import TimedCache
from tooldispatch.config import DEFAULT_MAX_RESULTS, MAX_RESULTS_LIMIT, PAGE_CACHE_TTL
from tooldispatch.core import get_page_impl, search_docs_impl
from tooldispatch.registry import ToolRegistry
from tooldispatch.scraper import DocsSiteScraper
from tooldispatch.types import ToolDescriptor

SEARCH_DOCS = ToolDescriptor(
    name="search_docs",
    description="Search through Astro documentation using keywords",
    input_schema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search query",
            },
            "max_results": {
                "type": "number",
                "description": f"Maximum number of results to return (default: {DEFAULT_MAX_RESULTS})",
                "minimum": 1,
                "maximum": MAX_RESULTS_LIMIT,
            },
        },
        "required": ["query"],
    },
)

GET_PAGE = ToolDescriptor(
    name="get_page",
    description="Get the content of a specific documentation page",
    input_schema={
        "type": "object",
        "properties": {
            "path": {
                "type": "string",
                "description": 'Path to the documentation page (e.g., "/en/getting-started")',
            },
        },
        "required": ["path"],
    },
)


class SearchDocsArgs(BaseModel):
    model_config = ConfigDict(extra="allow")

    query: str
    max_results: int = DEFAULT_MAX_RESULTS


class GetPageArgs(BaseModel):
    model_config = ConfigDict(extra="allow")

    path: str


def register_docs_tools(
    registry: ToolRegistry,
    logger,
    scraper_factory: Optional[Callable[[], DocsSiteScraper]] = None,
):
    """
    Register documentation related tools.

    Args:
        registry: Registry to add the tools to
        logger: Logger instance
        scraper_factory: Builds a scraper per call; defaults to a
            DocsSiteScraper bound to caches owned by this registration
    """
    if scraper_factory is None:
        page_cache = TimedCache(PAGE_CACHE_TTL)
        index_cache = TimedCache(PAGE_CACHE_TTL)

        def scraper_factory():
            return DocsSiteScraper(page_cache=page_cache, index_cache=index_cache)

    async def search_docs(args: SearchDocsArgs):
        return await search_docs_impl(args.query, args.max_results, scraper_factory, logger)

    async def get_page(args: GetPageArgs):
        return await get_page_impl(args.path, scraper_factory, logger)

    registry.register(SEARCH_DOCS, search_docs, SearchDocsArgs)
    registry.register(GET_PAGE, get_page, GetPageArgs)
