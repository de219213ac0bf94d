#!/usr/bin/env python3
"""
Core business logic for the tool servers.

This module contains the implementation functions behind each tool. They
have no MCP dependencies: they receive plain arguments, a logger and their
collaborators, and return a ``ToolResult``.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Callable

import aiofiles

from .differ import LineDiffer
from .errors import InvalidParamsError
from .scraper import DocsSiteScraper
from .types import ToolResult


async def generate_diff_impl(old_file_path: str, new_file_path: str, output_file_path: str, logger) -> ToolResult:
    """
    Core implementation for diffing two files and writing the result.

    Args:
        old_file_path: Path to the old version of the file
        new_file_path: Path to the new version of the file
        output_file_path: Path to save the generated diff file
        logger: Logger instance

    Returns:
        Result naming the written diff file

    Raises:
        InvalidParamsError: if either input file does not exist
    """
    if not Path(old_file_path).exists():
        raise InvalidParamsError(f"Old file does not exist: {old_file_path}", field="oldFilePath")
    if not Path(new_file_path).exists():
        raise InvalidParamsError(f"New file does not exist: {new_file_path}", field="newFilePath")

    async with aiofiles.open(old_file_path, 'r', encoding='utf-8') as f:
        old_content = await f.read()
    async with aiofiles.open(new_file_path, 'r', encoding='utf-8') as f:
        new_content = await f.read()

    diff_content = LineDiffer.render(old_content, new_content)

    # newline='' keeps the "\n" separators byte-identical on every platform
    async with aiofiles.open(output_file_path, 'w', encoding='utf-8', newline='') as f:
        await f.write(diff_content)

    logger.info(
        "Wrote diff file",
        extra={'extra_data': {'old': old_file_path, 'new': new_file_path, 'output': output_file_path, 'bytes': len(diff_content)}}
    )
    return ToolResult.text(f"Diff file generated successfully at {output_file_path}")


async def search_docs_impl(query: str, max_results: int, scraper_factory: Callable[[], DocsSiteScraper], logger) -> ToolResult:
    """
    Core implementation for fuzzy searching the documentation index.

    Args:
        query: Search keywords
        max_results: Maximum number of results to return
        scraper_factory: Builds a scraper bound to the server's caches
        logger: Logger instance

    Returns:
        Result holding the matches as a JSON array, or an error result if the
        index could not be fetched
    """
    logger.info("Searching documentation", extra={'extra_data': {'query': query, 'max_results': max_results}})
    try:
        async with scraper_factory() as scraper:
            results = await scraper.search(query, max_results, logger)
    except Exception as e:
        logger.error("Search failed", exc_info=True, extra={'extra_data': {'query': query}})
        return ToolResult.error(f"Search failed: {str(e) or type(e).__name__}")

    return ToolResult.text(json.dumps([asdict(result) for result in results], indent=2))


async def get_page_impl(path: str, scraper_factory: Callable[[], DocsSiteScraper], logger) -> ToolResult:
    """
    Core implementation for retrieving a documentation page's content.

    Args:
        path: Path to the documentation page
        scraper_factory: Builds a scraper bound to the server's caches
        logger: Logger instance

    Returns:
        Result holding the page's main content, or an error result if the
        page could not be fetched
    """
    logger.info("Getting page", extra={'extra_data': {'path': path}})
    try:
        async with scraper_factory() as scraper:
            content = await scraper.fetch_page(path, logger)
    except Exception as e:
        logger.error("Get page failed", exc_info=True, extra={'extra_data': {'path': path}})
        return ToolResult.error(f"Failed to get page: {str(e) or type(e).__name__}")

    return ToolResult.text(content)
