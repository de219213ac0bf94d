#!/usr/bin/env python3
"""
Web scraping module for the documentation server.

Fetches the documentation sitemap and pages, extracts page content and ranks
sitemap entries against a search query. Fetched pages and the parsed index
are kept in caches owned by the caller, so they survive across scraper
sessions.
"""

from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urljoin, urlparse

import aiohttp
from bs4 import BeautifulSoup
from rapidfuzz import fuzz, process, utils

from .cache import TimedCache
from .config import (
    DOCS_BASE_URL,
    DOCS_LANGUAGE_PREFIX,
    DOCS_SITEMAP_PATH,
    DOCS_USER_AGENT,
    HTTP_TIMEOUT,
    PAGE_CACHE_TTL,
    SEARCH_SCORE_CUTOFF,
)


@dataclass(frozen=True)
class DocEntry:
    """A documentation page listed in the sitemap."""
    title: str
    url: str


@dataclass(frozen=True)
class SearchResult:
    title: str
    url: str
    score: float
    excerpt: str


def parse_sitemap(xml: str, language_prefix: str = DOCS_LANGUAGE_PREFIX) -> List[DocEntry]:
    """
    Extract documentation pages from sitemap XML.

    Only URLs whose path starts with ``language_prefix`` are kept. A page is
    titled by the last segment of its path with dashes turned into spaces.

    Args:
        xml: Sitemap document
        language_prefix: Path prefix of the documentation language to index

    Returns:
        Entries in sitemap order
    """
    soup = BeautifulSoup(xml, 'html.parser')
    entries = []
    for loc in soup.find_all('loc'):
        url = loc.get_text(strip=True)
        path = urlparse(url).path
        if not url or not path.startswith(language_prefix):
            continue
        segments = [segment for segment in path.split('/') if segment]
        title = segments[-1] if segments else path
        entries.append(DocEntry(title=title.replace('-', ' '), url=url))
    return entries


def extract_main_content(html: str) -> str:
    """Inner HTML of the page's main content area, or an empty string."""
    soup = BeautifulSoup(html, 'html.parser')
    main_content = soup.find('main') or soup.select_one('.content-panel') or soup.find('article')
    if main_content is None:
        return ""
    return main_content.decode_contents()


def rank_entries(
    query: str,
    entries: List[DocEntry],
    max_results: int,
    score_cutoff: float = SEARCH_SCORE_CUTOFF,
) -> List[SearchResult]:
    """
    Fuzzy-match a query against entry titles.

    Args:
        query: Search keywords
        entries: Candidate pages
        max_results: Maximum number of results to return
        score_cutoff: Minimum similarity on a 0-100 scale

    Returns:
        Best matches first, with similarity scores scaled to 0-1
    """
    matches = process.extract(
        query,
        [entry.title for entry in entries],
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        limit=max_results,
        score_cutoff=score_cutoff,
    )
    results = []
    for _, score, index in matches:
        similarity = round(score / 100, 2)
        entry = entries[index]
        results.append(SearchResult(
            title=entry.title,
            url=entry.url,
            score=similarity,
            excerpt=f"Score: {similarity:.2f}",
        ))
    return results


class DocsSiteScraper:
    """Scraper for fetching pages and the sitemap index from a documentation site."""

    def __init__(
        self,
        page_cache: Optional[TimedCache] = None,
        index_cache: Optional[TimedCache] = None,
        base_url: str = DOCS_BASE_URL,
        sitemap_path: str = DOCS_SITEMAP_PATH,
        language_prefix: str = DOCS_LANGUAGE_PREFIX,
    ):
        self.page_cache = page_cache if page_cache is not None else TimedCache(PAGE_CACHE_TTL)
        self.index_cache = index_cache if index_cache is not None else TimedCache(PAGE_CACHE_TTL)
        self.base_url = base_url
        self.sitemap_path = sitemap_path
        self.language_prefix = language_prefix
        self.session = None

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=HTTP_TIMEOUT),
            headers={'User-Agent': DOCS_USER_AGENT},
            raise_for_status=True,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.close()

    async def _get_text(self, path: str) -> str:
        if self.session is None:
            raise RuntimeError("DocsSiteScraper must be used as an async context manager")
        url = urljoin(self.base_url, path)
        async with self.session.get(url) as response:
            return await response.text()

    async def fetch_page(self, path: str, logger) -> str:
        """
        Fetch a page and return its main content, using the page cache.

        Args:
            path: Page path relative to the site root, e.g. "/en/getting-started/"
            logger: Logger instance

        Returns:
            Inner HTML of the page's main content
        """
        cached = self.page_cache.get(path)
        if cached is not None:
            logger.info("Returning cached page", extra={'extra_data': {'path': path}})
            return cached

        logger.info("Fetching page", extra={'extra_data': {'path': path, 'base_url': self.base_url}})
        html = await self._get_text(path)
        content = extract_main_content(html)
        logger.info("Extracted page content", extra={'extra_data': {'path': path, 'length': len(content)}})

        self.page_cache.set(path, content)
        return content

    async def fetch_index(self, logger) -> List[DocEntry]:
        """Documentation pages listed in the sitemap, using the index cache."""
        cached = self.index_cache.get(self.sitemap_path)
        if cached is not None:
            logger.info("Returning cached sitemap index", extra={'extra_data': {'count': len(cached)}})
            return cached

        xml = await self._get_text(self.sitemap_path)
        entries = parse_sitemap(xml, self.language_prefix)
        logger.info(
            "Parsed sitemap index",
            extra={'extra_data': {'sitemap': self.sitemap_path, 'count': len(entries)}}
        )

        self.index_cache.set(self.sitemap_path, entries)
        return entries

    async def search(self, query: str, max_results: int, logger) -> List[SearchResult]:
        entries = await self.fetch_index(logger)
        results = rank_entries(query, entries, max_results)
        logger.info(
            "Searched documentation index",
            extra={'extra_data': {'query': query, 'match_count': len(results)}}
        )
        return results
