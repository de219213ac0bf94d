#!/usr/bin/env python3
"""
Configuration for the tool servers.

Every value can be overridden through the environment variable of the same
name.
"""

import os
from pathlib import Path

SERVER_VERSION = "0.1.0"

# Logging
LOGS_DIR = Path(os.getenv("LOGS_DIR", "./logs"))

# Network transports (sse/http); stdio needs none of these
SERVER_HOST = os.getenv("SERVER_HOST", "127.0.0.1")
DIFF_SERVER_PORT = int(os.getenv("DIFF_SERVER_PORT", "8605"))
DOCS_SERVER_PORT = int(os.getenv("DOCS_SERVER_PORT", "8606"))

# Documentation site
DOCS_BASE_URL = os.getenv("DOCS_BASE_URL", "https://docs.astro.build")
DOCS_SITEMAP_PATH = os.getenv("DOCS_SITEMAP_PATH", "/sitemap-0.xml")
DOCS_LANGUAGE_PREFIX = os.getenv("DOCS_LANGUAGE_PREFIX", "/en/")
DOCS_USER_AGENT = os.getenv(
    "DOCS_USER_AGENT",
    "Mozilla/5.0 (compatible; AstroDocsBot/1.0; +https://docs.astro.build)",
)
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))

# Cache
PAGE_CACHE_TTL = float(os.getenv("PAGE_CACHE_TTL", str(60 * 60)))  # 1 hour

# Search
DEFAULT_MAX_RESULTS = 5
MAX_RESULTS_LIMIT = 20
SEARCH_SCORE_CUTOFF = float(os.getenv("SEARCH_SCORE_CUTOFF", "60"))
