"""
Core modules for the tool servers.

This package contains the dispatch core and the business logic behind the
tools:
- types, errors: data model and structured error taxonomy
- registry, validator, dispatcher: tool registration and invocation
- cache: time-bounded cache for expensive fetches
- differ, scraper, core: tool business logic
- transport: FastMCP adapter and transport selection
- config, logger: configuration and logging infrastructure
"""
