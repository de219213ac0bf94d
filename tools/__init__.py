"""
Tool declarations for the servers.

This package contains the tool registrations organized by server:
- diff_tools: generate_diff
- docs_tools: search_docs and get_page
"""
