"""Integration tests for tdnet-scraper.

Integration tests exercise the real HTTP client, HTML parser and file
system together against a local HTTP server serving listing pages.

Run with: pytest tests/integration/ -v -s
"""
