"""Notion page fetcher core: settings and the ``api`` package."""
