"""Command-line entry point for the Notion page fetcher."""
