"""notion-page CLI — fetch one Notion page and print it.

Usage:
    notion-page [PAGE_ID] [--verbose]

The bearer token is read from ``NOTION_API_KEY`` (environment or ``.env``).
When PAGE_ID is omitted a sample page id is used.
"""

from __future__ import annotations

import logging
import sys

import typer

from notion_fetch.api import ApiError, fetch_page
from notion_fetch.config import DEFAULT_PAGE_ID, settings

app = typer.Typer(
    name="notion-page",
    help="Fetch a Notion page and print its JSON.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _non_empty(value: str) -> str:
    if not value:
        raise typer.BadParameter("page id must not be empty.")
    return value


@app.command()
def fetch(
    page_id: str = typer.Argument(
        DEFAULT_PAGE_ID, help="Notion page id to fetch.", callback=_non_empty
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log request details to stderr."),
) -> None:
    """Fetch PAGE_ID and print the response body, pretty-printed when it is JSON."""
    _configure_logging(verbose)

    try:
        page = fetch_page(page_id, settings.notion_api_key)
    except ApiError as exc:
        typer.echo(f"Error: Notion API call failed: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Data received:\n{page.data}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
