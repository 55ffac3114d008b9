"""Allow ``python -m notion_fetch_cli``."""

from notion_fetch_cli.main import app

app(prog_name="notion-page")
