"""Centralised settings for the Notion page fetcher.

Values are resolved from environment variables.  A `.env` file in the
project root is loaded automatically when this module is imported; variables
already present in the environment take precedence over it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

API_KEY_ENV = "NOTION_API_KEY"
TIMEOUT_ENV = "NOTION_REQUEST_TIMEOUT"

# Sample page fetched when no page id is given on the command line.
DEFAULT_PAGE_ID = "275a1865-b187-807a-adea-ebaf36fb49b0"


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Credential
    # ------------------------------------------------------------------
    notion_api_key: str | None = field(
        default_factory=lambda: os.environ.get(API_KEY_ENV) or None,
        repr=False,
    )

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get(TIMEOUT_ENV, "30.0"))
    )


# Module-level singleton; import this everywhere:
#   from notion_fetch.config import settings
settings = Settings()
