"""Centralised settings for pricescan.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_BROWSER_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Search target
    # ------------------------------------------------------------------
    base_url: str = field(
        default_factory=lambda: os.environ.get(
            "PRICESCAN_BASE_URL", "https://www.zoopla.co.uk/for-sale/property"
        )
    )
    currency_symbol: str = field(
        default_factory=lambda: os.environ.get("PRICESCAN_CURRENCY", "£")
    )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    output_filename: str = field(
        default_factory=lambda: os.environ.get("PRICESCAN_OUTPUT", "prices.json")
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("PRICESCAN_USER_AGENT", _BROWSER_UA)
    )

    @property
    def output_path(self) -> Path:
        """Default location of the JSON price file."""
        return Path(self.output_filename)


# Module-level singleton; import this everywhere:
#   from pricescan.config import settings
settings = Settings()
