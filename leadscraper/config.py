"""
Settings for the lead finder, read from the environment.

A `.env` file at the project root is loaded first if present.

GEOLOCATION_URL is opt-in and empty by default: the lookup locates the
machine running the app, which is only the user's machine when the app runs
locally. On a hosted deployment it would bias searches toward the datacenter.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

_project_root = Path(__file__).parent.parent
_env_file = _project_root / ".env"
if _env_file.exists():
    load_dotenv(_env_file)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Configuration settings loaded from environment."""

    # OpenAI
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-5-mini")
    USE_WEB_SEARCH: bool = _flag("USE_WEB_SEARCH", "true")

    # Market
    LEADS_COUNTRY: str = os.getenv("LEADS_COUNTRY", "Venezuela")
    LEADS_COUNTRY_CODE: str = os.getenv("LEADS_COUNTRY_CODE", "VE")
    LEADS_LANGUAGE: str = os.getenv("LEADS_LANGUAGE", "es")

    # Misc
    CACHE_DIR: str = os.getenv("CACHE_DIR", "cache/searches")
    GEOLOCATION_URL: str = os.getenv("GEOLOCATION_URL", "")  # e.g. https://ipapi.co/json/
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON: bool = _flag("LOG_JSON", "false")

    @classmethod
    def validate(cls) -> list[str]:
        """Return the names of required settings that are missing."""
        missing = []
        if not cls.OPENAI_API_KEY:
            missing.append("OPENAI_API_KEY")
        return missing


config = Config()
