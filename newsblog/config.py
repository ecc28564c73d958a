import math
import os
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel

DEFAULT_BASE_URL = "https://newsapi.org/v2"


class ConfigError(Exception):
    """Raised when an environment setting is missing its expected shape."""


class Settings(BaseModel):
    newsapi_key: Optional[str] = None
    newsapi_base_url: str = DEFAULT_BASE_URL
    country: str = "us"
    timeout: float = 10
    display_timezone: str = "UTC"
    max_sessions: int = 500
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_env: bool = True, dotenv_override: bool = True) -> "Settings":
        """Builds the settings from the process environment (and `.env`, if present)."""
        if load_env:
            from dotenv import load_dotenv
            load_dotenv(override=dotenv_override)

        timeout = _number("NEWSAPI_TIMEOUT", 10, float)
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigError("NEWSAPI_TIMEOUT must be a positive, finite number")
        max_sessions = _number("MAX_SESSIONS", 500, int)
        if max_sessions < 1:
            raise ConfigError("MAX_SESSIONS must be at least 1")

        tz_name = os.getenv("DISPLAY_TIMEZONE") or "UTC"
        try:
            ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ConfigError(f"Unknown DISPLAY_TIMEZONE '{tz_name}'") from e

        return cls(
            newsapi_key=os.getenv("NEWSAPI_KEY") or None,
            newsapi_base_url=(os.getenv("NEWSAPI_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            country=(os.getenv("NEWS_COUNTRY") or "us").lower(),
            timeout=timeout,
            display_timezone=tz_name,
            max_sessions=max_sessions,
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )


def _number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got '{raw}'") from e
