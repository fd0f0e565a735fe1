"""
Sports-data relay configuration.
The upstream API key comes from the environment only; base URL and timeout are optional overrides.
"""
import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.sportdb.dev"

# Route used when the caller sends no ?path=
DEFAULT_PATH = "/api/flashscore/sports"

DEFAULT_TIMEOUT_SECONDS = 10.0

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

PORT = int(os.environ.get("SPORTS_API_PORT", "8200"))


class ConfigurationError(Exception):
    """SPORTS_API_KEY is not set."""


@dataclass(frozen=True)
class SportsApiSettings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS


def load_settings(environ=None) -> SportsApiSettings:
    env = os.environ if environ is None else environ
    api_key = env.get("SPORTS_API_KEY")
    if not api_key:
        raise ConfigurationError("Missing SPORTS_API_KEY")
    try:
        timeout = float(env.get("SPORTS_API_TIMEOUT_SECONDS") or DEFAULT_TIMEOUT_SECONDS)
    except ValueError:
        raise ConfigurationError("Invalid SPORTS_API_TIMEOUT_SECONDS") from None
    return SportsApiSettings(
        api_key=api_key,
        base_url=(env.get("SPORTS_API_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        timeout=timeout,
    )


_settings: SportsApiSettings | None = None


def get_settings() -> SportsApiSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
