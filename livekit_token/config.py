"""
LiveKit token service configuration.
API key, secret and server URL come from the environment; nothing secret lives in this file.
"""
import os
from dataclasses import dataclass

# Token lifetime (seconds). Fixed: 4 hours. Expiry is the only way a token stops working.
TOKEN_TTL_SECONDS = 60 * 60 * 4

TOKEN_ALGORITHM = "HS256"

# Headers the browser client sends (supabase-js style)
CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

PORT = int(os.environ.get("LIVEKIT_TOKEN_PORT", "8100"))

_REQUIRED_ENV = ("LIVEKIT_API_KEY", "LIVEKIT_API_SECRET", "LIVEKIT_URL")


class ConfigurationError(Exception):
    """Required LiveKit settings are missing. Deployment problem, not a caller problem."""


@dataclass(frozen=True)
class LiveKitSettings:
    api_key: str
    api_secret: str
    url: str


def load_settings(environ=None) -> LiveKitSettings:
    """Build settings from the environment. Raises ConfigurationError naming (not echoing) missing vars."""
    env = os.environ if environ is None else environ
    missing = [name for name in _REQUIRED_ENV if not env.get(name)]
    if missing:
        raise ConfigurationError("Missing LiveKit configuration: " + ", ".join(missing))
    return LiveKitSettings(
        api_key=env["LIVEKIT_API_KEY"],
        api_secret=env["LIVEKIT_API_SECRET"],
        url=env["LIVEKIT_URL"],
    )


# Module-level state (set on first successful load; immutable afterwards)
_settings: LiveKitSettings | None = None


def get_settings() -> LiveKitSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
