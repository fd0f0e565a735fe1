"""
Upstream fetch for the sports-data relay. One GET per call, key injected server-side,
JSON passed back untouched (upstream schema is not stable, so nothing is normalized).
"""
import logging
import re
from typing import Any

import httpx

from sports_api.config import SportsApiSettings

logger = logging.getLogger(__name__)

# Leading single slash, no whitespace, no userinfo/authority tricks.
_PATH_RE = re.compile(r"/(?!/)[^\s@\\]*")


class InvalidPathError(Exception):
    """?path= is not a plain absolute route on the upstream host (400)."""


class UpstreamError(Exception):
    """Upstream answered with a non-success status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def build_upstream_url(base_url: str, path: str) -> str:
    """Join base URL and route. The route must stay on the configured host."""
    if not _PATH_RE.fullmatch(path):
        raise InvalidPathError(f"Invalid path: {path!r}")
    return f"{base_url.rstrip('/')}{path}"


def fetch_upstream(settings: SportsApiSettings, path: str) -> Any:
    """
    GET base_url + path with the API key in X-API-Key and Authorization.
    Returns decoded JSON. Raises UpstreamError on non-2xx; transport and decode errors propagate.
    """
    url = build_upstream_url(settings.base_url, path)
    logger.info("Fetching from Sports API: %s", url)
    r = httpx.get(
        url,
        headers={
            "Accept": "application/json",
            "X-API-Key": settings.api_key,
            "Authorization": f"Bearer {settings.api_key}",
        },
        timeout=settings.timeout,
    )
    if not r.is_success:
        logger.error("Sports API error: %s %s", r.status_code, r.reason_phrase)
        raise UpstreamError(r.status_code, f"API error: {r.reason_phrase}")
    data = r.json()
    logger.info("Sports API response received for %s", path)
    return data
