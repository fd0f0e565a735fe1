"""
Sports-data relay.
GET /?path=/api/... forwards to the sports-data provider with the server-held key.
Port 8200 by default.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from sports_api.config import (
    CORS_ALLOW_HEADERS,
    DEFAULT_PATH,
    PORT,
    ConfigurationError,
    SportsApiSettings,
    get_settings,
)
from sports_api.relay import InvalidPathError, UpstreamError, fetch_upstream

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        get_settings()
    except ConfigurationError as e:
        logger.error("Sports relay starting without configuration: %s", e)
    yield


app = FastAPI(title="Sports API Relay", version="1.0.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "OPTIONS"],
    allow_headers=CORS_ALLOW_HEADERS,
)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=CORS_HEADERS)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error("%s", exc)
    return _error("Sports API not configured", 500)


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok", "service": "sports_api"}


@app.options("/")
def preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@app.get("/")
def relay(path: str | None = None, settings: SportsApiSettings = Depends(get_settings)):
    """Relay upstream JSON verbatim; upstream failures keep their status code."""
    path = path or DEFAULT_PATH
    try:
        data = fetch_upstream(settings, path)
    except InvalidPathError as e:
        return _error(str(e), 400)
    except UpstreamError as e:
        return _error(e.message, e.status_code)
    except Exception as e:
        logger.exception("Error in sports relay")
        return _error(str(e) or "Internal server error", 500)
    return JSONResponse(data, headers=CORS_HEADERS)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "sports_api.main:app",
        host="127.0.0.1",
        port=PORT,
        reload=True,
    )
