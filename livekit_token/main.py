"""
LiveKit token service.
POST / mints a 4-hour LiveKit access token for one participant; OPTIONS / answers CORS probes.
Port 8100 by default.
"""
import logging
from contextlib import asynccontextmanager
from json import JSONDecodeError

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from livekit_token.config import (
    CORS_ALLOW_HEADERS,
    PORT,
    ConfigurationError,
    LiveKitSettings,
    get_settings,
)
from livekit_token.grants import derive_grant
from livekit_token.schemas import InvalidTokenRequest, parse_token_request
from livekit_token.tokens import create_access_token

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load LiveKit settings at startup. Incomplete config is logged; requests then get 500."""
    try:
        get_settings()
    except ConfigurationError as e:
        logger.error("LiveKit token service starting without configuration: %s", e)
    yield


app = FastAPI(title="LiveKit Token Service", version="1.0.0", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["POST", "OPTIONS"],
    allow_headers=CORS_ALLOW_HEADERS,
)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=CORS_HEADERS)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    # Details (which variables) go to the log only.
    logger.error("Missing LiveKit configuration: %s", exc)
    return _error("LiveKit configuration is incomplete", 500)


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok", "service": "livekit_token"}


@app.options("/")
def preflight():
    """Bare OPTIONS probe; browser preflights are answered by the CORS middleware."""
    return Response(status_code=200, headers=CORS_HEADERS)


@app.post("/")
async def issue_token(request: Request, settings: LiveKitSettings = Depends(get_settings)):
    """
    Body: {roomName, participantName, participantIdentity, isHost?, canPublish?, canSubscribe?}.
    Returns {token, url, roomName}. Errors are {error} with 400 (bad request) or 500.
    """
    try:
        token_request = parse_token_request(await request.json())

        logger.info(
            "Generating token for %s in room %s",
            token_request.participant_name,
            token_request.room_name,
        )
        logger.info(
            "isHost: %s, canPublish: %s, canSubscribe: %s",
            token_request.is_host,
            token_request.can_publish,
            token_request.can_subscribe,
        )

        grant = derive_grant(
            token_request.room_name,
            is_host=token_request.is_host,
            can_publish=token_request.can_publish,
            can_subscribe=token_request.can_subscribe,
        )
        token = create_access_token(
            settings.api_key,
            settings.api_secret,
            token_request.participant_identity,
            token_request.participant_name,
            grant,
        )
    except InvalidTokenRequest as e:
        logger.info("Rejected token request: %s", e)
        return _error(str(e), 400)
    except JSONDecodeError as e:
        logger.warning("Token request body is not valid JSON: %s", e)
        return _error(str(e), 500)
    except Exception as e:
        logger.exception("Error generating token")
        return _error(str(e), 500)

    logger.info("Token generated successfully")
    return JSONResponse(
        {"token": token, "url": settings.url, "roomName": token_request.room_name},
        headers=CORS_HEADERS,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "livekit_token.main:app",
        host="127.0.0.1",
        port=PORT,
        reload=True,
    )
