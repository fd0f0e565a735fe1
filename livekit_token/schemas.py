"""
Request body for POST / (camelCase on the wire, matching the browser client).
"""
from typing import Any

from pydantic import BaseModel, Field, ValidationError

REQUIRED_FIELDS_MESSAGE = "Missing required parameters: roomName, participantName, participantIdentity"


class InvalidTokenRequest(Exception):
    """Caller sent an incomplete or malformed join request (400)."""


class TokenRequest(BaseModel):
    room_name: str = Field("", alias="roomName")
    participant_name: str = Field("", alias="participantName")
    # Trusted as sent; not checked against any login session.
    participant_identity: str = Field("", alias="participantIdentity")
    is_host: bool | None = Field(None, alias="isHost")
    can_publish: bool | None = Field(None, alias="canPublish")
    can_subscribe: bool | None = Field(None, alias="canSubscribe")


def parse_token_request(body: Any) -> TokenRequest:
    """
    Validate a decoded JSON body. Absent and null flags fall back to defaults
    (isHost=False, canPublish=False, canSubscribe=True). Raises InvalidTokenRequest.
    """
    if not isinstance(body, dict):
        raise InvalidTokenRequest("Request body must be a JSON object")
    try:
        req = TokenRequest.model_validate(body)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise InvalidTokenRequest("Invalid parameters: " + ", ".join(fields)) from e
    if not req.room_name or not req.participant_name or not req.participant_identity:
        raise InvalidTokenRequest(REQUIRED_FIELDS_MESSAGE)
    return req.model_copy(
        update={
            "is_host": bool(req.is_host),
            "can_publish": bool(req.can_publish),
            "can_subscribe": True if req.can_subscribe is None else req.can_subscribe,
        }
    )
