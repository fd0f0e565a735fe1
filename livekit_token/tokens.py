"""
LiveKit access tokens: HS256 JWTs signed with the API secret, issuer = API key.
No server-side storage; a token is valid until exp and cannot be revoked.
"""
import time

import jwt

from livekit_token.config import TOKEN_ALGORITHM, TOKEN_TTL_SECONDS
from livekit_token.grants import VideoGrant


def create_access_token(
    api_key: str,
    api_secret: str,
    identity: str,
    name: str,
    grant: VideoGrant,
    *,
    ttl: int = TOKEN_TTL_SECONDS,
    now: int | None = None,
) -> str:
    """Sign {iss, sub, name, iat, nbf, exp, video} and return the compact token."""
    if now is None:
        now = int(time.time())
    payload = {
        "iss": api_key,
        "sub": identity,
        "name": name,
        "iat": now,
        "nbf": now,
        "exp": now + ttl,
        "video": grant.to_claim(),
    }
    token = jwt.encode(
        payload,
        api_secret,
        algorithm=TOKEN_ALGORITHM,
        headers={"typ": "JWT"},
    )
    if isinstance(token, bytes):
        token = token.decode("utf-8")
    return token


def decode_access_token(
    token: str,
    api_secret: str,
    *,
    api_key: str | None = None,
    verify_times: bool = True,
) -> dict:
    """
    Verify signature (and issuer when api_key is given); return the claims.
    verify_times=False skips exp/nbf/iat checks, for inspecting tokens minted at a fixed clock.
    Raises jwt.InvalidTokenError subclasses on failure.
    """
    options = {"require": ["iss", "sub", "iat", "nbf", "exp"]}
    if not verify_times:
        options.update({"verify_exp": False, "verify_nbf": False, "verify_iat": False})
    return jwt.decode(
        token,
        api_secret,
        algorithms=[TOKEN_ALGORITHM],
        issuer=api_key,
        options=options,
    )
