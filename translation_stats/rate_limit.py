"""Shared rate limiter instance.

Route modules apply ``@limiter.limit()`` without importing the application.
Signed-in users are limited per account, everyone else per client address.
"""

from jose import JWTError
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from translation_stats.auth.security import decode_token
from translation_stats.config import get_settings

# Mutating settings actions are rare; anything faster is scripted.
ACTION_LIMIT = "20/minute"


def _client_address(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return get_remote_address(request)


def _bearer_token(request: Request) -> str | None:
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() == "bearer" and token:
        return token
    return request.cookies.get(get_settings().auth_cookie_name)


def rate_limit_key(request: Request) -> str:
    """``user:<id>`` for a valid access token, else ``ip:<address>``."""
    token = _bearer_token(request)
    if token:
        try:
            subject = decode_token(token).get("sub")
        except JWTError:
            subject = None
        if subject:
            return f"user:{subject}"
    return f"ip:{_client_address(request)}"


limiter = Limiter(key_func=rate_limit_key, default_limits=["120/minute"])
