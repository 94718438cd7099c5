"""Anti-forgery tokens for the settings screens.

A nonce is a short-lived signed token bound to one action name and one user.
Every mutating settings action verifies it before touching any stored data.
"""

import logging
import uuid
from datetime import UTC, datetime, timedelta

from jose import JWTError

from translation_stats.auth.security import decode_token, encode_token
from translation_stats.config import get_settings
from translation_stats.errors import NonceVerificationError
from translation_stats.schemas.auth import TokenUser

logger = logging.getLogger(__name__)

_NONCE_TYPE = "nonce"


def create_nonce(action: str, user_id: str) -> str:
    """Issue a nonce for *action* on behalf of *user_id*."""
    settings = get_settings()
    expire = datetime.now(UTC) + timedelta(seconds=settings.nonce_lifetime_seconds)
    return encode_token(
        {
            "sub": user_id,
            "action": action,
            "type": _NONCE_TYPE,
            "jti": uuid.uuid4().hex,
            "exp": expire,
        }
    )


def verify_nonce(token: object, action: str, user_id: str) -> bool:
    """Return ``True`` only if *token* is a live nonce for *action* and *user_id*.

    Form values may be file uploads rather than text; those never verify.
    """
    if not isinstance(token, str) or not token:
        return False
    try:
        payload = decode_token(token)
    except JWTError:
        return False
    return (
        payload.get("type") == _NONCE_TYPE
        and payload.get("action") == action
        and payload.get("sub") == user_id
    )


def check_admin_referer(token: object, action: str, user: TokenUser) -> None:
    """Halt the request unless *token* verifies for *action* and *user*.

    Raises:
        NonceVerificationError: The token is missing, expired, forged, or was
            issued for a different action or user.
    """
    if not verify_nonce(token, action, user.id):
        logger.warning("Nonce verification failed action=%s user=%s", action, user.username)
        raise NonceVerificationError(action)
