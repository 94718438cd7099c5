"""JWT token utilities.

Access tokens are issued by the site's identity provider; this module only
decodes them. Nonces (see ``translation_stats.auth.nonce``) are signed with the
same secret but carry ``type=nonce`` so one can never stand in for the other.
Token creation helpers for access tokens live in
``tests/helpers/token_factory.py`` and must never be imported from production
code.
"""

from typing import Any

from jose import jwt

from translation_stats.config import get_settings


def decode_token(token: str) -> dict[str, Any]:
    """Decode and validate a JWT token. Raises JWTError on failure."""
    settings = get_settings()
    return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])


def encode_token(claims: dict[str, Any]) -> str:
    """Sign *claims* with the application secret."""
    settings = get_settings()
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)
