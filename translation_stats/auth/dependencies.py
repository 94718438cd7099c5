"""FastAPI dependencies for authentication and capability checks."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from translation_stats.auth.security import decode_token
from translation_stats.config import get_settings
from translation_stats.errors import PermissionDeniedError
from translation_stats.models.user import capabilities_for
from translation_stats.schemas.auth import TokenUser

# Tokens are issued by the site's identity provider. The tokenUrl below is used
# only for Swagger UI's "Authorize" dialog. auto_error is off so the admin pages
# can fall back to the session cookie.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


async def get_current_user(
    request: Request,
    token: Annotated[str | None, Depends(oauth2_scheme)],
) -> TokenUser:
    """Decode the bearer token (or session cookie) and return its user."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if not token:
        token = request.cookies.get(get_settings().auth_cookie_name)
    if not token:
        raise credentials_exception

    try:
        payload = decode_token(token)
        user_id: str | None = payload.get("sub")
        token_type: str | None = payload.get("type")
        if user_id is None or token_type != "access":
            raise credentials_exception
    except JWTError as exc:
        raise credentials_exception from exc

    return TokenUser(
        id=user_id,
        username=payload.get("username", ""),
        role=payload.get("role", ""),
        email=payload.get("email", ""),
    )


# Convenience type alias
CurrentUser = Annotated[TokenUser, Depends(get_current_user)]


def current_user_can(user: TokenUser, capability: str) -> bool:
    """Whether *user*'s role grants *capability*."""
    return capability in capabilities_for(user.role)


def require_capability(capability: str):
    """Dependency factory that enforces a capability.

    Usage:
        @router.get("/settings", dependencies=[Depends(require_capability("manage_options"))])
    """

    async def _check_capability(current_user: CurrentUser) -> TokenUser:
        if not current_user_can(current_user, capability):
            raise PermissionDeniedError(capability)
        return current_user

    return _check_capability
