"""Pydantic schemas for authentication."""

from pydantic import BaseModel


class TokenUser(BaseModel):
    """Lightweight user representation from JWT claims. No DB query needed."""

    id: str
    username: str
    role: str
    email: str = ""


class NonceResponse(BaseModel):
    """A freshly issued anti-forgery token."""

    action: str
    nonce: str
    expires_in: int
