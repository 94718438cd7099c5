"""Pydantic request/response schemas."""

from translation_stats.schemas.auth import NonceResponse, TokenUser
from translation_stats.schemas.settings import ActionResponse, PluginSettings, SettingsBlob

__all__ = [
    "TokenUser",
    "NonceResponse",
    "PluginSettings",
    "SettingsBlob",
    "ActionResponse",
]
