"""Pydantic schemas for the Translation Stats settings blob."""

from typing import Any

from pydantic import BaseModel, Field


class PluginSettings(BaseModel):
    """Per-plugin options stored under the ``plugins`` path."""

    enabled: bool = False


class SettingsBlob(BaseModel):
    """The whole settings record, as stored under the settings option."""

    settings: dict[str, Any] = Field(default_factory=dict)
    plugins: dict[str, PluginSettings] = Field(default_factory=dict)


class ActionResponse(BaseModel):
    """Result of a tools action (reset or cache clean)."""

    message: str
    settings: SettingsBlob | None = None
    deleted: int | None = None
