"""JSON endpoints for the Translation Stats settings."""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Request

from translation_stats.auth.dependencies import require_capability
from translation_stats.auth.nonce import check_admin_referer, create_nonce
from translation_stats.constants import (
    DELETE_TRANSIENTS_ACTION,
    MANAGE_OPTIONS,
    NONCE_ACTION,
    NONCE_HEADER,
    RESET_SETTINGS_ACTION,
)
from translation_stats.dependencies import AppSettings
from translation_stats.providers import SettingsSvc
from translation_stats.rate_limit import ACTION_LIMIT, limiter
from translation_stats.schemas.auth import NonceResponse, TokenUser
from translation_stats.schemas.settings import ActionResponse, SettingsBlob
from translation_stats.utils.audit import log_action

router = APIRouter()

Admin = Annotated[TokenUser, Depends(require_capability(MANAGE_OPTIONS))]
NonceHeader = Annotated[str | None, Header(alias=NONCE_HEADER)]


@router.get("/settings", response_model=SettingsBlob)
async def get_settings_blob(_user: Admin, service: SettingsSvc) -> SettingsBlob:
    """Stored settings with defaults filled in."""
    return SettingsBlob.model_validate(await service.get_settings_blob())


@router.get("/settings/defaults", response_model=SettingsBlob)
async def get_settings_defaults(_user: Admin, service: SettingsSvc) -> SettingsBlob:
    return SettingsBlob.model_validate(service.settings_defaults())


@router.get("/nonce", response_model=NonceResponse)
async def issue_nonce(user: Admin, settings: AppSettings) -> NonceResponse:
    """Issue an anti-forgery token for the settings actions."""
    return NonceResponse(
        action=NONCE_ACTION,
        nonce=create_nonce(NONCE_ACTION, user.id),
        expires_in=settings.nonce_lifetime_seconds,
    )


@router.post("/settings/reset", response_model=ActionResponse)
@limiter.limit(ACTION_LIMIT)
async def reset_settings(
    request: Request, user: Admin, service: SettingsSvc, nonce: NonceHeader = None
) -> ActionResponse:
    """Overwrite the stored settings with the defaults."""
    check_admin_referer(nonce, NONCE_ACTION, user)
    defaults = await service.reset_settings()
    log_action(request, user.username, user.role, RESET_SETTINGS_ACTION)
    return ActionResponse(
        message="Settings restored successfully.",
        settings=SettingsBlob.model_validate(defaults),
    )


@router.delete("/transients", response_model=ActionResponse)
@limiter.limit(ACTION_LIMIT)
async def delete_transients(
    request: Request, user: Admin, service: SettingsSvc, nonce: NonceHeader = None
) -> ActionResponse:
    """Delete every cached Translation Stats transient."""
    check_admin_referer(nonce, NONCE_ACTION, user)
    deleted = await service.delete_transients()
    log_action(request, user.username, user.role, DELETE_TRANSIENTS_ACTION)
    return ActionResponse(message="Cache cleaned successfully.", deleted=deleted)
