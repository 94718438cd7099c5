"""Server-rendered admin screens: the options page and its form handlers."""

import logging
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from translation_stats.auth.dependencies import CurrentUser, require_capability
from translation_stats.auth.nonce import check_admin_referer
from translation_stats.constants import (
    DELETE_TRANSIENTS_ACTION,
    MANAGE_OPTIONS,
    NONCE_ACTION,
    NONCE_FIELD,
    RESET_SETTINGS_ACTION,
)
from translation_stats.dependencies import AppSettings
from translation_stats.providers import OptionsPageSvc, SettingsSvc
from translation_stats.schemas.auth import TokenUser
from translation_stats.services.options_page import OptionsPageContext
from translation_stats.templating import templates
from translation_stats.utils.audit import log_action

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Admin"])

OPTIONS_PAGE_PATH = "/admin/translation-stats"
OPTIONS_SAVE_PATH = "/options.php"


def _render(request: Request, page: OptionsPageContext) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "options_page.html",
        {"page": page, "page_url": OPTIONS_PAGE_PATH, "save_url": OPTIONS_SAVE_PATH},
    )


@router.get("/options-general.php", response_class=HTMLResponse)
async def options_general(
    request: Request,
    user: CurrentUser,
    options_page: OptionsPageSvc,
    settings: AppSettings,
    page: str = Query(...),
    settings_updated: bool = Query(False, alias="settings-updated"),
) -> HTMLResponse:
    """The Settings > Translation Stats menu entry."""
    if page != settings.settings_page:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")
    context = await options_page.build(user, settings_updated=settings_updated)
    return _render(request, context)


@router.get(OPTIONS_PAGE_PATH, response_class=HTMLResponse)
async def show_options_page(
    request: Request,
    user: CurrentUser,
    options_page: OptionsPageSvc,
    settings_updated: bool = Query(False, alias="settings-updated"),
) -> HTMLResponse:
    context = await options_page.build(user, settings_updated=settings_updated)
    return _render(request, context)


@router.post(OPTIONS_PAGE_PATH, response_class=HTMLResponse)
async def post_options_page(
    request: Request,
    user: CurrentUser,
    options_page: OptionsPageSvc,
) -> HTMLResponse:
    """Tools actions (reset, clean cache) are posted back to the page itself."""
    form = await request.form()
    context = await options_page.build(user, form=form)
    for action in (RESET_SETTINGS_ACTION, DELETE_TRANSIENTS_ACTION):
        if action in form:
            log_action(request, user.username, user.role, action)
    return _render(request, context)


@router.post(OPTIONS_SAVE_PATH)
async def save_options(
    request: Request,
    service: SettingsSvc,
    settings: AppSettings,
    user: TokenUser = Depends(require_capability(MANAGE_OPTIONS)),
) -> RedirectResponse:
    """Save the settings form, then send the user back to the options page."""
    form = await request.form()
    check_admin_referer(form.get(NONCE_FIELD), NONCE_ACTION, user)
    await service.save_settings(form)
    log_action(request, user.username, user.role, "save_settings")

    query = urlencode({"page": settings.settings_page, "settings-updated": "true"})
    return RedirectResponse(
        url=f"/options-general.php?{query}", status_code=status.HTTP_303_SEE_OTHER
    )
