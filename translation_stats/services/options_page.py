"""The Translation Stats options page: tabs, tools actions and sidebar."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from translation_stats.auth.dependencies import current_user_can
from translation_stats.auth.nonce import check_admin_referer, create_nonce
from translation_stats.constants import (
    DELETE_TRANSIENTS_ACTION,
    MANAGE_OPTIONS,
    NONCE_ACTION,
    NONCE_FIELD,
    RESET_SETTINGS_ACTION,
    SECTION_GENERAL,
    SECTION_HIDDEN,
    SECTION_PLUGINS,
    SECTION_TOOLS_SETTINGS,
    SECTION_TOOLS_TRANSIENTS,
)
from translation_stats.errors import PermissionDeniedError
from translation_stats.schemas.auth import TokenUser
from translation_stats.services.notices import Notice, success
from translation_stats.services.settings_api import SettingsRegistry, SettingsSection
from translation_stats.services.settings_service import SettingsService
from translation_stats.services.widgets import AboutWidget


@dataclass(frozen=True)
class Tab:
    slug: str
    label: str
    icon: str
    pages: tuple[str, ...]


TABS: tuple[Tab, ...] = (
    Tab("plugins", "Plugins", "dashicons-admin-plugins", (SECTION_PLUGINS,)),
    Tab("settings", "Settings", "dashicons-admin-settings", (SECTION_GENERAL,)),
    Tab(
        "tools",
        "Tools",
        "dashicons-admin-tools",
        (SECTION_TOOLS_SETTINGS, SECTION_TOOLS_TRANSIENTS),
    ),
)


@dataclass
class OptionsPageContext:
    """Everything the options page template needs."""

    title: str
    intro: str
    tabs: list[tuple[Tab, list[SettingsSection]]]
    hidden_sections: list[SettingsSection]
    blob: dict[str, Any]
    nonce: str
    nonce_field: str = NONCE_FIELD
    notices: list[Notice] = field(default_factory=list)
    widgets: list[AboutWidget] = field(default_factory=list)
    reset_action: str = RESET_SETTINGS_ACTION
    delete_transients_action: str = DELETE_TRANSIENTS_ACTION


class OptionsPage:
    """Builds the options page and runs its tools actions.

    The reset and delete-transients actions are posted to the page itself, so
    they run before the page renders and their notices appear on top.
    """

    title = "Translation Stats"
    intro = "Customize the translation stats you want to show."

    def __init__(
        self,
        service: SettingsService,
        registry: SettingsRegistry,
        widgets: list[AboutWidget] | None = None,
    ):
        self._service = service
        self._registry = registry
        self._widgets = widgets or []

    async def settings_reset_callback(
        self, form: Mapping[str, str], user: TokenUser
    ) -> Notice | None:
        if RESET_SETTINGS_ACTION not in form:
            return None
        check_admin_referer(form.get(NONCE_FIELD), NONCE_ACTION, user)
        await self._service.reset_settings()
        return success("Settings restored successfully.")

    async def transients_delete_callback(
        self, form: Mapping[str, str], user: TokenUser
    ) -> Notice | None:
        if DELETE_TRANSIENTS_ACTION not in form:
            return None
        check_admin_referer(form.get(NONCE_FIELD), NONCE_ACTION, user)
        await self._service.delete_transients()
        return success("Cache cleaned successfully.")

    async def build(
        self,
        user: TokenUser,
        form: Mapping[str, str] | None = None,
        settings_updated: bool = False,
    ) -> OptionsPageContext:
        """Check the capability, run posted actions, and assemble the page.

        Raises:
            PermissionDeniedError: *user* cannot manage options.
            NonceVerificationError: A tools action was posted without a valid nonce.
        """
        if not current_user_can(user, MANAGE_OPTIONS):
            raise PermissionDeniedError(MANAGE_OPTIONS)

        notices: list[Notice] = []
        if form:
            for callback in (self.settings_reset_callback, self.transients_delete_callback):
                notice = await callback(form, user)
                if notice is not None:
                    notices.append(notice)
        if settings_updated:
            notices.append(success("Settings saved."))

        tabs = [
            (tab, [s for page in tab.pages for s in self._registry.sections_for(page)])
            for tab in TABS
        ]
        return OptionsPageContext(
            title=self.title,
            intro=self.intro,
            tabs=tabs,
            hidden_sections=self._registry.sections_for(SECTION_HIDDEN),
            blob=await self._service.get_settings_blob(),
            nonce=create_nonce(NONCE_ACTION, user.id),
            notices=notices,
            widgets=self._widgets,
        )
