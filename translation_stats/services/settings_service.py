"""Service layer for the Translation Stats settings blob."""

import copy
import logging
from collections.abc import Mapping
from typing import Any

from translation_stats.config import Settings
from translation_stats.constants import PATH_PLUGINS, PATH_SETTINGS
from translation_stats.repositories.protocols import (
    OptionRepositoryProtocol,
    TransientStoreProtocol,
)
from translation_stats.services.settings_api import SettingsRegistry, get_path, set_path

logger = logging.getLogger(__name__)


class SettingsService:
    """Reads, saves, resets and removes the settings blob and its cache."""

    def __init__(
        self,
        options: OptionRepositoryProtocol,
        transients: TransientStoreProtocol,
        registry: SettingsRegistry,
        settings: Settings,
    ):
        self._options = options
        self._transients = transients
        self._registry = registry
        self._settings = settings

    @property
    def option_name(self) -> str:
        return self._settings.wp_option

    def settings_defaults(self) -> dict[str, Any]:
        """The default settings blob, as written on activation and reset."""
        return {PATH_SETTINGS: self._registry.defaults(PATH_SETTINGS)}

    async def get_settings_blob(self) -> dict[str, Any]:
        """Stored settings with defaults filled in for anything missing."""
        stored = await self._options.get(self.option_name)
        defaults = self.settings_defaults()
        if not isinstance(stored, Mapping):
            return {**defaults, PATH_PLUGINS: {}}

        blob = copy.deepcopy(dict(stored))
        stored_settings = blob.get(PATH_SETTINGS)
        if not isinstance(stored_settings, Mapping):
            stored_settings = {}
        blob[PATH_SETTINGS] = {**defaults[PATH_SETTINGS], **stored_settings}
        if not isinstance(blob.get(PATH_PLUGINS), Mapping):
            blob[PATH_PLUGINS] = {}
        return blob

    async def get_value(self, *path: str) -> Any:
        blob = await self.get_settings_blob()
        return get_path(blob, path)

    async def save_settings(self, form: Mapping[str, str]) -> dict[str, Any]:
        """Sanitize posted form values and merge them into the stored blob."""
        blob = await self.get_settings_blob()
        for settings_field in self._registry.fields():
            raw = form.get(settings_field.input_name)
            if not isinstance(raw, str):
                raw = None
            if settings_field.type == "hidden" and raw is None:
                continue
            current = get_path(blob, settings_field.path, settings_field.default)
            set_path(blob, settings_field.path, settings_field.sanitize(raw, current))

        await self._options.update(self.option_name, blob)
        logger.info("Settings saved option=%s", self.option_name)
        return blob

    async def reset_settings(self) -> dict[str, Any]:
        """Overwrite the stored blob with exactly the defaults."""
        defaults = self.settings_defaults()
        await self._options.update(self.option_name, defaults)
        logger.info("Settings reset to defaults option=%s", self.option_name)
        return defaults

    async def delete_transients(self) -> int:
        """Delete every Translation Stats transient; returns how many were removed."""
        return await self._transients.delete_prefix(self._settings.transients_prefix)

    async def activate(self) -> bool:
        """Create the settings blob with defaults if it does not exist yet."""
        created = await self._options.add(self.option_name, self.settings_defaults())
        if created:
            logger.info("Settings created with defaults option=%s", self.option_name)
        return created

    async def uninstall(self) -> bool:
        """Remove stored data when the user opted into it.

        Returns ``True`` if the settings and transients were deleted.
        """
        if not await self.get_value(PATH_SETTINGS, "delete_data_on_uninstall"):
            logger.info("Keeping settings on uninstall option=%s", self.option_name)
            return False

        await self._options.delete(self.option_name)
        deleted = await self.delete_transients()
        logger.info(
            "Deleted settings and %d transients on uninstall option=%s",
            deleted,
            self.option_name,
        )
        return True
