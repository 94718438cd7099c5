"""Hidden section: values saved with the form but never shown."""

from translation_stats.config import Settings
from translation_stats.constants import PATH_SETTINGS, SECTION_HIDDEN
from translation_stats.services.settings_api import SettingsField, SettingsRegistry


def register(registry: SettingsRegistry, settings: Settings) -> None:
    registry.add_section(SECTION_HIDDEN, "", page=SECTION_HIDDEN)
    registry.register_setting(SECTION_HIDDEN, settings.wp_option)
    registry.add_field(
        SettingsField(
            section=SECTION_HIDDEN,
            path=(PATH_SETTINGS, "settings_version"),
            type="hidden",
            default=settings.settings_version,
        )
    )
