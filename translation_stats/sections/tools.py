"""Tools sections: uninstall behavior, reset to defaults, and the cache."""

from translation_stats.config import DAY_IN_SECONDS, WEEK_IN_SECONDS, Settings
from translation_stats.constants import (
    PATH_SETTINGS,
    SECTION_TOOLS_SETTINGS,
    SECTION_TOOLS_TRANSIENTS,
)
from translation_stats.services.settings_api import SelectOption, SettingsField, SettingsRegistry

HOUR_IN_SECONDS = 60 * 60

EXPIRATION_OPTIONS = [
    SelectOption(str(HOUR_IN_SECONDS), "1 hour"),
    SelectOption(str(6 * HOUR_IN_SECONDS), "6 hours"),
    SelectOption(str(12 * HOUR_IN_SECONDS), "12 hours"),
    SelectOption(str(DAY_IN_SECONDS), "1 day"),
    SelectOption(str(WEEK_IN_SECONDS), "1 week"),
]


def register(registry: SettingsRegistry, settings: Settings) -> None:
    registry.add_section(SECTION_TOOLS_SETTINGS, "Settings", page=SECTION_TOOLS_SETTINGS)
    registry.register_setting(SECTION_TOOLS_SETTINGS, settings.wp_option)
    registry.add_field(
        SettingsField(
            section=SECTION_TOOLS_SETTINGS,
            path=(PATH_SETTINGS, "delete_data_on_uninstall"),
            type="checkbox",
            title="Delete Data",
            label="Delete plugin data on uninstall",
            description="Check this to delete all settings and cached data when the plugin is uninstalled.",
            default=True,
        )
    )

    registry.add_section(
        SECTION_TOOLS_TRANSIENTS,
        "Cache",
        page=SECTION_TOOLS_TRANSIENTS,
        description="Translation stats are cached to avoid repeated requests to translate.wordpress.org.",
    )
    registry.register_setting(SECTION_TOOLS_TRANSIENTS, settings.wp_option)
    registry.add_field(
        SettingsField(
            section=SECTION_TOOLS_TRANSIENTS,
            path=(PATH_SETTINGS, "transients_expiration"),
            type="select",
            title="Cache Expiration",
            label="Select cache expiration",
            description="Time to keep the translation stats in cache.",
            default=settings.transients_translations_expiration,
            select_options=EXPIRATION_OPTIONS,
        )
    )
