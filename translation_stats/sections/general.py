"""General settings section: warnings and translation language."""

from translation_stats.config import Settings
from translation_stats.constants import PATH_SETTINGS, SECTION_GENERAL, SITE_DEFAULT_LANGUAGE
from translation_stats.locales import LOCALES, get_locale
from translation_stats.services.settings_api import SelectOption, SettingsField, SettingsRegistry


def language_options(site_locale: str) -> list[SelectOption]:
    """The site default entry followed by every known locale."""
    site = get_locale(site_locale)
    site_label = site.native_name if site else site_locale
    options = [SelectOption(SITE_DEFAULT_LANGUAGE, f"Site default ({site_label})")]
    options.extend(
        SelectOption(locale.wp_locale, f"{locale.native_name} [{locale.wp_locale}]")
        for locale in LOCALES
    )
    return options


def register(registry: SettingsRegistry, settings: Settings) -> None:
    registry.add_section(SECTION_GENERAL, "General Settings", page=SECTION_GENERAL)
    registry.register_setting(SECTION_GENERAL, settings.wp_option)

    registry.add_field(
        SettingsField(
            section=SECTION_GENERAL,
            path=(PATH_SETTINGS, "show_warnings"),
            type="checkbox",
            title="Warnings",
            label="Show translation project warnings",
            description=(
                "Check this to show translation project error messages for selected plugins."
            ),
            helper="Need help?",
            default=True,
        )
    )
    registry.add_field(
        SettingsField(
            section=SECTION_GENERAL,
            path=(PATH_SETTINGS, "translation_language"),
            type="select",
            title="Translation Language",
            label="Select translation language",
            description="Select the language for which you want to show the translation stats.",
            helper="Need help?",
            default=SITE_DEFAULT_LANGUAGE,
            select_options=language_options(settings.site_locale),
        )
    )
