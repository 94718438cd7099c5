"""Plugins section: choose which installed plugins show translation stats."""

from translation_stats.config import Settings
from translation_stats.constants import PATH_PLUGINS, SECTION_PLUGINS
from translation_stats.services.settings_api import SettingsField, SettingsRegistry


def register(registry: SettingsRegistry, settings: Settings) -> None:
    registry.add_section(
        SECTION_PLUGINS,
        "Plugins",
        page=SECTION_PLUGINS,
        description="Select the plugins for which you want to show the translation stats.",
    )
    registry.register_setting(SECTION_PLUGINS, settings.wp_option)

    for plugin in sorted(settings.installed_plugins, key=lambda p: p.name.lower()):
        registry.add_field(
            SettingsField(
                section=SECTION_PLUGINS,
                path=(PATH_PLUGINS, plugin.slug, "enabled"),
                type="checkbox",
                title=plugin.name,
                label=f"Show translation stats for {plugin.name}",
                css_class="tstats-plugin",
                default=False,
            )
        )
