"""Settings sections of the Translation Stats options page."""

from translation_stats.config import Settings
from translation_stats.sections import general, hidden, plugins, tools
from translation_stats.services.settings_api import SettingsRegistry


def build_registry(settings: Settings) -> SettingsRegistry:
    """Register every section in the order the tabs display them."""
    registry = SettingsRegistry()
    plugins.register(registry, settings)
    general.register(registry, settings)
    tools.register(registry, settings)
    hidden.register(registry, settings)
    return registry


__all__ = ["build_registry"]
