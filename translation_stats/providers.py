"""FastAPI dependency providers for repositories and services.

Separated from ``dependencies.py`` so route modules import service aliases
from one place and tests override a single provider per concern.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from translation_stats.config import get_settings
from translation_stats.dependencies import AppSettings, DBSession, RedisClient
from translation_stats.repositories.option_repository import OptionRepository
from translation_stats.repositories.protocols import (
    OptionRepositoryProtocol,
    TransientStoreProtocol,
)
from translation_stats.sections import build_registry
from translation_stats.services.options_page import OptionsPage
from translation_stats.services.settings_api import SettingsRegistry
from translation_stats.services.settings_service import SettingsService
from translation_stats.services.transients import TransientStore
from translation_stats.services.widgets import AboutWidget

# ---------------------------------------------------------------------------
# Storage providers
# ---------------------------------------------------------------------------


def get_option_repository(db: DBSession) -> OptionRepositoryProtocol:
    return OptionRepository(db)


def get_transient_store(redis: RedisClient) -> TransientStoreProtocol:
    return TransientStore(redis)


@lru_cache
def get_settings_registry() -> SettingsRegistry:
    """Sections and fields are declared once per process."""
    return build_registry(get_settings())


OptionRepo = Annotated[OptionRepositoryProtocol, Depends(get_option_repository)]
Transients = Annotated[TransientStoreProtocol, Depends(get_transient_store)]
Registry = Annotated[SettingsRegistry, Depends(get_settings_registry)]

# ---------------------------------------------------------------------------
# Service providers
# ---------------------------------------------------------------------------


def get_settings_service(
    options: OptionRepo, transients: Transients, registry: Registry, settings: AppSettings
) -> SettingsService:
    return SettingsService(options, transients, registry, settings)


SettingsSvc = Annotated[SettingsService, Depends(get_settings_service)]


def get_options_page(
    service: SettingsSvc, registry: Registry, settings: AppSettings
) -> OptionsPage:
    about = AboutWidget(site_url=settings.external_link_url, version=settings.plugin_version)
    return OptionsPage(service, registry, widgets=[about])


OptionsPageSvc = Annotated[OptionsPage, Depends(get_options_page)]
