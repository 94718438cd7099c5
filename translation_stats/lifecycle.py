"""Activation and uninstall of the Translation Stats data."""

import logging

from translation_stats.config import Settings
from translation_stats.dependencies import InfrastructureContainer
from translation_stats.utils.audit import log_operator_action

logger = logging.getLogger(__name__)

COMMANDS = ("activate", "uninstall")


async def run(command: str, settings: Settings) -> bool:
    """Run ``activate`` or ``uninstall`` against the configured stores.

    Returns whatever the underlying service call returned: whether the
    settings were created (activate) or deleted (uninstall).
    """
    if command not in COMMANDS:
        raise ValueError(f"Unknown lifecycle command: {command}")

    infra = InfrastructureContainer.from_settings(settings)
    try:
        await infra.verify()
        async with infra.session_scope() as session:
            service = infra.settings_service(session, settings)
            if command == "activate":
                result = await service.activate()
            else:
                result = await service.uninstall()
    finally:
        await infra.close()

    logger.info("Lifecycle command %s finished result=%s", command, result)
    log_operator_action(command, result)
    return result
