"""Activate or uninstall Translation Stats data.

    python scripts/manage.py activate     # create settings with defaults if absent
    python scripts/manage.py uninstall    # delete settings and cache if opted in
"""
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from translation_stats.config import get_settings
from translation_stats.lifecycle import COMMANDS, run
from translation_stats.utils.logging import setup_logging


async def main(command: str) -> None:
    """Main entry point."""
    settings = get_settings()
    setup_logging(settings.log_level, "console")

    result = await run(command, settings)
    if command == "activate":
        print("Settings created with defaults." if result else "Settings already exist.")
    else:
        print("Settings and cache deleted." if result else "Data kept (delete on uninstall is off).")


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in COMMANDS:
        print(__doc__)
        sys.exit(2)
    asyncio.run(main(sys.argv[1]))
