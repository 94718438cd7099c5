"""Storage repositories for data access."""
from translation_stats.repositories.option_repository import OptionRepository

__all__ = [
    "OptionRepository",
]
