"""Database models package."""

from translation_stats.models.base import Base
from translation_stats.models.option import Option
from translation_stats.models.user import ROLE_CAPABILITIES, UserRole, capabilities_for

__all__ = [
    # Base
    "Base",
    # Models
    "Option",
    # Roles
    "UserRole",
    "ROLE_CAPABILITIES",
    "capabilities_for",
]
