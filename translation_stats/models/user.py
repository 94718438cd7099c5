"""User roles and the capabilities they grant.

Users are not stored here: identity comes from JWT claims. This module only
maps a role claim to the capabilities checked by the admin screens.
"""

import enum

from translation_stats.constants import MANAGE_OPTIONS


class UserRole(enum.StrEnum):
    """User roles for capability checks."""

    administrator = "administrator"
    editor = "editor"
    subscriber = "subscriber"


ROLE_CAPABILITIES: dict[UserRole, frozenset[str]] = {
    UserRole.administrator: frozenset({MANAGE_OPTIONS, "read"}),
    UserRole.editor: frozenset({"read"}),
    UserRole.subscriber: frozenset({"read"}),
}


def capabilities_for(role: str) -> frozenset[str]:
    """Return the capabilities of *role*; unknown roles get none."""
    try:
        return ROLE_CAPABILITIES[UserRole(role)]
    except ValueError:
        return frozenset()
