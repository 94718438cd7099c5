"""Protocol definitions for storage interfaces.

These protocols enable type-safe fakes in tests and decouple the settings
service from the concrete SQLAlchemy and Redis implementations.
"""

from typing import Any, Protocol

from translation_stats.models.option import Option


class OptionRepositoryProtocol(Protocol):
    """Interface for the key-value options store."""

    async def get(self, name: str, default: Any = None) -> Any: ...

    async def add(self, name: str, value: Any, autoload: bool = True) -> bool: ...

    async def update(self, name: str, value: Any) -> Option: ...

    async def delete(self, name: str) -> bool: ...


class TransientStoreProtocol(Protocol):
    """Interface for the expiring cache."""

    async def get(self, name: str) -> Any: ...

    async def set(self, name: str, value: Any, expiration: int = 0) -> None: ...

    async def delete(self, name: str) -> bool: ...

    async def delete_prefix(self, prefix: str) -> int: ...
