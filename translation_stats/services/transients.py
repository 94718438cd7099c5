"""Redis-backed transients: named cache entries with an optional expiration.

Each transient is stored as a JSON string under ``transient:<name>``. An
expiration of ``0`` keeps the entry until it is deleted explicitly.

Usage::

    store = TransientStore(redis)
    await store.set("translation_stats_plugin_locales", locales, WEEK_IN_SECONDS)
    await store.delete_prefix("translation_stats_plugin_")
"""

import json
import logging
import re
from typing import Any

from redis.asyncio import Redis

from translation_stats.constants import TRANSIENT_KEY_PREFIX

logger = logging.getLogger(__name__)

_SCAN_COUNT = 500

# Redis MATCH treats these as glob syntax.
_GLOB_SPECIAL = re.compile(r"([*?\[\]\\])")


def _key(name: str) -> str:
    return f"{TRANSIENT_KEY_PREFIX}{name}"


class TransientStore:
    """Expiring key-value cache on top of an async Redis client."""

    def __init__(self, redis: Redis):
        self._redis = redis

    async def get(self, name: str) -> Any:
        """Return the cached value, or ``None`` if absent or expired."""
        raw = await self._redis.get(_key(name))
        if raw is None:
            return None
        return json.loads(raw)

    async def set(self, name: str, value: Any, expiration: int = 0) -> None:
        """Cache *value* for *expiration* seconds (``0`` = no expiry)."""
        payload = json.dumps(value)
        if expiration > 0:
            await self._redis.setex(_key(name), expiration, payload)
        else:
            await self._redis.set(_key(name), payload)

    async def delete(self, name: str) -> bool:
        """Delete one transient. Returns ``True`` if it existed."""
        return await self._redis.delete(_key(name)) > 0

    async def delete_prefix(self, prefix: str) -> int:
        """Delete every transient whose name starts with *prefix*.

        Glob characters in *prefix* are matched literally.

        Returns the number of entries removed.
        """
        keys = [
            key
            async for key in self._redis.scan_iter(
                match=_GLOB_SPECIAL.sub(r"\\\1", _key(prefix)) + "*", count=_SCAN_COUNT
            )
        ]
        if not keys:
            return 0
        deleted = await self._redis.delete(*keys)
        logger.info("Deleted %d transients with prefix %s", deleted, prefix)
        return deleted
