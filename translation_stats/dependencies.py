"""Storage wiring for the options table and the transients cache.

The web app creates these resources in its lifespan and hands them out per
request. Scripts build the same resources through ``InfrastructureContainer``.
"""

import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request
from redis.asyncio import Redis
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from translation_stats.config import Settings, get_settings
from translation_stats.repositories.option_repository import OptionRepository
from translation_stats.sections import build_registry
from translation_stats.services.settings_service import SettingsService
from translation_stats.services.transients import TransientStore

logger = logging.getLogger(__name__)


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine for the options table. SQLite URLs get no pool sizing."""
    options: dict = {"pool_pre_ping": True, "echo": settings.debug}
    if not settings.database_url.startswith("sqlite"):
        options.update(pool_size=settings.db_pool_size, max_overflow=settings.db_max_overflow)
    return create_async_engine(str(settings.database_url), **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


def create_redis(settings: Settings) -> Redis:
    """Client for the transients cache; values are JSON text."""
    return Redis.from_url(str(settings.redis_url), decode_responses=True)


@asynccontextmanager
async def _unit_of_work(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    # Repositories only flush; the option write lands here or not at all.
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# ---------------------------------------------------------------------------
# Request-scoped dependencies (resources live on app.state)
# ---------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """One session per request, committed when the handler returns cleanly."""
    async with _unit_of_work(request.app.state.session_factory) as session:
        yield session


async def get_redis(request: Request) -> Redis:
    return request.app.state.redis


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
RedisClient = Annotated[Redis, Depends(get_redis)]
AppSettings = Annotated[Settings, Depends(get_settings)]


# ---------------------------------------------------------------------------
# Owned resources for the lifespan and for scripts
# ---------------------------------------------------------------------------


@dataclass
class InfrastructureContainer:
    """Engine, session factory and Redis client, created and closed together."""

    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    redis: Redis

    @classmethod
    def from_settings(cls, settings: Settings) -> "InfrastructureContainer":
        engine = create_engine(settings)
        try:
            redis = create_redis(settings)
        except Exception:
            logger.exception("Failed to initialise Redis client")
            raise
        return cls(engine=engine, session_factory=create_session_factory(engine), redis=redis)

    async def verify(self) -> None:
        """Fail fast when the options table or the cache is unreachable."""
        async with self.session_factory() as session:
            await session.execute(text("SELECT 1"))
        await self.redis.ping()  # type: ignore[misc]  # redis.asyncio typing quirk
        logger.info("Options store and transients cache reachable")

    def session_scope(self):
        """Async context manager yielding a session committed on success."""
        return _unit_of_work(self.session_factory)

    def settings_service(self, session: AsyncSession, settings: Settings) -> SettingsService:
        """Settings service bound to *session* and this container's cache."""
        return SettingsService(
            OptionRepository(session),
            TransientStore(self.redis),
            build_registry(settings),
            settings,
        )

    async def close(self) -> None:
        try:
            await self.redis.aclose()
        finally:
            await self.engine.dispose()
