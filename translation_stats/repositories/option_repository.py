"""Repository for the key-value options store."""

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from translation_stats.models.option import Option


class OptionRepository:
    """Async data access layer for named options."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, name: str, default: Any = None) -> Any:
        """Get an option value by name, returning *default* if not found."""
        result = await self.session.execute(
            select(Option.option_value).where(Option.option_name == name)
        )
        value = result.scalar_one_or_none()
        return value if value is not None else default

    async def add(self, name: str, value: Any, autoload: bool = True) -> bool:
        """Store *value* under *name* only if no such option exists yet."""
        result = await self.session.execute(select(Option).where(Option.option_name == name))
        if result.scalar_one_or_none() is not None:
            return False

        self.session.add(Option(option_name=name, option_value=value, autoload=autoload))
        await self.session.flush()
        return True

    async def update(self, name: str, value: Any) -> Option:
        """Insert or replace the value stored under *name*."""
        result = await self.session.execute(select(Option).where(Option.option_name == name))
        option = result.scalar_one_or_none()

        if option is None:
            option = Option(option_name=name, option_value=value, autoload=True)
            self.session.add(option)
        else:
            option.option_value = value

        await self.session.flush()
        await self.session.refresh(option)
        return option

    async def delete(self, name: str) -> bool:
        """Remove the option; returns ``False`` if it did not exist."""
        result = await self.session.execute(delete(Option).where(Option.option_name == name))
        await self.session.flush()
        return bool(result.rowcount)
