"""Option model: the key-value configuration store."""

from typing import Any

from sqlalchemy import JSON, Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from translation_stats.models.base import Base, TimestampMixin


class Option(Base, TimestampMixin):
    """A named configuration value stored as one JSON document."""

    __tablename__ = "options"

    option_name: Mapped[str] = mapped_column(String(191), primary_key=True)
    option_value: Mapped[Any] = mapped_column(JSON, nullable=True)
    autoload: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
