import re

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, declared_attr

from musicplayer.utils.datetime_helper import utc_now


def table_name_for(class_name: str) -> str:
    """PlaylistSong -> playlist_songs."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", class_name).lower() + "s"


class Base(DeclarativeBase):
    """Base class for all models."""

    id = Column(Integer, primary_key=True, autoincrement=True)

    @declared_attr.directive
    def __tablename__(cls):
        return table_name_for(cls.__name__)


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamps."""

    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )
