from sqlalchemy import CheckConstraint, Column, String, Text
from sqlalchemy.orm import relationship

from musicplayer.db.base import Base, TimestampMixin


class Artist(Base, TimestampMixin):
    """Performer in the catalog."""

    __table_args__ = (
        CheckConstraint("length(name) > 0", name="ck_artists_name_not_empty"),
    )

    name = Column(String(255), index=True, nullable=False)
    bio = Column(Text, nullable=True)

    # Relationships
    songs = relationship("Song", back_populates="artist", order_by="Song.title")
