from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from musicplayer.db.base import Base, TimestampMixin


class Song(Base, TimestampMixin):
    """Catalog track belonging to exactly one artist."""

    artist_id = Column(Integer, ForeignKey("artists.id"), index=True, nullable=False)

    # Track details
    title = Column(String(255), index=True, nullable=False)
    duration = Column(String(10), nullable=True)  # "m:ss"
    genre = Column(String(100), nullable=True)
    release_year = Column(Integer, nullable=True)

    # Relationships
    artist = relationship("Artist", back_populates="songs")
