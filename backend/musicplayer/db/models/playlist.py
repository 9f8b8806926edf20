from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from musicplayer.db.base import Base, TimestampMixin

DEFAULT_COLOR_HEX = "#a855f7"


class Playlist(Base, TimestampMixin):
    """Playlist owned by a single user."""

    __table_args__ = (
        CheckConstraint("length(name) > 0", name="ck_playlists_name_not_empty"),
    )

    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )

    # Playlist details
    name = Column(String(100), nullable=False)
    description = Column(Text, default="", nullable=False)
    color_hex = Column(String(7), default=DEFAULT_COLOR_HEX, nullable=False)

    # Relationships
    user = relationship("User", back_populates="playlists")
    songs = relationship(
        "PlaylistSong",
        back_populates="playlist",
        cascade="all, delete-orphan",
        order_by="(PlaylistSong.track_order, PlaylistSong.id)",
    )
