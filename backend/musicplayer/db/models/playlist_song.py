from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship

from musicplayer.db.base import Base
from musicplayer.utils.datetime_helper import utc_now


class PlaylistSong(Base):
    """Placement of a song in a playlist.

    The same song may be placed several times; track_order is neither dense
    nor unique, so the row id breaks ties.
    """

    __table_args__ = (
        Index("ix_playlist_songs_playlist_order", "playlist_id", "track_order"),
    )

    playlist_id = Column(
        Integer, ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False
    )
    song_id = Column(Integer, ForeignKey("songs.id"), index=True, nullable=False)

    track_order = Column(Integer, nullable=False)
    added_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    # Relationships
    playlist = relationship("Playlist", back_populates="songs")
    song = relationship("Song")
