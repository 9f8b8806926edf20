"""
Service for managing playlists and the songs placed in them.
"""

import logging
from typing import List, Optional

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from musicplayer.core.exceptions import BadRequest, NotFound, store_errors
from musicplayer.db.models import Artist, Playlist, PlaylistSong, Song, User
from musicplayer.db.models.playlist import DEFAULT_COLOR_HEX
from musicplayer.schemas.playlist import PlaylistResponse, PlaylistSongResponse
from musicplayer.utils.datetime_helper import utc_now

logger = logging.getLogger(__name__)

# Sort key for songs added without an explicit position
APPEND_TRACK_ORDER = 999


def list_playlists(db: Session, user_id: int) -> List[PlaylistResponse]:
    """
    Get a user's playlists, newest first.

    Args:
        db: Database session
        user_id: Owner of the playlists

    Returns:
        Playlists annotated with the number of songs placed in each
    """
    with store_errors("Failed to fetch playlists", logger):
        rows = (
            db.query(
                Playlist.id,
                Playlist.user_id,
                Playlist.name,
                Playlist.description,
                Playlist.color_hex,
                func.count(PlaylistSong.id).label("count"),
                Playlist.created_at,
            )
            .outerjoin(PlaylistSong, PlaylistSong.playlist_id == Playlist.id)
            .filter(Playlist.user_id == user_id)
            .group_by(Playlist.id)
            .order_by(desc(Playlist.created_at), desc(Playlist.id))
            .all()
        )

    return [PlaylistResponse(**row._asdict()) for row in rows]


def get_playlist_songs(db: Session, playlist_id: int) -> List[PlaylistSongResponse]:
    """
    Get the songs of a playlist in display order.

    Songs sort by track_order; placements sharing a track_order keep the
    order in which they were added.
    """
    with store_errors("Failed to fetch playlist songs", logger):
        rows = (
            db.query(
                PlaylistSong.id.label("playlist_song_id"),
                Song.id.label("song_id"),
                Song.title,
                Artist.id.label("artist_id"),
                Artist.name.label("artist"),
                Song.duration,
                Song.genre,
                PlaylistSong.track_order,
                PlaylistSong.added_at,
            )
            .select_from(PlaylistSong)
            .join(Song, PlaylistSong.song_id == Song.id)
            .join(Artist, Song.artist_id == Artist.id)
            .filter(PlaylistSong.playlist_id == playlist_id)
            .order_by(PlaylistSong.track_order.asc(), PlaylistSong.id.asc())
            .all()
        )

    return [PlaylistSongResponse(**row._asdict()) for row in rows]


def create_playlist(
    db: Session,
    user_id: Optional[int],
    name: Optional[str],
    description: Optional[str] = None,
    color_hex: Optional[str] = None,
) -> int:
    """
    Create a new playlist.

    Args:
        db: Database session
        user_id: Owner of the playlist
        name: Display name; surrounding whitespace is dropped
        description: Optional description, empty when omitted
        color_hex: Optional display colour, DEFAULT_COLOR_HEX when omitted

    Returns:
        Id of the new playlist

    Raises:
        BadRequest: If user_id or name is missing
        NotFound: If the user does not exist
    """
    if not user_id or not name or not name.strip():
        raise BadRequest("user_id and name required")

    with store_errors("Failed to create playlist", logger, db):
        if db.get(User, user_id) is None:
            raise NotFound("User not found")

        playlist = Playlist(
            user_id=user_id,
            name=name.strip(),
            description=description or "",
            color_hex=color_hex or DEFAULT_COLOR_HEX,
        )
        db.add(playlist)
        db.commit()
        db.refresh(playlist)

    logger.info(f"Created playlist {playlist.id} for user {user_id}")
    return playlist.id


def add_song_to_playlist(
    db: Session,
    playlist_id: int,
    song_id: Optional[int],
    track_order: Optional[int] = None,
) -> int:
    """
    Place a song in a playlist.

    The same song may be added more than once. Without a track_order the
    song is placed at APPEND_TRACK_ORDER, after songs with smaller orders.

    Returns:
        Id of the new placement

    Raises:
        BadRequest: If song_id is missing
        NotFound: If the playlist or the song does not exist
    """
    if not song_id:
        raise BadRequest("song_id required")

    with store_errors("Failed to add song to playlist", logger, db):
        playlist = db.get(Playlist, playlist_id)
        if playlist is None:
            raise NotFound("Playlist not found")
        if db.get(Song, song_id) is None:
            raise NotFound("Song not found")

        placement = PlaylistSong(
            playlist_id=playlist_id,
            song_id=song_id,
            track_order=APPEND_TRACK_ORDER if track_order is None else track_order,
            added_at=utc_now(),
        )
        db.add(placement)
        playlist.updated_at = utc_now()
        db.commit()
        db.refresh(placement)

    logger.info(f"Added song {song_id} to playlist {playlist_id}")
    return placement.id


def delete_playlist(db: Session, playlist_id: int) -> None:
    """
    Delete a playlist together with its song placements.

    Raises:
        NotFound: If the playlist does not exist
    """
    with store_errors("Failed to delete playlist", logger, db):
        playlist = db.get(Playlist, playlist_id)
        if playlist is None:
            raise NotFound("Playlist not found")

        db.delete(playlist)
        db.commit()

    logger.info(f"Deleted playlist {playlist_id}")


def remove_song_from_playlist(
    db: Session, playlist_id: int, playlist_song_id: int
) -> None:
    """
    Remove one placement of a song from a playlist.

    Raises:
        NotFound: If the placement does not exist in this playlist
    """
    with store_errors("Failed to remove song from playlist", logger, db):
        placement = db.get(PlaylistSong, playlist_song_id)
        if placement is None or placement.playlist_id != playlist_id:
            raise NotFound("Playlist song not found")

        db.delete(placement)
        db.commit()

    logger.info(f"Removed placement {playlist_song_id} from playlist {playlist_id}")
