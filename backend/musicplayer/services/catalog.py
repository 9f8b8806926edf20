"""
Read-only queries over the artist and song catalog.
"""

import logging
from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from musicplayer.core.exceptions import NotFound, store_errors
from musicplayer.db.models import Artist, Song
from musicplayer.schemas.catalog import ArtistResponse, SongResponse

logger = logging.getLogger(__name__)

SONG_SEARCH_LIMIT = 20
ARTIST_SEARCH_LIMIT = 10


def _song_rows(db: Session) -> Query:
    """Songs joined with their artist, carrying the artist name as ``artist``."""
    return db.query(
        Song.id,
        Song.title,
        Song.artist_id,
        Artist.name.label("artist"),
        Song.duration,
        Song.genre,
        Song.release_year,
        Song.created_at,
    ).join(Artist, Song.artist_id == Artist.id)


def list_artists(db: Session) -> List[ArtistResponse]:
    """Return every artist ordered by name."""
    with store_errors("Failed to fetch artists", logger):
        artists = db.query(Artist).order_by(Artist.name.asc(), Artist.id.asc()).all()

    return [ArtistResponse.model_validate(artist) for artist in artists]


def get_artist(db: Session, artist_id: int) -> ArtistResponse:
    """
    Return a single artist.

    Raises:
        NotFound: If no artist has this id
    """
    with store_errors("Failed to fetch artist", logger):
        artist = db.query(Artist).filter(Artist.id == artist_id).first()

    if artist is None:
        raise NotFound("Artist not found")
    return ArtistResponse.model_validate(artist)


def list_songs(db: Session) -> List[SongResponse]:
    """Return every song, ordered by artist name and then title."""
    with store_errors("Failed to fetch songs", logger):
        rows = _song_rows(db).order_by(Artist.name.asc(), Song.title.asc()).all()

    return [SongResponse(**row._asdict()) for row in rows]


def get_song(db: Session, song_id: int) -> SongResponse:
    """
    Return a single song with its artist.

    Raises:
        NotFound: If no song has this id
    """
    with store_errors("Failed to fetch song", logger):
        row = _song_rows(db).filter(Song.id == song_id).first()

    if row is None:
        raise NotFound("Song not found")
    return SongResponse(**row._asdict())


def list_songs_by_artist(db: Session, artist_id: int) -> List[SongResponse]:
    """Return one artist's songs by title; unknown artists simply have none."""
    with store_errors("Failed to fetch songs", logger):
        rows = (
            _song_rows(db)
            .filter(Song.artist_id == artist_id)
            .order_by(Song.title.asc(), Song.id.asc())
            .all()
        )

    return [SongResponse(**row._asdict()) for row in rows]


def search(
    db: Session, term: Optional[str]
) -> Tuple[List[SongResponse], List[ArtistResponse]]:
    """
    Case-insensitive substring search over song titles and artist names.

    A blank term returns two empty lists without touching the database.
    LIKE wildcards in the term are matched literally.

    Args:
        db: Database session
        term: Text to look for

    Returns:
        Matching songs (at most SONG_SEARCH_LIMIT) and artists
        (at most ARTIST_SEARCH_LIMIT)
    """
    if not term or not term.strip():
        return [], []

    with store_errors("Search failed", logger):
        songs = (
            _song_rows(db)
            .filter(
                or_(
                    Song.title.icontains(term, autoescape=True),
                    Artist.name.icontains(term, autoescape=True),
                )
            )
            .order_by(Song.title.asc(), Song.id.asc())
            .limit(SONG_SEARCH_LIMIT)
            .all()
        )
        artists = (
            db.query(Artist)
            .filter(Artist.name.icontains(term, autoescape=True))
            .order_by(Artist.name.asc(), Artist.id.asc())
            .limit(ARTIST_SEARCH_LIMIT)
            .all()
        )

    return (
        [SongResponse(**row._asdict()) for row in songs],
        [ArtistResponse.model_validate(artist) for artist in artists],
    )
