"""
Catalog routes for songs.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from musicplayer.db.session import get_db
from musicplayer.schemas.catalog import SongResponse
from musicplayer.services import catalog

router = APIRouter(prefix="/api/songs", tags=["catalog"])


@router.get("", response_model=List[SongResponse])
def list_songs(db: Session = Depends(get_db)):
    """Retrieve all songs with their artist name."""
    return catalog.list_songs(db)


@router.get("/by-artist/{artist_id}", response_model=List[SongResponse])
def list_songs_by_artist(artist_id: int, db: Session = Depends(get_db)):
    """Retrieve the songs of one artist; empty for artists without songs."""
    return catalog.list_songs_by_artist(db, artist_id)


@router.get("/{song_id}", response_model=SongResponse)
def get_song(song_id: int, db: Session = Depends(get_db)):
    """Retrieve a single song by id."""
    return catalog.get_song(db, song_id)
