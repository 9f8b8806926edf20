"""
Catalog routes for artists.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from musicplayer.db.session import get_db
from musicplayer.schemas.catalog import ArtistResponse
from musicplayer.services import catalog

router = APIRouter(prefix="/api/artists", tags=["catalog"])


@router.get("", response_model=List[ArtistResponse])
def list_artists(db: Session = Depends(get_db)):
    """Retrieve all artists ordered by name."""
    return catalog.list_artists(db)


@router.get("/{artist_id}", response_model=ArtistResponse)
def get_artist(artist_id: int, db: Session = Depends(get_db)):
    """Retrieve a single artist by id."""
    return catalog.get_artist(db, artist_id)
