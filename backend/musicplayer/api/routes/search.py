"""
Search across song titles and artist names.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from musicplayer.db.session import get_db
from musicplayer.schemas.catalog import SearchResponse
from musicplayer.services import catalog

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/search", response_model=SearchResponse)
def search(q: Optional[str] = None, db: Session = Depends(get_db)):
    """
    Search songs and artists.

    A missing or blank ``q`` returns empty results rather than an error.
    """
    songs, artists = catalog.search(db, q)
    return SearchResponse(songs=songs, artists=artists)
