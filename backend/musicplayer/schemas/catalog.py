"""
Catalog schema models using Pydantic.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class ArtistResponse(BaseModel):
    """Schema for artist data in responses."""

    id: int
    name: str
    bio: Optional[str] = None

    class Config:
        from_attributes = True


class SongResponse(BaseModel):
    """Schema for a song with its denormalised artist name."""

    id: int
    title: str
    artist_id: int
    artist: str
    duration: Optional[str] = None
    genre: Optional[str] = None
    release_year: Optional[int] = None
    created_at: Optional[datetime] = None


class SearchResponse(BaseModel):
    """Schema for search results."""

    songs: List[SongResponse] = []
    artists: List[ArtistResponse] = []
