"""
Playlist schema models using Pydantic.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

# Bounds of the 32-bit INTEGER columns
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class PlaylistCreate(BaseModel):
    """Schema for creating a playlist.

    user_id and name are optional here so that a missing value is reported
    by the playlist service as a 400 rather than a schema error.
    """

    user_id: Optional[int] = None
    name: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = None
    # An empty string falls back to the default colour like an omitted one
    color_hex: Optional[str] = Field(default=None, pattern=r"^(#[0-9a-fA-F]{6})?$")


class PlaylistSongAdd(BaseModel):
    """Schema for adding a song to a playlist."""

    song_id: Optional[int] = None
    track_order: Optional[int] = Field(default=None, ge=INT32_MIN, le=INT32_MAX)


class PlaylistResponse(BaseModel):
    """Schema for a playlist with its song count."""

    id: int
    user_id: int
    name: str
    description: str = ""
    color_hex: str
    count: int = 0
    created_at: datetime


class PlaylistSongResponse(BaseModel):
    """Schema for one placement of a song in a playlist."""

    playlist_song_id: int
    song_id: int
    title: str
    artist_id: int
    artist: str
    duration: Optional[str] = None
    genre: Optional[str] = None
    track_order: int
    added_at: datetime


class PlaylistCreatedResponse(BaseModel):
    success: bool = True
    playlist_id: int
    message: str = "Playlist created successfully"


class PlaylistSongAddedResponse(BaseModel):
    success: bool = True
    playlist_song_id: int
    message: str = "Song added to playlist"


class MessageResponse(BaseModel):
    success: bool = True
    message: str
