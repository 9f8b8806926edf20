"""
Playlist routes: listing, creation, song placement and removal.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from musicplayer.db.session import get_db
from musicplayer.schemas.playlist import (
    MessageResponse,
    PlaylistCreate,
    PlaylistCreatedResponse,
    PlaylistResponse,
    PlaylistSongAdd,
    PlaylistSongAddedResponse,
    PlaylistSongResponse,
)
from musicplayer.services import playlists

router = APIRouter(prefix="/api/playlists", tags=["playlists"])


@router.get("/{user_id}", response_model=List[PlaylistResponse])
def list_user_playlists(user_id: int, db: Session = Depends(get_db)):
    """Get all playlists of a user with their song counts."""
    return playlists.list_playlists(db, user_id)


@router.get("/{playlist_id}/songs", response_model=List[PlaylistSongResponse])
def get_playlist_songs(playlist_id: int, db: Session = Depends(get_db)):
    """Get the songs of a playlist in track order."""
    return playlists.get_playlist_songs(db, playlist_id)


@router.post(
    "", response_model=PlaylistCreatedResponse, status_code=status.HTTP_201_CREATED
)
def create_playlist(data: PlaylistCreate, db: Session = Depends(get_db)):
    """Create a new playlist for a user."""
    playlist_id = playlists.create_playlist(
        db, data.user_id, data.name, data.description, data.color_hex
    )
    return PlaylistCreatedResponse(playlist_id=playlist_id)


@router.post(
    "/{playlist_id}/songs",
    response_model=PlaylistSongAddedResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_song_to_playlist(
    playlist_id: int, data: PlaylistSongAdd, db: Session = Depends(get_db)
):
    """Add a song to a playlist, at the end unless track_order is given."""
    playlist_song_id = playlists.add_song_to_playlist(
        db, playlist_id, data.song_id, data.track_order
    )
    return PlaylistSongAddedResponse(playlist_song_id=playlist_song_id)


@router.delete("/{playlist_id}", response_model=MessageResponse)
def delete_playlist(playlist_id: int, db: Session = Depends(get_db)):
    """Delete a playlist and every song placed in it."""
    playlists.delete_playlist(db, playlist_id)
    return MessageResponse(message="Playlist deleted")


@router.delete("/{playlist_id}/songs/{playlist_song_id}", response_model=MessageResponse)
def remove_song_from_playlist(
    playlist_id: int, playlist_song_id: int, db: Session = Depends(get_db)
):
    """Remove one placement of a song from a playlist."""
    playlists.remove_song_from_playlist(db, playlist_id, playlist_song_id)
    return MessageResponse(message="Song removed from playlist")
