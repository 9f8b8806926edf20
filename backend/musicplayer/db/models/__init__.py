from musicplayer.db.models.artist import Artist
from musicplayer.db.models.song import Song
from musicplayer.db.models.user import User
from musicplayer.db.models.playlist import Playlist
from musicplayer.db.models.playlist_song import PlaylistSong

__all__ = [
    "Artist",
    "Song",
    "User",
    "Playlist",
    "PlaylistSong",
]
