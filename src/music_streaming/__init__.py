"""Music Streaming

An in-memory repository for a small music-streaming catalog: users, artists,
albums, songs and playlists, with likes and playlist listeners.
"""

__version__ = "0.1.0"

from .domain import (
    User,
    Artist,
    Album,
    Song,
    Playlist,
    StreamingService,
    NotFoundError,
    UserNotFoundError,
    AlbumNotFoundError,
    SongNotFoundError,
    PlaylistNotFoundError,
)
from .infrastructure import InMemoryStreamingRepository

__all__ = [
    # Entities
    "User",
    "Artist",
    "Album",
    "Song",
    "Playlist",

    # Repository and service
    "InMemoryStreamingRepository",
    "StreamingService",

    # Errors
    "NotFoundError",
    "UserNotFoundError",
    "AlbumNotFoundError",
    "SongNotFoundError",
    "PlaylistNotFoundError",
]
