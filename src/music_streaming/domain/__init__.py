"""
Domain Layer - Music Streaming

This package contains the streaming entities, the association maps that
relate them, the repository interface, the service facade, and the Result
pattern used for error handling.
"""

from .entities import User, Artist, Album, Song, Playlist
from .associations import AssociationMap
from .repositories import StreamingRepository
from .services import StreamingService

# Result pattern for error handling
from .result import (
    Result,
    Success,
    Failure,
    success,
    failure,
    collect,
    try_catch,
    DomainError,
    ValidationError,
    NotFoundError,
    UserNotFoundError,
    AlbumNotFoundError,
    SongNotFoundError,
    PlaylistNotFoundError,
)

__all__ = [
    # Entities
    "User",
    "Artist",
    "Album",
    "Song",
    "Playlist",
    "AssociationMap",
    "StreamingRepository",
    "StreamingService",
    # Result pattern
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "collect",
    "try_catch",
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "UserNotFoundError",
    "AlbumNotFoundError",
    "SongNotFoundError",
    "PlaylistNotFoundError",
]
