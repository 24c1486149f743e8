"""Streaming Repository Interface.

This module defines the repository interface the service layer is written
against. Repositories provide abstraction over data storage and retrieval.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from .entities import Album, Artist, Playlist, Song, User


class StreamingRepository(ABC):
    """Repository for the streaming catalog and its relationships."""

    @abstractmethod
    def create_user(self, name: str, mobile: str) -> User:
        """Create a user."""
        pass

    @abstractmethod
    def create_artist(self, name: str) -> Artist:
        """Create an artist."""
        pass

    @abstractmethod
    def create_album(self, title: str, artist_name: str) -> Album:
        """Create an album, creating the artist if needed."""
        pass

    @abstractmethod
    def create_song(self, title: str, album_name: str, length: int) -> Song:
        """Create a song on an existing album."""
        pass

    @abstractmethod
    def create_playlist_on_length(self, mobile: str, title: str, length: int) -> Playlist:
        """Create a playlist of all songs with the given length."""
        pass

    @abstractmethod
    def create_playlist_on_name(self, mobile: str, title: str, song_titles: Iterable[str]) -> Playlist:
        """Create a playlist from a list of song titles."""
        pass

    @abstractmethod
    def find_playlist(self, mobile: str, playlist_title: str) -> Playlist:
        """Find a playlist, registering the user as a listener."""
        pass

    @abstractmethod
    def like_song(self, mobile: str, song_title: str) -> Song:
        """Like a song on behalf of a user."""
        pass

    @abstractmethod
    def most_popular_artist(self) -> Optional[str]:
        """Get the name of the most liked artist."""
        pass

    @abstractmethod
    def most_popular_song(self) -> Optional[str]:
        """Get the title of the most liked song."""
        pass
