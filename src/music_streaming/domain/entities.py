"""Streaming Domain Entities.

This module defines the core entities of the streaming catalog: users,
artists, albums, songs and playlists.

Entities are compared by identity. Two users with the same name and mobile
are still two users, so every dataclass here is declared with ``eq=False``
and keeps the default object hash. Relationships between entities are not
stored on the entities themselves; the repository keeps them in association
maps keyed by ``id``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict
from uuid import uuid4


def _new_id() -> str:
    return str(uuid4())


@dataclass(eq=False)
class User:
    """A listener account, looked up by mobile number."""

    name: str
    mobile: str

    id: str = field(default_factory=_new_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert user to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "mobile": self.mobile,
        }


@dataclass(eq=False)
class Artist:
    """
    Represents a musical artist or group.

    The like count is cumulative: every first-time like on one of the
    artist's songs adds one.
    """

    name: str
    likes: int = 0

    id: str = field(default_factory=_new_id)

    def add_like(self) -> None:
        """Record one more like."""
        self.likes += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert artist to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "likes": self.likes,
        }


@dataclass(eq=False)
class Album:
    """An album, owned by exactly one artist."""

    title: str

    id: str = field(default_factory=_new_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
        }


@dataclass(eq=False)
class Song:
    """
    Represents a single song on an album.

    ``length`` is a plain duration in whatever unit the caller uses;
    playlists built on length compare it for exact equality.
    """

    title: str
    length: int
    likes: int = 0

    id: str = field(default_factory=_new_id)

    def add_like(self) -> None:
        """Record one more like."""
        self.likes += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert song to dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "length": self.length,
            "likes": self.likes,
        }


@dataclass(eq=False)
class Playlist:
    """A named selection of songs created by a user."""

    title: str

    id: str = field(default_factory=_new_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
        }
