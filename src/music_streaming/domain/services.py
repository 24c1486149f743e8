"""Streaming Domain Services.

This module defines the service facade an API layer calls. It wraps the
repository so that "not found" conditions come back as Result values instead
of exceptions, and it can dispatch operations by name for scripted runs.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .entities import Album, Artist, Playlist, Song, User
from .repositories import StreamingRepository
from .result import NotFoundError, Result, ValidationError, failure, success, try_catch

logger = logging.getLogger(__name__)


class StreamingService:
    """Service for streaming catalog operations."""

    # Operation name -> parameter names accepted by ``execute``
    OPERATIONS: Dict[str, tuple] = {
        "create_user": ("name", "mobile"),
        "create_artist": ("name",),
        "create_album": ("title", "artist_name"),
        "create_song": ("title", "album_name", "length"),
        "create_playlist_on_length": ("mobile", "title", "length"),
        "create_playlist_on_name": ("mobile", "title", "song_titles"),
        "find_playlist": ("mobile", "playlist_title"),
        "like_song": ("mobile", "song_title"),
        "most_popular_artist": (),
        "most_popular_song": (),
    }

    def __init__(self, repository: StreamingRepository):
        self.repository = repository

    def create_user(self, name: str, mobile: str) -> Result[User, NotFoundError]:
        return try_catch(lambda: self.repository.create_user(name, mobile), NotFoundError)

    def create_artist(self, name: str) -> Result[Artist, NotFoundError]:
        return try_catch(lambda: self.repository.create_artist(name), NotFoundError)

    def create_album(self, title: str, artist_name: str) -> Result[Album, NotFoundError]:
        return try_catch(lambda: self.repository.create_album(title, artist_name), NotFoundError)

    def create_song(self, title: str, album_name: str, length: int) -> Result[Song, NotFoundError]:
        return try_catch(
            lambda: self.repository.create_song(title, album_name, length), NotFoundError
        )

    def create_playlist_on_length(self, mobile: str, title: str, length: int) -> Result[Playlist, NotFoundError]:
        return try_catch(
            lambda: self.repository.create_playlist_on_length(mobile, title, length), NotFoundError
        )

    def create_playlist_on_name(
        self, mobile: str, title: str, song_titles: Iterable[str]
    ) -> Result[Playlist, NotFoundError]:
        return try_catch(
            lambda: self.repository.create_playlist_on_name(mobile, title, song_titles), NotFoundError
        )

    def find_playlist(self, mobile: str, playlist_title: str) -> Result[Playlist, NotFoundError]:
        return try_catch(
            lambda: self.repository.find_playlist(mobile, playlist_title), NotFoundError
        )

    def like_song(self, mobile: str, song_title: str) -> Result[Song, NotFoundError]:
        return try_catch(lambda: self.repository.like_song(mobile, song_title), NotFoundError)

    def most_popular_artist(self) -> Optional[str]:
        return self.repository.most_popular_artist()

    def most_popular_song(self) -> Optional[str]:
        return self.repository.most_popular_song()

    def execute(self, operation: str, params: Optional[Mapping[str, Any]] = None) -> Result[Any, Exception]:
        """Run an operation by name with keyword parameters.

        Popularity queries are wrapped into a Success so every step of a
        script yields a Result.
        """
        params = dict(params or {})

        expected = self.OPERATIONS.get(operation)
        if expected is None:
            return failure(ValidationError(f"Unknown operation: {operation}"))

        missing = [name for name in expected if name not in params]
        unexpected = [name for name in params if name not in expected]
        if missing or unexpected:
            problems = []
            if missing:
                problems.append(f"missing {', '.join(missing)}")
            if unexpected:
                problems.append(f"unexpected {', '.join(unexpected)}")
            return failure(ValidationError(f"Bad parameters for {operation}: {'; '.join(problems)}"))

        for name, value in params.items():
            problem = self._check_param(name, value)
            if problem:
                return failure(ValidationError(f"Bad parameters for {operation}: {name} {problem}"))

        logger.debug(f"Executing {operation} with {params}")
        outcome = getattr(self, operation)(**params)
        if isinstance(outcome, Result):
            return outcome
        return success(outcome)

    @staticmethod
    def _check_param(name: str, value: Any) -> Optional[str]:
        """Describe what is wrong with a parameter value, or None if it is fine."""
        if name == "length":
            # bool is an int subclass but never a length
            if not isinstance(value, int) or isinstance(value, bool):
                return f"must be an integer, got {value!r}"
        elif name == "song_titles":
            if not isinstance(value, (list, tuple)) or not all(isinstance(t, str) for t in value):
                return f"must be a list of titles, got {value!r}"
        elif not isinstance(value, str):
            return f"must be a string, got {value!r}"
        return None

    def execute_all(self, steps: Iterable[Mapping[str, Any]], stop_on_failure: bool = False) -> List[Result[Any, Exception]]:
        """Run a sequence of ``{"op": name, **params}`` steps."""
        results = []
        for step in steps:
            params = dict(step)
            operation = params.pop("op", None)
            if not isinstance(operation, str):
                result = failure(ValidationError(f"Step has no operation name: {step}"))
            else:
                result = self.execute(operation, params)

            results.append(result)
            if stop_on_failure and result.is_failure():
                break
        return results
