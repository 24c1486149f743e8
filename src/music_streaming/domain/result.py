"""Result values and domain errors.

The repository raises the errors defined here. The service layer hands them
back as :class:`Failure` values, so a caller running many operations can keep
going past a missing user or song and report every problem at the end.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, cast

T = TypeVar('T')  # Success type
E = TypeVar('E', bound=Exception)  # Error type


class Result(ABC, Generic[T, E]):
    """Outcome of one operation: a value or an error, never both."""

    @abstractmethod
    def is_success(self) -> bool:
        ...

    def is_failure(self) -> bool:
        return not self.is_success()

    @abstractmethod
    def value(self) -> T:
        """Get the value of a Success; a Failure raises ValueError."""
        ...

    @abstractmethod
    def error(self) -> E:
        """Get the error of a Failure; a Success raises ValueError."""
        ...


@dataclass(frozen=True, slots=True)
class Success(Result[T, E]):
    _value: T

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def is_success(self) -> bool:
        return True

    def value(self) -> T:
        return self._value

    def error(self) -> E:
        raise ValueError("Success carries no error")


@dataclass(frozen=True, slots=True)
class Failure(Result[T, E]):
    _error: E

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"

    def is_success(self) -> bool:
        return False

    def value(self) -> T:
        raise ValueError(f"Failure carries no value: {self._error}")

    def error(self) -> E:
        return self._error


def success(value: T) -> Result[T, Any]:
    return Success(value)


def failure(error: E) -> Result[Any, E]:
    return Failure(error)


def try_catch(fn: Callable[[], T], error_class: type[E] | tuple[type[E], ...] = Exception) -> Result[T, E]:
    """Run ``fn`` and capture exceptions of ``error_class`` as a Failure.

    Exceptions of any other type propagate.
    """
    try:
        return Success(fn())
    except error_class as e:
        return Failure(cast(E, e))


def collect(results: list[Result[T, E]]) -> Result[list[T], list[E]]:
    """Fold many results into one.

    Success with every value when all succeeded, otherwise Failure with the
    list of errors in order.
    """
    errors = [r.error() for r in results if r.is_failure()]
    if errors:
        return Failure(errors)
    return Success([r.value() for r in results])


# Domain-specific errors for the streaming repository
class DomainError(Exception):
    """Base class for domain-specific errors."""
    pass


class ValidationError(DomainError):
    """Raised when an operation request is malformed."""
    pass


class NotFoundError(DomainError):
    """Raised when a looked-up entity does not exist."""

    entity = "Entity"

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"{self.entity} does not exist: {key}")


class UserNotFoundError(NotFoundError):
    entity = "User"


class AlbumNotFoundError(NotFoundError):
    entity = "Album"


class SongNotFoundError(NotFoundError):
    entity = "Song"


class PlaylistNotFoundError(NotFoundError):
    entity = "Playlist"
