"""
Repository Implementations - Infrastructure Layer

This package contains repository implementations for data access,
following the Repository pattern from Domain-Driven Design.
"""

from .streaming_repository import InMemoryStreamingRepository

__all__ = [
    "InMemoryStreamingRepository",
]
