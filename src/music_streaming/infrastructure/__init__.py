"""
Infrastructure Layer - Music Streaming

This layer holds the storage behind the domain: currently the in-memory
streaming repository.
"""

from .repositories import InMemoryStreamingRepository

__all__ = [
    "InMemoryStreamingRepository",
]
