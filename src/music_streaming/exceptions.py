"""Custom exceptions for music streaming."""


class MusicStreamingError(Exception):
    """Base exception for music streaming errors."""
    pass


class ConfigurationError(MusicStreamingError):
    """Raised when there's an error in configuration."""
    pass


class ScriptError(MusicStreamingError):
    """Raised when an operation script cannot be read or parsed."""
    pass
