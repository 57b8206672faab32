"""Exception types raised by scalarconf."""

from __future__ import annotations


class ScalarConfError(Exception):
    """Base class for all custom exceptions in the scalarconf library."""

    pass


class UnreadableConfigSourceError(ScalarConfError):
    """Raised when a source parses neither as JSON nor as YAML."""

    pass


class UnseekableSourceError(UnreadableConfigSourceError):
    """Raised when a stream cannot be rewound for format fallback."""

    pass


class KeyNotFoundError(ScalarConfError, KeyError, AttributeError):
    """Raised on a strict read of a key that is not in the store.

    Subclasses both ``KeyError`` and ``AttributeError`` so that index access
    and attribute access fail the way Python callers expect.
    """

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Missing configuration key: {self.key!r}"


class InvalidFormatError(ScalarConfError, ValueError):
    """Raised when a format token other than 'json' or 'yaml' is assigned."""

    pass


class UnknownFormatError(ScalarConfError):
    """Raised when saving a store whose format tag is not recognised."""

    pass


class InvalidValueError(ScalarConfError, TypeError):
    """Raised when a value is not a string, integer, or boolean."""

    pass


class InvalidKeyError(ScalarConfError, TypeError):
    """Raised when a key is empty or not a string."""

    pass


__all__ = [
    "ScalarConfError",
    "UnreadableConfigSourceError",
    "UnseekableSourceError",
    "KeyNotFoundError",
    "InvalidFormatError",
    "UnknownFormatError",
    "InvalidValueError",
    "InvalidKeyError",
]
