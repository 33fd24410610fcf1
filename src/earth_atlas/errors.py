"""Exception types raised by source adapters and clients."""

from __future__ import annotations


class EarthAtlasError(Exception):
    """Base class for errors raised by this package."""


class SourceError(EarthAtlasError):
    """A request to an external biodiversity API failed.

    ``message`` is human readable and safe to show as-is; callers should
    clear any stale result set when they catch this.
    """

    def __init__(self, source: str, message: str) -> None:
        super().__init__(message)
        self.source = source
        self.message = message


class ConfigurationError(EarthAtlasError):
    """A required credential or setting is missing."""
