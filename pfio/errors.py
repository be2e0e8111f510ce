"""Error taxonomy for playlist import/export.

Each error also derives from the closest builtin so callers that only know
about ``LookupError`` / ``ValueError`` / ``PermissionError`` keep working.
"""


class PlaylistFileError(Exception):
    """Base exception for playlist file operations."""


class NotFoundError(PlaylistFileError, LookupError):
    """Raised when a playlist, file or folder does not exist."""


class UnsupportedFormatError(PlaylistFileError, ValueError):
    """Raised for unknown content types and malformed PLS headers."""


class NameConflictError(PlaylistFileError, RuntimeError):
    """Raised when an export target already exists and collision mode is 'abort'."""


class PermissionDeniedError(PlaylistFileError, PermissionError):
    """Raised by filesystem implementations when a write is not permitted."""


__all__ = [
    "PlaylistFileError",
    "NotFoundError",
    "UnsupportedFormatError",
    "NameConflictError",
    "PermissionDeniedError",
]
