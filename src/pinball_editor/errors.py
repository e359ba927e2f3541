"""Exception hierarchy for recoverable editor failures."""

from __future__ import annotations


class EditorError(Exception):
    """Base class for errors that are reported to the user and never fatal."""


class TrackValidationError(EditorError):
    """Raised when a track edit is rejected and state is left unchanged."""


class MapFormatError(EditorError):
    """Raised when imported map text fails validation."""


class EditorConfigError(EditorError):
    """Raised when the editor settings file fails validation."""


__all__ = ["EditorError", "TrackValidationError", "MapFormatError", "EditorConfigError"]
