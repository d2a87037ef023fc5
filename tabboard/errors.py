"""Exception hierarchy shared by the services and routes.

Each error carries the HTTP status the app factory renders it with.
"""

from __future__ import annotations


class TabboardError(Exception):
    """Base exception for all tabboard errors."""

    status_code = 500

    def __init__(self, message: str = "") -> None:
        self.message = message or self.__class__.__doc__ or "error"
        super().__init__(self.message)


class NotFound(TabboardError):
    """Referenced tab or component does not exist."""

    status_code = 404


class InvalidInput(TabboardError):
    """Required field missing or of the wrong shape."""

    status_code = 400


class PersistenceFault(TabboardError):
    """Backing file could not be read or written."""

    def __init__(self, message: str = "", *, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class UpstreamFailure(TabboardError):
    """The classification model did not return the structured result."""
