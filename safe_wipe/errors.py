"""
Custom exception types used across safe-wipe.

Rejections carry a discriminant code so callers can tell a dangerous
call site (``CONTAINED``) apart from a wipe that merely needs operator
approval (``ABORT``). Underlying filesystem failures are not wrapped;
they propagate as the ``OSError`` raised by the collaborator.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    CONTAINED = "CONTAINED"
    ABORT = "ABORT"


class SafeWipeError(Exception):
    """Base class for all safe-wipe specific errors."""


class ConfigurationError(SafeWipeError):
    """Raised when the resolved configuration cannot serve a request."""


class WipeRejected(SafeWipeError):
    """
    Raised when a safety check refuses the wipe.

    ``code`` identifies the check and ``message`` is the user-facing text
    taken from the resolved message bundle.
    """

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ContainedError(WipeRejected):
    """Raised when the target directory is an ancestor of, or equal to, the protected parent."""

    code = ErrorCode.CONTAINED


class WipeAborted(WipeRejected):
    """Raised when a non-empty directory was not approved for wiping."""

    code = ErrorCode.ABORT
