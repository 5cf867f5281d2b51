"""Shared error hierarchy.

Every library error derives from `TgbindError` so callers can catch one
base type; `severity` and `recoverable` let surfaces decide whether a failure
is worth reporting.
"""

from __future__ import annotations

from typing import Optional


class TgbindError(Exception):
    """Base error for the tgbind library."""

    severity = "error"
    recoverable = False

    def __init__(self, message: str, *, user_message: Optional[str] = None) -> None:
        super().__init__(message)
        self.user_message = user_message


class PermanentError(TgbindError):
    """Non-retryable failure (malformed input, invalid configuration)."""

    severity = "error"
    recoverable = False


__all__ = ["TgbindError", "PermanentError"]
