"""Exception hierarchy for tipjar."""

from __future__ import annotations


class TipjarError(Exception):
    """Base exception for all tipjar errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(TipjarError):
    """A duration, size or other construction argument was invalid."""


class HandlerReusedError(TipjarError):
    """A completion handler guarded by ``once`` was called a second time."""


class UnhandledCaseError(TipjarError):
    """A match that should have been exhaustive fell through.

    The offending value is kept on ``value`` so callers can report it.
    """

    def __init__(self, value: object, *, hint: str | None = None) -> None:
        super().__init__(f"unhandled case: {value!r}", hint=hint)
        self.value = value


__all__ = (
    "TipjarError",
    "ConfigurationError",
    "HandlerReusedError",
    "UnhandledCaseError",
)
