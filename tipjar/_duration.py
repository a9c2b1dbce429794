"""
Duration arguments shared by expiry and debounce.
"""

from __future__ import annotations

from datetime import timedelta

from tipjar.errors import ConfigurationError


def resolve_duration(seconds: float | None = None, duration: timedelta | None = None) -> timedelta:
    """
    Turn a ``seconds=`` / ``duration=`` pair into a single timedelta.

    Exactly one must be given and it must not be negative.

    Example:
        resolve_duration(seconds=1.5)
        resolve_duration(duration=timedelta(minutes=15))
    """
    if (seconds is None) == (duration is None):
        raise ConfigurationError(
            "Must provide exactly one of seconds or duration",
            hint="pass seconds=<float> or duration=<timedelta>",
        )
    resolved = duration if duration is not None else timedelta(seconds=seconds)  # type: ignore[arg-type]
    if resolved < timedelta(0):
        raise ConfigurationError(f"Duration must not be negative, got {resolved}")
    return resolved


__all__ = ("resolve_duration",)
