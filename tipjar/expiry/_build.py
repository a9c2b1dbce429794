"""
Expirable construction from a lifespan.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from tipjar._duration import resolve_duration
from tipjar.expiry._types import Clock, Expirable


def expirable[T](
    value: T,
    *,
    seconds: float | None = None,
    duration: timedelta | None = None,
    clock: Clock = datetime.now,
) -> Expirable[T]:
    """
    Wrap `value` so it expires after the given lifespan.

    Example:
        multiplier = X.expirable(2, seconds=30)
        token = X.expirable(raw_token, duration=timedelta(minutes=15))
    """
    lifespan = resolve_duration(seconds, duration)
    return Expirable(value, clock() + lifespan, clock)


__all__ = ("expirable",)
