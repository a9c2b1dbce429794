"""
Expirable — a value with an expiration date.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from tipjar._duration import resolve_duration

type Clock = Callable[[], datetime]
"""Source of the current time."""


@dataclass(frozen=True, slots=True)
class Expirable[T]:
    """
    Value that stops being available after `expires_at`.

    The value is still live at the exact expiration instant.

    Example:
        token = Expirable("s3cr3t", expires_at=datetime.now() + timedelta(minutes=15))
        token.value        # "s3cr3t", later None
    """

    inner_value: T
    expires_at: datetime
    clock: Clock = field(default=datetime.now, compare=False, repr=False)

    @property
    def value(self) -> T | None:
        """The wrapped value, or None once expired."""
        if self.has_expired():
            return None
        return self.inner_value

    @property
    def remaining(self) -> timedelta:
        """Time left before expiry, never negative."""
        return max(self.expires_at - self.clock(), timedelta(0))

    def has_expired(self) -> bool:
        return self.expires_at < self.clock()

    def renew(
        self,
        *,
        seconds: float | None = None,
        duration: timedelta | None = None,
    ) -> Expirable[T]:
        """Same value, fresh lifespan starting now."""
        lifespan = resolve_duration(seconds, duration)
        return Expirable(self.inner_value, self.clock() + lifespan, self.clock)


__all__ = ("Clock", "Expirable")
