"""
Expiry — values that come with an expiration date.

    from tipjar import expiry as X

    token = X.expirable(raw_token, seconds=900)
    if (t := token.value) is not None:
        use(t)
"""

from __future__ import annotations

from tipjar.expiry._types import Clock, Expirable
from tipjar.expiry._build import expirable

__all__ = (
    "Clock",
    "Expirable",
    "expirable",
)
