"""
Memo types.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CacheInfo:
    """Snapshot of a cached function's statistics."""

    hits: int
    misses: int
    size: int
    max_size: int | None


__all__ = ("CacheInfo",)
