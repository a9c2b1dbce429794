"""
Cached — memoized version of a pure, single-argument function.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable

from tipjar.errors import ConfigurationError
from tipjar.memo._types import CacheInfo

log = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Cached Function
# ═══════════════════════════════════════════════════════════════════════════════


class Cached[In: Hashable, Out]:
    """
    Callable wrapper that remembers every result of `fn`.

    Bounded instances evict the least recently used entry when full.
    Recursive functions only benefit at the top level: inner calls go to
    `fn` directly, not through the wrapper.

    Example:
        cached_cos = Cached(math.cos)
        cached_cos(math.pi * 2)   # computed
        cached_cos(math.pi * 2)   # from cache
    """

    def __init__(self, fn: Callable[[In], Out], max_size: int | None = None) -> None:
        if max_size is not None and max_size < 1:
            raise ConfigurationError(f"max_size must be at least 1, got {max_size}")
        self._fn = fn
        self._max_size = max_size
        # Insertion order doubles as recency order.
        self._cache: dict[In, Out] = {}
        self._hits = 0
        self._misses = 0

    def __call__(self, arg: In) -> Out:
        if arg in self._cache:
            self._hits += 1
            value = self._cache.pop(arg)
            self._cache[arg] = value
            return value

        self._misses += 1
        value = self._fn(arg)

        if self._max_size is not None and len(self._cache) >= self._max_size:
            oldest = next(iter(self._cache))
            del self._cache[oldest]
            log.debug("memo: evicted %r from %s", oldest, self.name)

        self._cache[arg] = value
        return value

    @property
    def name(self) -> str:
        return getattr(self._fn, "__qualname__", repr(self._fn))

    def info(self) -> CacheInfo:
        return CacheInfo(
            hits=self._hits,
            misses=self._misses,
            size=len(self._cache),
            max_size=self._max_size,
        )

    def clear(self) -> None:
        """Forget every stored result and reset statistics."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0


def cached[In: Hashable, Out](
    fn: Callable[[In], Out],
    *,
    max_size: int | None = None,
) -> Cached[In, Out]:
    """
    Manufacture a cache-efficient version of a pure function.

    Example:
        cached_cos = M.cached(math.cos)
        square = M.cached(lambda x: x * x, max_size=128)
    """
    return Cached(fn, max_size=max_size)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Cached", "cached")
