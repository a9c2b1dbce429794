"""
Memo — cache results of pure functions.

    from tipjar import memo as M

    cached_cos = M.cached(math.cos)
    cached_cos.info()   # CacheInfo(hits=..., misses=..., size=..., max_size=None)
"""

from __future__ import annotations

from tipjar.memo._types import CacheInfo
from tipjar.memo._cached import Cached, cached

__all__ = (
    "CacheInfo",
    "Cached",
    "cached",
)
