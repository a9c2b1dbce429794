"""
Debounce — collapse bursts of calls into one deferred call.

    from tipjar import debounce as D

    on_input = D.debounced(search, seconds=0.3)
    on_input("k"); on_input("ko"); on_input("kot")   # search("kot") once
"""

from __future__ import annotations

from tipjar.debounce._debounced import Debounced, debounced

__all__ = (
    "Debounced",
    "debounced",
)
