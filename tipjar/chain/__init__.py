"""
Chain — sequential callback operations without the pyramid.

    from tipjar import chain as C

    C.chain(fetch_int).map(lambda i: str(i // 2)).then(fetch_string)(print)

    # or, without the fluent wrapper
    C.sequence(C.map(fetch_int, lambda i: str(i // 2)), fetch_string)(print)
"""

from __future__ import annotations

from tipjar.chain._compose import sequence, map, map_catching
from tipjar.chain._chain import Chain, chain
from tipjar.chain._lift import pure, fail, from_result, lifted
from tipjar.chain._guard import once
from tipjar.chain._bridge import to_lazy, from_lazy

__all__ = (
    "sequence",
    "map",
    "map_catching",
    "Chain",
    "chain",
    "pure",
    "fail",
    "from_result",
    "lifted",
    "once",
    "to_lazy",
    "from_lazy",
)
