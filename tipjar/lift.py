"""
Lift — Helpers for building LazyCoroResult values.

Re-exports from combinators.lift plus the callback bridge, so awaitable
computations and callback operations can be mixed in one chain:

    from tipjar import lift as L
    from tipjar import chain as C

    op = C.from_lazy(L.call(api.fetch_user, 42))
    result = await L.from_operation(C.chain(op).map(lambda u: u.name))
"""

from __future__ import annotations

# Re-export from combinators.lift
from combinators.lift import (
    pure,
    fail,
    catching_async,
    call,
)

from tipjar.chain._bridge import to_lazy as from_operation

__all__ = (
    # From combinators.lift
    "pure",
    "fail",
    "catching_async",
    "call",
    # Callback bridge
    "from_operation",
)
