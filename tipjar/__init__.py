"""
tipjar — small functional idioms, one per module.

    from tipjar import chain as C      # Callback composition
    from tipjar import either as E     # Tagged union
    from tipjar import memo as M       # Memoized pure functions
    from tipjar import expiry as X     # Expirable values
    from tipjar import debounce as D   # Debounced calls
"""

from tipjar import chain
from tipjar import either
from tipjar import memo
from tipjar import expiry
from tipjar import debounce
from tipjar import lift
from tipjar.exhaustive import exhaustive
from tipjar.errors import (
    TipjarError,
    ConfigurationError,
    HandlerReusedError,
    UnhandledCaseError,
)
from tipjar._types import (
    Outcome,
    CompletionHandler,
    ZeroArgOperation,
    UnaryOperation,
)

__version__ = "0.1.0"

__all__ = (
    "chain",
    "either",
    "memo",
    "expiry",
    "debounce",
    "lift",
    "exhaustive",
    "TipjarError",
    "ConfigurationError",
    "HandlerReusedError",
    "UnhandledCaseError",
    "Outcome",
    "CompletionHandler",
    "ZeroArgOperation",
    "UnaryOperation",
)
