"""
Core types for tipjar.

Re-exports from kungfu + the callback shapes used by tipjar.chain.
"""

from __future__ import annotations

from collections.abc import Callable

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Outcome — Value or Error of a single step
# ═══════════════════════════════════════════════════════════════════════════════

type Outcome[T, E] = Result[T, E]
"""Result of one asynchronous step: Ok(value) or Error(cause)."""

# ═══════════════════════════════════════════════════════════════════════════════
# Callback Shapes
# ═══════════════════════════════════════════════════════════════════════════════

type CompletionHandler[T, E] = Callable[[Outcome[T, E]], None]
"""Receives the outcome of an operation. Called exactly once."""

type ZeroArgOperation[T, E] = Callable[[CompletionHandler[T, E]], None]
"""Asynchronous operation with no input besides its handler."""

type UnaryOperation[In, Out, E] = Callable[[In, CompletionHandler[Out, E]], None]
"""Asynchronous operation parameterized by one input value."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Callback shapes
    "Outcome",
    "CompletionHandler",
    "ZeroArgOperation",
    "UnaryOperation",
)
