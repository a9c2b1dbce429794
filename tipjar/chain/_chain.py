"""
Chain — fluent wrapper over sequence() / map().
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from kungfu import LazyCoroResult

from tipjar._types import CompletionHandler, UnaryOperation, ZeroArgOperation
from tipjar.chain import _compose
from tipjar.chain._bridge import to_lazy


@dataclass(frozen=True, slots=True)
class Chain[T, E]:
    """
    A zero-argument operation that can be extended left to right.

    A Chain is itself a ZeroArgOperation: call it with a handler to run it,
    or pass it anywhere an operation is expected.

    Example:
        (
            C.chain(fetch_int)
            .map(lambda i: str(i // 2))
            .then(fetch_string)
        )(print_outcome)
    """

    operation: ZeroArgOperation[T, E]

    def then[U](self, second: UnaryOperation[T, U, E]) -> Chain[U, E]:
        """Feed the value into another operation."""
        return Chain(_compose.sequence(self.operation, second))

    def map[U](self, transform: Callable[[T], U]) -> Chain[U, E]:
        """Apply a synchronous transform. Exceptions propagate."""
        return Chain(_compose.map(self.operation, transform))

    def map_catching[U, E2](
        self,
        transform: Callable[[T], U],
        on_error: Callable[[Exception], E2],
    ) -> Chain[U, E | E2]:
        """Apply a transform, converting its exceptions into Error."""
        return Chain(_compose.map_catching(self.operation, transform, on_error))

    def lazy(self) -> LazyCoroResult[T, E]:
        """Awaitable view of this chain."""
        return to_lazy(self.operation)

    def __call__(self, completion: CompletionHandler[T, E]) -> None:
        self.operation(completion)


def chain[T, E](operation: ZeroArgOperation[T, E]) -> Chain[T, E]:
    """Start a fluent chain from an operation."""
    return Chain(operation)


__all__ = ("Chain", "chain")
