"""
Lifting plain values and functions into callback operations.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Ok, Error, Result

from tipjar._types import CompletionHandler, UnaryOperation, ZeroArgOperation


def pure[T](value: T) -> ZeroArgOperation[T, object]:
    """Operation that completes synchronously with Ok(value)."""

    def operation(completion: CompletionHandler[T, object]) -> None:
        completion(Ok(value))

    return operation


def fail[E](error: E) -> ZeroArgOperation[object, E]:
    """Operation that completes synchronously with Error(error)."""

    def operation(completion: CompletionHandler[object, E]) -> None:
        completion(Error(error))

    return operation


def from_result[T, E](result: Result[T, E]) -> ZeroArgOperation[T, E]:
    """Operation that completes with an already computed Result."""

    def operation(completion: CompletionHandler[T, E]) -> None:
        completion(result)

    return operation


def lifted[In, Out](fn: Callable[[In], Out]) -> UnaryOperation[In, Out, object]:
    """
    Turn a plain function into a unary operation.

    Example:
        chain(fetch_int).then(lifted(str))
    """

    def operation(arg: In, completion: CompletionHandler[Out, object]) -> None:
        completion(Ok(fn(arg)))

    return operation


__all__ = ("pure", "fail", "from_result", "lifted")
