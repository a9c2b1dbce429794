"""
Consuming an Either.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Ok, Error, Result

from tipjar.either._types import Either, Left, Right
from tipjar.exhaustive import exhaustive


def either[L, R](
    value: Either[L, R],
    if_left: Callable[[L], object] | None = None,
    if_right: Callable[[R], object] | None = None,
) -> None:
    """
    Run the callback for whichever side is populated.

    A missing callback means "ignore that side".

    Example:
        E.either(
            int_or_str,
            if_left=lambda i: print(i + 1),
            if_right=lambda s: print(s + "Bar"),
        )
    """
    match value:
        case Left(left):
            if if_left is not None:
                if_left(left)
        case Right(right):
            if if_right is not None:
                if_right(right)
        case _:
            exhaustive(value)


def fold[L, R, X](
    value: Either[L, R],
    if_left: Callable[[L], X],
    if_right: Callable[[R], X],
) -> X:
    """Collapse both sides into one result."""
    match value:
        case Left(left):
            return if_left(left)
        case Right(right):
            return if_right(right)
        case _:
            exhaustive(value)


def to_result[L, R](value: Either[L, R]) -> Result[R, L]:
    """Right becomes Ok, Left becomes Error."""
    return fold(value, Error, Ok)


__all__ = ("either", "fold", "to_result")
