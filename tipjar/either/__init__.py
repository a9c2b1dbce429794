"""
Either — tagged union of two types.

    from tipjar import either as E

    value: E.Either[int, str] = E.Left(2) if coin() else E.Right("Foo")
    E.either(value, if_left=lambda i: print(i + 1), if_right=lambda s: print(s + "Bar"))
"""

from __future__ import annotations

from tipjar.either._types import Left, Right, Either
from tipjar.either._fold import either, fold, to_result

__all__ = (
    "Left",
    "Right",
    "Either",
    "either",
    "fold",
    "to_result",
)
