"""
Exhaustive — make a `match` statement fail loudly when a case is missing.

    match number:
        case One():
            print("This is One")
        case Two():
            print("This is Two")
        case _:
            exhaustive(number)   # type checker: "Three" is not handled
"""

from __future__ import annotations

from typing import Never

from tipjar.errors import UnhandledCaseError


def exhaustive(value: Never) -> Never:
    """
    Mark the end of a match that must cover every variant.

    Statically, passing anything but a fully narrowed value is a type error.
    At runtime it raises UnhandledCaseError carrying the value.
    """
    raise UnhandledCaseError(value, hint="add a case for this variant")


__all__ = ("exhaustive",)
