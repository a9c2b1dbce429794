"""
Single-completion guard.
"""

from __future__ import annotations

from tipjar._types import CompletionHandler, Outcome, ZeroArgOperation
from tipjar.errors import HandlerReusedError


def once[T, E](operation: ZeroArgOperation[T, E]) -> ZeroArgOperation[T, E]:
    """
    Wrap an operation so its handler accepts a single outcome.

    A second call raises HandlerReusedError in the caller that made it; the
    downstream handler only ever sees the first outcome.
    """

    def guarded(completion: CompletionHandler[T, E]) -> None:
        delivered = False

        def complete_once(outcome: Outcome[T, E]) -> None:
            nonlocal delivered
            if delivered:
                raise HandlerReusedError(
                    f"completion handler called again with {outcome!r}",
                    hint="an operation must complete exactly once",
                )
            delivered = True
            completion(outcome)

        operation(complete_once)

    return guarded


__all__ = ("once",)
