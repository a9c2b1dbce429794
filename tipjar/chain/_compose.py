"""
Chain composition — sequence() and map().

Both take a zero-argument operation and return a new one, so results can be
fed back in to build chains of any length:

    op = sequence(map(fetch_int, lambda i: str(i // 2)), fetch_string)
    op(print)
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Ok, Error

from tipjar._types import CompletionHandler, Outcome, UnaryOperation, ZeroArgOperation

# ═══════════════════════════════════════════════════════════════════════════════
# sequence() — Operation then Operation
# ═══════════════════════════════════════════════════════════════════════════════


def sequence[T, U, E](
    first: ZeroArgOperation[T, E],
    second: UnaryOperation[T, U, E],
) -> ZeroArgOperation[U, E]:
    """
    Run `first`, then feed its value into `second`.

    An Error from `first` goes straight to the final handler and `second`
    never runs. Whatever `second` delivers is forwarded unchanged.

    Example:
        def fetch_int(done):
            done(Ok(42))

        def fetch_string(arg, done):
            done(Ok(f"🎉 {arg}"))

        sequence(fetch_int, lambda i, done: fetch_string(str(i), done))(print)
    """

    def composed(completion: CompletionHandler[U, E]) -> None:
        def on_first(first_result: Outcome[T, E]) -> None:
            match first_result:
                case Error(_):
                    completion(first_result)  # type: ignore[arg-type]
                case Ok(value):
                    second(value, completion)

        first(on_first)

    return composed


# ═══════════════════════════════════════════════════════════════════════════════
# map() — Operation then Transform
# ═══════════════════════════════════════════════════════════════════════════════


def map[T, U, E](
    first: ZeroArgOperation[T, E],
    transform: Callable[[T], U],
) -> ZeroArgOperation[U, E]:
    """
    Run `first`, then apply a synchronous `transform` to its value.

    An exception raised by `transform` is not caught: it propagates out of
    the frame that delivered `first`'s outcome and the final handler is
    never called. Use map_catching() to turn it into an Error instead.
    """

    def composed(completion: CompletionHandler[U, E]) -> None:
        def on_first(first_result: Outcome[T, E]) -> None:
            match first_result:
                case Error(_):
                    completion(first_result)  # type: ignore[arg-type]
                case Ok(value):
                    completion(Ok(transform(value)))

        first(on_first)

    return composed


def map_catching[T, U, E, E2](
    first: ZeroArgOperation[T, E],
    transform: Callable[[T], U],
    on_error: Callable[[Exception], E2],
) -> ZeroArgOperation[U, E | E2]:
    """
    Like map(), but a raising `transform` completes with Error(on_error(exc)).

    Only `transform` is guarded; exceptions raised by the final handler
    itself still propagate.

    Example:
        parsed = map_catching(read_text, int, on_error=lambda e: ParseFailure(str(e)))
    """

    def composed(completion: CompletionHandler[U, E | E2]) -> None:
        def on_first(first_result: Outcome[T, E]) -> None:
            match first_result:
                case Error(_):
                    completion(first_result)  # type: ignore[arg-type]
                case Ok(value):
                    try:
                        mapped = transform(value)
                    except Exception as exc:
                        completion(Error(on_error(exc)))
                        return
                    completion(Ok(mapped))

        first(on_first)

    return composed


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("sequence", "map", "map_catching")
