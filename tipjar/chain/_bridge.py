"""
Bridge between callback operations and awaitable LazyCoroResult.

    result = await to_lazy(fetch_user)         # callback -> awaitable
    from_lazy(L.call(api.fetch_user, 42))(cb)  # awaitable -> callback
"""

from __future__ import annotations

import asyncio

from kungfu import LazyCoroResult, Result

from tipjar._types import CompletionHandler, Outcome, ZeroArgOperation

# Strong references to tasks started by from_lazy(); the loop only keeps weak ones.
_running: set[asyncio.Task[None]] = set()

# ═══════════════════════════════════════════════════════════════════════════════
# to_lazy() — Callback to Awaitable
# ═══════════════════════════════════════════════════════════════════════════════


def to_lazy[T, E](operation: ZeroArgOperation[T, E]) -> LazyCoroResult[T, E]:
    """
    Await a callback operation.

    The operation starts when the result is awaited. Its handler may be
    called synchronously, later on the loop, or from another thread; only
    the first outcome settles the await.

    Example:
        match await to_lazy(chain(fetch_int).then(fetch_string)):
            case Ok(text):
                print(text)
            case Error(e):
                print(f"failed: {e}")
    """

    async def run() -> Result[T, E]:
        loop = asyncio.get_running_loop()
        future: asyncio.Future[Result[T, E]] = loop.create_future()

        def settle(outcome: Outcome[T, E]) -> None:
            if not future.done():
                future.set_result(outcome)

        def completion(outcome: Outcome[T, E]) -> None:
            loop.call_soon_threadsafe(settle, outcome)

        operation(completion)
        return await future

    return LazyCoroResult(run)


# ═══════════════════════════════════════════════════════════════════════════════
# from_lazy() — Awaitable to Callback
# ═══════════════════════════════════════════════════════════════════════════════


def from_lazy[T, E](lazy: LazyCoroResult[T, E]) -> ZeroArgOperation[T, E]:
    """
    Expose a LazyCoroResult as a callback operation.

    Invoking the operation schedules the computation on the running loop
    and returns immediately; the handler fires when it finishes. Must be
    invoked from inside a running event loop.

    If awaiting `lazy` or running the handler raises (for example a map()
    transform further down the chain), the exception is passed to the
    loop's exception handler as soon as the task ends. The handler never
    receives an outcome in that case, so a to_lazy() over such a chain
    cannot resolve; use map_catching() to turn the failure into an Error.
    """

    def operation(completion: CompletionHandler[T, E]) -> None:
        loop = asyncio.get_running_loop()

        async def drive() -> None:
            completion(await lazy)

        task = loop.create_task(drive())
        _running.add(task)
        task.add_done_callback(_finished)

    return operation


def _finished(task: asyncio.Task[None]) -> None:
    _running.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        task.get_loop().call_exception_handler({
            "message": "from_lazy: operation raised while completing",
            "exception": exc,
            "task": task,
        })


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("to_lazy", "from_lazy")
