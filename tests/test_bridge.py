from __future__ import annotations

import asyncio
import threading

import pytest

from kungfu import Ok, Error, Result

from tipjar import chain as C
from tipjar import lift as L
from tests.helpers import Deferred, Recorder, err, ok, settled

pytestmark = pytest.mark.unit


async def lookup(user_id: int) -> Result[str, str]:
    await asyncio.sleep(0)
    return Ok(f"user-{user_id}") if user_id > 0 else Error("invalid id")


# =============================================================================
# to_lazy()
# =============================================================================


@pytest.mark.asyncio
async def test_to_lazy_resolves_synchronous_operation() -> None:
    result = await C.to_lazy(C.pure(5))

    assert settled(result) == ok(5)


@pytest.mark.asyncio
async def test_to_lazy_resolves_later_completion() -> None:
    deferred = Deferred()
    loop = asyncio.get_running_loop()
    loop.call_later(0.01, lambda: deferred.succeed("done"))

    result = await C.to_lazy(deferred)

    assert settled(result) == ok("done")


@pytest.mark.asyncio
async def test_to_lazy_accepts_completion_from_another_thread() -> None:
    threads: list[threading.Thread] = []

    def threaded(completion) -> None:
        thread = threading.Thread(target=lambda: completion(Error("from thread")))
        threads.append(thread)
        thread.start()

    result = await C.to_lazy(threaded)
    for thread in threads:
        thread.join(timeout=1)

    assert settled(result) == err("from thread")
    assert [t.is_alive() for t in threads] == [False]


@pytest.mark.asyncio
async def test_to_lazy_keeps_first_outcome() -> None:
    def twice(completion) -> None:
        completion(Ok(1))
        completion(Ok(2))

    result = await C.to_lazy(twice)

    assert settled(result) == ok(1)


@pytest.mark.asyncio
async def test_chain_lazy_runs_whole_chain() -> None:
    def halve(x: int, completion) -> None:
        completion(Ok(x // 2))

    result = await C.chain(C.pure(42)).then(halve).map(str).lazy()

    assert settled(result) == ok("21")


@pytest.mark.asyncio
async def test_lift_from_operation_is_to_lazy() -> None:
    result = await L.from_operation(C.fail("nope"))

    assert settled(result) == err("nope")


# =============================================================================
# from_lazy()
# =============================================================================


@pytest.mark.asyncio
async def test_from_lazy_delivers_result_after_returning() -> None:
    recorder = Recorder()
    done = asyncio.Event()

    def handler(outcome) -> None:
        recorder(outcome)
        done.set()

    C.from_lazy(L.call(lookup, 3))(handler)
    assert recorder.outcomes == []

    await asyncio.wait_for(done.wait(), timeout=1)
    assert recorder.only == ok("user-3")


@pytest.mark.asyncio
async def test_mixed_chain_round_trip() -> None:
    greeting = C.chain(C.from_lazy(L.call(lookup, 7))).map(str.upper)

    assert settled(await greeting.lazy()) == ok("USER-7")


@pytest.mark.asyncio
async def test_mixed_chain_short_circuits_on_awaitable_error() -> None:
    calls: list[str] = []

    def record(arg: str, completion) -> None:
        calls.append(arg)
        completion(Ok(arg))

    result = await C.chain(C.from_lazy(L.call(lookup, 0))).then(record).lazy()

    assert settled(result) == err("invalid id")
    assert calls == []


def test_from_lazy_requires_running_loop() -> None:
    with pytest.raises(RuntimeError):
        C.from_lazy(L.call(lookup, 1))(Recorder())


@pytest.mark.asyncio
async def test_from_lazy_reports_exception_raised_while_completing() -> None:
    loop = asyncio.get_running_loop()
    reported: list[dict[str, object]] = []
    seen = asyncio.Event()

    def on_exception(_: asyncio.AbstractEventLoop, context: dict[str, object]) -> None:
        reported.append(context)
        seen.set()

    previous = loop.get_exception_handler()
    loop.set_exception_handler(on_exception)
    try:
        recorder = Recorder()
        C.chain(C.from_lazy(L.call(lookup, 7))).map(lambda _: 1 // 0)(recorder)
        await asyncio.wait_for(seen.wait(), timeout=1)
    finally:
        loop.set_exception_handler(previous)

    assert recorder.outcomes == []
    assert len(reported) == 1
    assert isinstance(reported[0]["exception"], ZeroDivisionError)


@pytest.mark.asyncio
async def test_map_catching_resolves_awaitable_chain_with_raising_transform() -> None:
    result = await (
        C.chain(C.from_lazy(L.call(lookup, 7)))
        .map_catching(lambda _: 1 // 0, on_error=lambda e: type(e).__name__)
        .lazy()
    )

    assert settled(result) == err("ZeroDivisionError")
