"""
Debounced — run an action only after calls have stopped for a while.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from tipjar._duration import resolve_duration

log = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Debounced Callable
# ═══════════════════════════════════════════════════════════════════════════════


class Debounced[**P]:
    """
    Callable that postpones `action` until `delay` has passed quietly.

    Each call cancels the previously scheduled run and schedules a new one
    with the latest arguments. At most one run is pending at a time.

    Example:
        search = Debounced(query_api, timedelta(milliseconds=300))
        search("k"); search("ko"); search("kot")   # query_api("kot") runs once
    """

    def __init__(
        self,
        action: Callable[P, object],
        delay: timedelta,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._action = action
        self._delay = delay
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._args: tuple[tuple[Any, ...], dict[str, Any]] | None = None

    @property
    def delay(self) -> timedelta:
        return self._delay

    @property
    def pending(self) -> bool:
        """Whether a run is scheduled."""
        return self._handle is not None

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> None:
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        if self._handle is not None:
            self._handle.cancel()
            log.debug("debounce: rescheduled %r", self._action)
        self._args = (args, kwargs)
        self._handle = loop.call_later(self._delay.total_seconds(), self._fire)

    def cancel(self) -> None:
        """Drop the pending run, if any."""
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._args = None

    def flush(self) -> None:
        """Run the pending action now instead of waiting."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._fire()

    def _fire(self) -> None:
        pending, self._args, self._handle = self._args, None, None
        if pending is None:
            return
        args, kwargs = pending
        self._action(*args, **kwargs)


def debounced[**P](
    action: Callable[P, object],
    *,
    seconds: float | None = None,
    duration: timedelta | None = None,
    loop: asyncio.AbstractEventLoop | None = None,
) -> Debounced[P]:
    """
    Debounce `action` by the given delay.

    Without `loop`, the running loop at call time is used.

    Example:
        debounced_print = D.debounced(lambda: print("Action performed!"), seconds=1)
        debounced_print(); debounced_print(); debounced_print()
        # one second later, printed once
    """
    return Debounced(action, resolve_duration(seconds, duration), loop)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Debounced", "debounced")
