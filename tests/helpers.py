"""Test helpers (small, reusable doubles).

Operations here complete on demand so tests can control when and how often
a completion handler fires.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kungfu import Ok, Error

# =============================================================================
# Outcome Helpers
# =============================================================================


def settled(outcome: Any) -> tuple[str, Any]:
    """Reduce an Ok/Error to a plain tuple for equality assertions."""
    match outcome:
        case Ok(value):
            return ("ok", value)
        case Error(error):
            return ("error", error)
    raise AssertionError(f"not an outcome: {outcome!r}")


def ok(value: Any) -> tuple[str, Any]:
    return ("ok", value)


def err(error: Any) -> tuple[str, Any]:
    return ("error", error)


# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class Recorder:
    """Completion handler that records every outcome it receives, settled."""

    outcomes: list[Any] = field(default_factory=list)

    def __call__(self, outcome: Any) -> None:
        self.outcomes.append(settled(outcome))

    @property
    def only(self) -> Any:
        assert len(self.outcomes) == 1, self.outcomes
        return self.outcomes[0]


@dataclass
class Deferred:
    """Zero-arg operation that completes only when the test says so."""

    handlers: list[Any] = field(default_factory=list)

    def __call__(self, completion: Any) -> None:
        self.handlers.append(completion)

    def succeed(self, value: Any) -> None:
        self.handlers.pop(0)(Ok(value))

    def fail(self, error: Any) -> None:
        self.handlers.pop(0)(Error(error))


@dataclass
class SpyUnary:
    """Unary operation that records its inputs and completes synchronously."""

    reply: Any = None
    inputs: list[Any] = field(default_factory=list)

    def __call__(self, arg: Any, completion: Any) -> None:
        self.inputs.append(arg)
        if self.reply is None:
            completion(Ok(arg))
        else:
            completion(self.reply(arg))


@dataclass
class DeferredUnary:
    """Unary operation that completes only when the test says so."""

    pending: list[tuple[Any, Any]] = field(default_factory=list)

    def __call__(self, arg: Any, completion: Any) -> None:
        self.pending.append((arg, completion))

    @property
    def inputs(self) -> list[Any]:
        return [arg for arg, _ in self.pending]

    def succeed(self, value: Any) -> None:
        _, completion = self.pending.pop(0)
        completion(Ok(value))

    def fail(self, error: Any) -> None:
        _, completion = self.pending.pop(0)
        completion(Error(error))
