"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from dataclasses import dataclass

from kungfu import Ok, Error

from tipjar import CompletionHandler, Outcome


# Errors
@dataclass(frozen=True, slots=True)
class Failure:
    message: str

    def __str__(self) -> str:
        return self.message


# Fake services
def fetch_int(completion: CompletionHandler[int, Failure]) -> None:
    completion(Ok(42))


def fetch_string(arg: str, completion: CompletionHandler[str, Failure]) -> None:
    completion(Ok(f"🎉 {arg}"))


def fetch_nothing(completion: CompletionHandler[int, Failure]) -> None:
    completion(Error(Failure("network down")))


# Helpers
def print_outcome(outcome: Outcome[object, object]) -> None:
    match outcome:
        case Ok(value):
            print(value)
        case Error(e):
            print(f"error: {e}")


def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    asyncio.run(main())
