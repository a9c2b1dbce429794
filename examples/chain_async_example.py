"""
Chain over asyncio — callback steps that complete later on the loop.

Level 2: tipjar.lift (combinators.lift)
Level 1: tipjar.chain
Level 0: kungfu.Result
"""

import asyncio

from kungfu import Ok, Error, Result

from tipjar import chain as C
from tipjar import lift as L
from examples._infra import Failure, banner, fetch_string, run


async def lookup_user(user_id: int) -> Result[str, Failure]:
    await asyncio.sleep(0.01)
    if user_id == 42:
        return Ok("arthur")
    return Error(Failure(f"user {user_id} not found"))


async def main() -> None:
    banner("Awaitable → callback → awaitable")

    for user_id in (42, 7):
        greeting = (
            C.chain(C.from_lazy(L.call(lookup_user, user_id)))
            .map(str.title)
            .then(fetch_string)
        )

        match await greeting.lazy():
            case Ok(text):
                print(text)
            case Error(e):
                print(f"error: {e}")


if __name__ == "__main__":
    run(main)
