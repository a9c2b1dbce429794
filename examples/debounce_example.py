"""
Debounce — only the last of a burst of calls runs.
"""

import asyncio

from tipjar import debounce as D
from examples._infra import banner, run


async def main() -> None:
    banner("Debounce: three calls, one action")

    debounced_print = D.debounced(lambda: print("Action performed!"), seconds=1)

    debounced_print()
    debounced_print()
    debounced_print()

    # After a 1 second delay, this gets printed only once
    await asyncio.sleep(1.1)


if __name__ == "__main__":
    run(main)
