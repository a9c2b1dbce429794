"""
Memo — cache-efficient versions of pure functions.
"""

import math
import time

from tipjar import memo as M
from examples._infra import banner


def main() -> None:
    banner("Memo: cached cos")

    cached_cos = M.cached(math.cos)

    start = time.perf_counter_ns()
    cached_cos(math.pi * 2)
    print(f"first call:  {time.perf_counter_ns() - start} ns")

    # value of cos for 2π is now cached

    start = time.perf_counter_ns()
    cached_cos(math.pi * 2)
    print(f"second call: {time.perf_counter_ns() - start} ns")

    print(cached_cos.info())


if __name__ == "__main__":
    main()
