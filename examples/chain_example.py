"""
Chain — sequential callback calls without nesting.

Level 1: tipjar.chain
Level 0: kungfu.Result
"""

from tipjar import chain as C
from examples._infra import (
    banner,
    fetch_int,
    fetch_nothing,
    fetch_string,
    print_outcome,
)


def main() -> None:
    banner("Chain: fetch_int → halve → fetch_string")

    # Fluent
    C.chain(fetch_int).map(lambda i: str(i // 2)).then(fetch_string)(print_outcome)

    # Plain functions, same result
    C.sequence(C.map(fetch_int, lambda i: str(i // 2)), fetch_string)(print_outcome)

    banner("Chain: first step fails")

    C.chain(fetch_nothing).map(lambda i: str(i // 2)).then(fetch_string)(print_outcome)


if __name__ == "__main__":
    main()
