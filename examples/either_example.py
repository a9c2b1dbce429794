"""
Either — a value holding one of two types.
"""

import random

from tipjar import either as E
from examples._infra import banner


def main() -> None:
    banner("Either: Left(2) or Right('Foo')")

    int_or_string: E.Either[int, str] = E.Left(2) if random.random() < 0.5 else E.Right("Foo")

    E.either(
        int_or_string,
        if_left=lambda i: print(i + 1),
        if_right=lambda s: print(s + "Bar"),
    )


if __name__ == "__main__":
    main()
