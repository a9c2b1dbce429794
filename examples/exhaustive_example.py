"""
Exhaustive — make a match statement cover every variant.
"""

from dataclasses import dataclass

from tipjar import exhaustive
from examples._infra import banner


@dataclass(frozen=True, slots=True)
class One:
    pass


@dataclass(frozen=True, slots=True)
class Two:
    pass


@dataclass(frozen=True, slots=True)
class Three:
    pass


type Number = One | Two | Three


def describe(number: Number) -> str:
    match number:
        case One():
            return "This is One"
        case Two():
            return "This is Two"
        case Three():
            return "This is Three"
        case _:
            # Removing a case above makes the type checker reject this line
            exhaustive(number)


def main() -> None:
    banner("Exhaustive match")
    print(describe(Two()))


if __name__ == "__main__":
    main()
