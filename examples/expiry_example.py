"""
Expiry — a value that is only valid for a limited time.
"""

import time

from tipjar import expiry as X
from examples._infra import banner


def main() -> None:
    banner("Expiry: 3 second lifespan")

    multiplier = X.expirable(42, seconds=3)

    time.sleep(2)
    print(multiplier.value)  # 42
    time.sleep(2)
    print(multiplier.value)  # None


if __name__ == "__main__":
    main()
