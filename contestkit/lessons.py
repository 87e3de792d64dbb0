"""How much earlier a lesson ends when every break is shortened by five minutes."""

from __future__ import annotations

import sys
from collections.abc import Sequence

BREAK_REDUCTION = 5


def minutes_saved(k: int) -> int:
    """Return how many minutes earlier the k-th lesson ends."""
    return (k - 1) * BREAK_REDUCTION


def main(argv: Sequence[str] | None = None) -> int:
    """Read k from standard input and print the minutes saved."""
    k = int(sys.stdin.read().split()[0])
    print(minutes_saved(k))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())