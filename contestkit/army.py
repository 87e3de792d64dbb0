"""Minimum coins needed to recruit every warrior from every city."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class City:
    """A city with its number of warriors and the price of hiring one."""

    amount: int
    cost: int


def min_cost(cities: Iterable[City]) -> int:
    """Return the fewest coins that bring every warrior into the army."""
    ordered = sorted(cities)
    remaining = sum(city.amount for city in ordered)
    total = 0
    for city in reversed(ordered):
        remaining -= city.amount
        if city.amount < remaining:
            continue
        hired = (city.amount - remaining) // 2 + 1
        total += hired * city.cost
        remaining += hired
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Read cities from standard input and print the minimum cost."""
    tokens = sys.stdin.read().split()
    n = int(tokens[0])
    numbers = [int(tok) for tok in tokens[1 : 1 + 2 * n]]
    cities = [City(a, c) for a, c in zip(numbers[::2], numbers[1::2])]
    print(min_cost(cities))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())