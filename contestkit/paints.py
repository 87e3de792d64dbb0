"""Pick k paint tubes whose colours are as close to each other as possible."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from itertools import combinations

Color = tuple[int, int, int]


def color_distance(a: Sequence[int], b: Sequence[int]) -> int:
    """Return the largest per-channel difference between two colours."""
    return max(abs(x - y) for x, y in zip(a, b))


def choose_paints(colors: Sequence[Sequence[int]], k: int) -> list[int]:
    """Return zero-based indices of up to k tubes, gathered from the closest pairs first.

    Pairs of tubes are visited in order of increasing distance. The later
    tube of each pair is taken first, then the earlier one, until k distinct
    tubes have been collected.
    """
    pairs = sorted(
        ((color_distance(colors[i], colors[j]), i, j) for j, i in combinations(range(len(colors)), 2)),
        key=lambda pair: pair[0],
    )
    chosen: dict[int, None] = {}
    for _, later, earlier in pairs:
        chosen.setdefault(later)
        if len(chosen) == k:
            break
        chosen.setdefault(earlier)
        if len(chosen) == k:
            break
    return list(chosen)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the tubes from standard input and print the chosen tube numbers."""
    tokens = [int(tok) for tok in sys.stdin.read().split()]
    n, k = tokens[0], tokens[1]
    values = tokens[2 : 2 + 3 * n]
    colors = [tuple(values[i : i + 3]) for i in range(0, 3 * n, 3)]
    print(" ".join(str(index + 1) for index in choose_paints(colors, k)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())