"""Decide whether a chocolate bar of 2x1 pieces can be broken along a straight line."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def _has_clean_cut(rows: Sequence[Sequence[int]]) -> bool:
    """True if some boundary between adjacent rows splits no piece."""
    return any(
        all(above != below for above, below in zip(upper, lower))
        for upper, lower in zip(rows, rows[1:])
    )


def can_split(grid: Sequence[Sequence[int]]) -> bool:
    """Return whether the bar can be split horizontally or vertically without breaking a piece."""
    rows = [list(row) for row in grid]
    columns = [list(col) for col in zip(*rows)]
    return _has_clean_cut(rows) or _has_clean_cut(columns)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the bar from standard input and print YES or NO."""
    tokens = sys.stdin.read().split()
    n, m = int(tokens[0]), int(tokens[1])
    values = [int(tok) for tok in tokens[2 : 2 + n * m]]
    grid = [values[i * m : (i + 1) * m] for i in range(n)]
    print("YES" if can_split(grid) else "NO")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())