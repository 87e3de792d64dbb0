"""Fewest days a hiking group needs to get from one camp to another."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Trail:
    """A two-way trail between camps u and v (numbered from 1) taking some hours."""

    u: int
    v: int
    hours: int


def min_days(
    n: int, trails: Iterable[Trail], start: int, end: int, day_limit: int
) -> int | None:
    """Return the fewest days to walk from start to end, or None if it cannot be done.

    Camps are numbered from 1 to n. At most day_limit hours are walked per day
    and nights are spent only at camps.
    """
    graph: list[dict[int, int]] = [{} for _ in range(n)]
    for trail in trails:
        graph[trail.u - 1][trail.v - 1] = trail.hours
        graph[trail.v - 1][trail.u - 1] = trail.hours
    neighbours = [sorted((camp, hours) for camp, hours in edges.items() if hours) for edges in graph]

    target = end - 1
    best: int | None = None
    queue: deque[tuple[int, int, int, frozenset[int]]] = deque([(start - 1, 1, day_limit, frozenset())])
    while queue:
        camp, days, hours_left, visited = queue.popleft()
        if best is not None and best <= days:
            continue
        if camp == target:
            best = days
            continue
        for nxt, hours in neighbours[camp]:
            if nxt in visited:
                continue
            if hours_left - hours < 0:
                queue.append((nxt, days + 1, day_limit - hours, visited | {nxt}))
            else:
                queue.append((nxt, days, hours_left - hours, visited | {nxt}))
    return best


def main(argv: Sequence[str] | None = None) -> int:
    """Read the map from standard input and print the fewest days, or -1."""
    tokens = [int(tok) for tok in sys.stdin.read().split()]
    n, m, start, end, day_limit = tokens[:5]
    values = tokens[5 : 5 + 3 * m]
    trails = [Trail(*values[i : i + 3]) for i in range(0, 3 * m, 3)]
    days = min_days(n, trails, start, end, day_limit)
    print(-1 if days is None else days)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())