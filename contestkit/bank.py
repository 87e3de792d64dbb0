"""Exit times of gnomes served by several clerks and then one chief accountant."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Gnome:
    """A visitor: arrival time, minutes at a clerk, minutes at the accountant."""

    arrival: int
    service: int
    accounting: int


def exit_times(gnomes: Iterable[Gnome], employees: int) -> list[int]:
    """Return, in input order, the moment each gnome leaves the bank."""
    free_at = [0] * employees
    finished: list[tuple[int, int, int]] = []
    for number, gnome in enumerate(gnomes):
        best = 0
        for candidate in range(1, employees):
            if gnome.arrival >= free_at[best]:
                break
            if free_at[candidate] < free_at[best]:
                best = candidate
        free_at[best] = max(free_at[best], gnome.arrival) + gnome.service
        finished.append((free_at[best], number, gnome.accounting))

    finished.sort(key=lambda entry: entry[0])
    result = [0] * len(finished)
    accountant_free = 0
    for ready, number, accounting in finished:
        accountant_free = max(accountant_free, ready) + accounting
        result[number] = accountant_free
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Read gnomes from standard input and print each exit time on its own line."""
    tokens = [int(tok) for tok in sys.stdin.read().split()]
    n, m = tokens[0], tokens[1]
    values = tokens[2 : 2 + 3 * n]
    gnomes = [Gnome(*values[i : i + 3]) for i in range(0, 3 * n, 3)]
    for moment in exit_times(gnomes, m):
        print(moment)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())