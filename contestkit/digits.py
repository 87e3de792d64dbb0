"""Replace every decimal digit in a message with its English name."""

from __future__ import annotations

import sys
from collections.abc import Sequence

DIGIT_NAMES = {
    "0": "zero",
    "1": "one",
    "2": "two",
    "3": "three",
    "4": "four",
    "5": "five",
    "6": "six",
    "7": "seven",
    "8": "eight",
    "9": "nine",
}

_TABLE = str.maketrans(DIGIT_NAMES)


def spell_digits(text: str) -> str:
    """Return text with each ASCII digit replaced by its English name."""
    return text.translate(_TABLE)


def main(argv: Sequence[str] | None = None) -> int:
    """Read one line from standard input and print it with digits spelled out."""
    line = sys.stdin.readline().rstrip("\r\n")
    print(spell_digits(line))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())