# contestkit

Solutions to seven short olympiad-style problems. Each one is an importable
function and also a command that reads the problem's input from standard
input and writes the answer to standard output.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Problems

| Command | Module | Function | What it computes |
|---|---|---|---|
| `contestkit-lessons` | `contestkit.lessons` | `minutes_saved(k)` | How many minutes earlier lesson *k* ends when every break is 5 minutes shorter |
| `contestkit-digits` | `contestkit.digits` | `spell_digits(text)` | The text with every digit replaced by its English name |
| `contestkit-chocolate` | `contestkit.chocolate` | `can_split(grid)` | Whether a bar of 2×1 pieces can be broken along one straight line without breaking a piece |
| `contestkit-army` | `contestkit.army` | `min_cost(cities)` | The fewest coins needed to recruit every warrior from a list of `City(amount, cost)` |
| `contestkit-paints` | `contestkit.paints` | `choose_paints(colors, k)` | Zero-based indices of *k* paint tubes whose colours are close to each other; `color_distance(a, b)` gives the largest per-channel difference |
| `contestkit-bank` | `contestkit.bank` | `exit_times(gnomes, employees)` | When each `Gnome(arrival, service, accounting)` leaves a bank with several clerks and one chief accountant |
| `contestkit-hiking` | `contestkit.hiking` | `min_days(n, trails, start, end, day_limit)` | The fewest days needed to hike from one camp to another along `Trail(u, v, hours)`s, or `None` if it cannot be done |

## Command-line use

Each command reads the input format of its problem from standard input.
`contestkit-paints` prints tube numbers counted from 1, and
`contestkit-hiking` prints `-1` when the destination cannot be reached.
`contestkit-chocolate` prints `YES` or `NO`.

```
$ printf '2 3\n1 1 2\n3 3 2\n' | contestkit-chocolate
YES

$ printf '3\n1 1\n2 2\n4 3\n' | contestkit-army
5

$ printf '4 3 1 4\n15\n1 2 10\n2 3 12\n3 4 8\n' | contestkit-hiking
3
```

## Library use

```python
from contestkit.digits import spell_digits
from contestkit.chocolate import can_split
from contestkit.army import City, min_cost
from contestkit.hiking import Trail, min_days

spell_digits("Room 42")            # 'Room fourtwo'
can_split([[1, 1, 2], [3, 3, 2]])  # True
min_cost([City(1, 1), City(2, 2), City(4, 3)])  # 5
min_days(4, [Trail(1, 2, 10), Trail(2, 3, 12), Trail(3, 4, 8)], 1, 4, 15)  # 3
```