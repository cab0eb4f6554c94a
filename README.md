# cslabs

Small, self-contained programs and classes from a data-structures course:
object lifetimes, a bank account, integer powers and simple statistics, a
doubly linked list with a positional iterator, a brute-force shortest round
trip over a random world of cities, an 8-puzzle solver and a topological sort.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `cslabs-lifecycle` | Creates, copies, swaps and releases `NamedObject` instances, printing each construction, copy and release. |
| `cslabs-bank` | Menu for one `BankAccount` on standard input: create, deposit, withdraw, view balance, quit. |
| `cslabs-power` | Reads a base and a non-negative exponent from standard input and prints the power. |
| `cslabs-stats` | Reads five integers, echoes them, then prints their average and maximum. |
| `cslabs-traveling` | Prints the shortest round trip through a random itinerary of cities. |
| `cslabs-puzzle` | Reads a 3x3 sliding puzzle and prints the fewest moves to solve it. |
| `cslabs-topological` | Reads edges from a file and prints a topological order of the vertices. |
| `cslabs-listshell` | Menu for exercising one `LinkedList` and one `ListIterator`. |

The menu commands (`cslabs-bank`, `cslabs-listshell`) read whitespace-separated
tokens from standard input and stop when asked to quit or when input ends.

### Shortest round trip

```
cslabs-traveling <world_width> <world_height> <num_cities> <random_seed> <cities_to_visit>
```

For example, `cslabs-traveling 20 20 10 42 5` builds a 20x20 world of ten
cities placed by a seeded MT19937 generator, picks a start city plus five
destinations, tries every order of the destinations and prints the shortest
route that returns to the start:

```
Minimum path has distance <d>: A -> B -> ... -> A
```

A seed of `-1` draws a random seed. There are 40 city names; asking for more
cities prints a message and stops, and fewer than 5 are raised to 5. The
number of cities to visit must be less than the number of cities. With any
argument count other than five, a usage line is printed.

### Sliding puzzle

`cslabs-puzzle` reads nine whitespace-separated digits, row by row, with `0`
for the blank. The goal is `1 2 3 / 4 5 6 / 7 8 0`. If the input is already the
goal it prints `0`; otherwise it prints the number of inversions, then either
`IMPOSSIBLE` (odd inversion count) or the minimum number of moves found by a
breadth-first search.

### Topological sort

The input file holds pairs of vertex names separated by whitespace, each edge
directed from the first name to the second, and ends with the token `0`
(for example a last line `0 0`).

```
cslabs-topological courses.txt
```

Vertices are printed on one line, each followed by a space. Vertices that lie
on a cycle, or can only be reached through one, are left out.

## Library use

```python
from cslabs.linkedlist import LinkedList, format_list
from cslabs.bank import BankAccount, is_amount, sanitize_amount
from cslabs.basics import power, average, maximum
from cslabs.puzzle import solve, is_solvable, neighbors
from cslabs.topological import parse_edges, topological_order
from cslabs.middleearth import MiddleEarth
from cslabs.traveling import shortest_route, format_route

numbers = LinkedList([1, 2, 3])
numbers.append(4)
numbers.remove(2)
print(format_list(numbers, True))        # "1 3 4 "
position = numbers.find(3)
numbers.insert_after(7, position)
print(list(numbers))                     # [1, 3, 7, 4]

account = BankAccount(10.0)
account.deposit(5.0)                     # 15.0
account.withdraw(3.0)                    # 12.0; a withdrawal not below the balance is ignored
print(sanitize_amount("3.456"))          # 3.46

print(power(2, 10))                      # 1024
print(average([1, 2, 3, 4, 5]))          # 3.0
print(maximum([4, 9, 2]))                # 9

print(solve("123456708"))                # 1
print(solve("213456780"))                # None (not solvable)

print(topological_order(parse_edges("a b b c 0 0")))   # ['a', 'b', 'c']

world = MiddleEarth(20, 20, 10, 42)
route = shortest_route(world, world.itinerary(4))
print(route.distance, format_route(route.start, route.destinations))
print(world.describe())
print(world.table())
```

Errors are raised as exceptions: `ValueError` for a negative exponent, an
empty sequence, a malformed puzzle, an unpaired vertex in an edge list, too
many cities or too long an itinerary, and `IndexError` when retrieving from a
`ListIterator` that is not on an item.

`cslabs.mersenne.MersenneTwister` is the 32-bit MT19937 generator used to
build worlds; the same seed always gives the same world.

## What it does not do

There is no command that prints a world's city list or distance table;
`MiddleEarth.describe()` and `MiddleEarth.table()` return them as text for
library use only.