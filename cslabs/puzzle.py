"""Breadth-first solver for the 3x3 sliding tile puzzle."""

from __future__ import annotations

import sys
from collections import deque
from itertools import combinations
from typing import Optional

GOAL = "123456780"
SIDE = 3
CELLS = SIDE * SIDE
BLANK = "0"


def _blank_index(grid: str) -> int:
    if len(grid) != CELLS or grid.count(BLANK) != 1:
        raise ValueError(f"a puzzle is {CELLS} tiles with exactly one {BLANK!r}: {grid!r}")
    return grid.index(BLANK)


def neighbors(grid: str) -> list[str]:
    """Grids reachable by sliding one tile into the blank: vertical moves first, then horizontal."""
    index = _blank_index(grid)
    row, col = divmod(index, SIDE)
    offsets = []
    if row < SIDE - 1:
        offsets.append(SIDE)
    if row > 0:
        offsets.append(-SIDE)
    if col < SIDE - 1:
        offsets.append(1)
    if col > 0:
        offsets.append(-1)

    result = []
    for offset in offsets:
        cells = list(grid)
        other = index + offset
        cells[index], cells[other] = cells[other], BLANK
        result.append("".join(cells))
    return result


def count_inversions(grid: str) -> int:
    """Number of tile pairs, ignoring the blank, that appear out of order."""
    tiles = [tile for tile in grid if tile != BLANK]
    return sum(later < earlier for earlier, later in combinations(tiles, 2))


def is_solvable(grid: str) -> bool:
    """A puzzle can reach the goal only when its inversion count is even."""
    return count_inversions(grid) % 2 == 0


def solve(grid: str) -> Optional[int]:
    """Fewest moves to reach the goal, or None when the goal cannot be reached."""
    _blank_index(grid)
    if grid == GOAL:
        return 0
    if not is_solvable(grid):
        return None

    seen = {grid}
    queue = deque([(grid, 0)])
    while queue:
        current, distance = queue.popleft()
        for candidate in neighbors(current):
            if candidate == GOAL:
                return distance + 1
            if candidate not in seen:
                seen.add(candidate)
                queue.append((candidate, distance + 1))
    return None


def main(argv=None) -> int:
    """Read nine tiles from standard input and print how many moves solve them."""
    print("Enter puzzle")
    tokens = [token for line in sys.stdin for token in line.split()]
    if len(tokens) < CELLS:
        print(f"expected {CELLS} tiles, got {len(tokens)}", file=sys.stderr)
        return 1
    grid = "".join(tokens[:CELLS])

    print("Solving puzzle")
    try:
        _blank_index(grid)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    if grid == GOAL:
        print(0)
        return 0

    inversions = count_inversions(grid)
    print(inversions)
    if inversions % 2 == 1:
        print("IMPOSSIBLE")
        return 0

    moves = solve(grid)
    if moves is not None:
        print(moves)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())