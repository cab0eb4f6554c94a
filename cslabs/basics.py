"""Small numeric programs: integer powers and statistics over five numbers."""

from __future__ import annotations

import sys
from typing import Iterator, Sequence

COUNT = 5


def power(base: int, exponent: int) -> int:
    """Return base raised to a non-negative integer exponent."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of the values."""
    if not values:
        raise ValueError("average of no values")
    return sum(values) / len(values)


def maximum(values: Sequence[int]) -> int:
    """Largest of the values."""
    if not values:
        raise ValueError("maximum of no values")
    return max(values)


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("expected an integer, input ended") from None


def power_main(argv=None) -> int:
    """Read a base and an exponent and print the power."""
    tokens = _stdin_tokens()
    base = _read_int(tokens)
    exponent = _read_int(tokens)
    print(power(base, exponent))
    return 0


def stats_main(argv=None) -> int:
    """Read five numbers, echo them, and print their average and maximum."""
    tokens = _stdin_tokens()
    print("Enter five numbers: ")
    values = []
    for _ in range(COUNT):
        print("Enter the next number : ", end="")
        values.append(_read_int(tokens))
    for index, value in enumerate(values):
        print(f"Value [ {index}] is : {value}")
    print(f"The average is {average(values):g}")
    print(f"The max is {maximum(values)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(stats_main())