"""Brute-force shortest round trip through an itinerary of cities."""

from __future__ import annotations

import itertools
import struct
import sys
from typing import NamedTuple, Sequence

from cslabs.middleearth import MiddleEarth

USAGE = "Usage: traveling <world_height> <world_width> <num_cities> <random_seed> <cities_to_visit>"


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class Route(NamedTuple):
    """A round trip from start through destinations and back."""

    distance: float
    start: str
    destinations: tuple[str, ...]


def factorial(n: int) -> int:
    """n! for non-negative n."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def route_distance(world: MiddleEarth, start: str, destinations: Sequence[str]) -> float:
    """Length of the cycle start -> destinations in order -> start."""
    if not destinations:
        raise ValueError("a route needs at least one destination")
    total = _f32(world.distance(start, destinations[0]) + world.distance(destinations[-1], start))
    for here, there in zip(destinations, destinations[1:]):
        total = _f32(total + world.distance(here, there))
    return total


def format_route(start: str, destinations: Sequence[str]) -> str:
    """Render a round trip as 'A -> B -> ... -> A'."""
    return " -> ".join([start, *destinations, start])


def shortest_route(world: MiddleEarth, itinerary: Sequence[str]) -> Route:
    """Try every order of the itinerary after its first city; keep the first shortest."""
    start = itinerary[0]
    destinations = sorted(city for city in itinerary if city != start)
    best: Route | None = None
    for order in itertools.permutations(destinations):
        length = route_distance(world, start, order)
        if best is None or length < best.distance:
            best = Route(length, start, order)
    if best is None:
        raise ValueError("a route needs at least one destination")
    return best


def main(argv=None) -> int:
    """Build a world from the arguments and print the shortest round trip."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 5:
        print(USAGE)
        return 0
    width, height, num_cities, seed, to_visit = (int(arg) for arg in args)
    try:
        world = MiddleEarth(width, height, num_cities, seed)
        itinerary = world.itinerary(to_visit)
    except ValueError as error:
        print(error)
        return 0
    route = shortest_route(world, itinerary)
    print(f"Minimum path has distance {route.distance:g}: "
          f"{format_route(route.start, route.destinations)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())