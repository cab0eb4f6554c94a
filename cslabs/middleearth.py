"""A random world of named places and the distances between them."""

from __future__ import annotations

import math
import secrets
import struct
from typing import MutableSequence

from cslabs.mersenne import MersenneTwister

ALL_CITY_NAMES = (
    "Bree", "Isengard", "Minas Tirith", "Osgiliath", "Edoras", "Helm's Deep",
    "Dunharrow", "Moria", "Lothlorien", "Rivendell", "The Grey Havens",
    "Bucklebury", "Bywater", "Hobbiton", "Michel Delving", "Orodruin",
    "Barad-Dur", "Minas Morgul", "Cirith Ungol", "Gorgoroth", "Emyn Muil",
    "Fangorn Forest", "Dagorlad", "Weathertop", "Gladden Fields",
    "Entwash River", "River Isen", "The Black Gate", "The Old Forest",
    "Trollshaws", "Pelennor Fields", "Hollin", "Mirkwood", "Misty Mountains",
    "Prancing Pony", "Laketown", "Dale", "Erebor", "Beorn's House", "Dol Guldur",
)

MIN_CITIES = 5
RANDOM_SEED = -1


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def shuffle(items: MutableSequence, generator: MersenneTwister) -> None:
    """Shuffle items in place, drawing one value from the generator per swap."""
    count = len(items)
    for i in range(count - 1, 0, -1):
        j = min(int(generator.unit() * count), count - 1)
        items[i], items[j] = items[j], items[i]


class MiddleEarth:
    """A world of randomly chosen and placed cities."""

    def __init__(self, xsize: int, ysize: int, num_cities: int, seed: int = RANDOM_SEED):
        self.xsize = xsize
        self.ysize = ysize
        self.generator = MersenneTwister(secrets.randbits(32) if seed == RANDOM_SEED else seed)
        self.num_city_names = len(ALL_CITY_NAMES)

        if num_cities > self.num_city_names:
            raise ValueError(
                f"There are only {self.num_city_names} city names, so "
                f"{num_cities} cities cannot be created."
            )
        num_cities = max(num_cities, MIN_CITIES)

        cities = list(ALL_CITY_NAMES)
        shuffle(cities, self.generator)
        self.cities: list[str] = cities[:num_cities]

        self.xpos: dict[str, float] = {}
        self.ypos: dict[str, float] = {}
        for city in self.cities:
            self.xpos[city] = _f32(self.generator.unit() * xsize)
            self.ypos[city] = _f32(self.generator.unit() * ysize)

        self.distances: dict[str, dict[str, float]] = {}
        for city1 in self.cities:
            row = self.distances.setdefault(city1, {})
            for city2 in self.cities:
                dx = _f32(self.xpos[city2] - self.xpos[city1])
                dy = _f32(self.ypos[city2] - self.ypos[city1])
                squared = _f32(_f32(dx * dx) + _f32(dy * dy))
                row[city2] = _f32(math.sqrt(squared))

    def distance(self, city1: str, city2: str) -> float:
        """Straight-line distance between two cities of this world."""
        try:
            return self.distances[city1][city2]
        except KeyError as missing:
            raise KeyError(f"unknown city: {missing.args[0]}") from None

    def itinerary(self, length: int) -> list[str]:
        """A random start city followed by `length` other cities to visit."""
        if length < 0 or length >= len(self.cities):
            raise ValueError(
                f"You have requested an itinerary of {length} cities; you cannot "
                f"ask for an itinerary of more than length {len(self.cities) - 1}"
            )
        chosen = list(self.cities)
        shuffle(chosen, self.generator)
        return chosen[: length + 1]

    def describe(self) -> str:
        """Text listing the cities in use and their positions."""
        lines = [
            f"there are {self.num_city_names} locations to choose from; "
            f"we are using {len(self.cities)}",
            "they are: ",
        ]
        lines.extend(
            f"\t{city} @ ({self.xpos[city]:g}, {self.ypos[city]:g})" for city in self.cities
        )
        return "\n".join(lines) + "\n"

    def table(self) -> str:
        """Tab-separated table of positions and pairwise distances."""
        header = "Location\txpos\typos\t" + "".join(f"{city}\t" for city in self.cities)
        rows = [
            f"{c1}\t{self.xpos[c1]:g}\t{self.ypos[c1]:g}\t"
            + "".join(f"{self.distances[c1][c2]:g}\t" for c2 in self.cities)
            for c1 in self.cities
        ]
        return "Table: \n\n" + "\n".join([header, *rows]) + "\n"