import pytest

from cslabs.mersenne import MersenneTwister
from cslabs.middleearth import ALL_CITY_NAMES, MiddleEarth, shuffle


def test_full_world_uses_every_city_name():
    world = MiddleEarth(20, 20, 40, 1)
    assert len(world.cities) == 40
    assert sorted(world.cities) == sorted(ALL_CITY_NAMES)
    assert len(set(world.cities)) == 40


def test_shuffle_is_permutation():
    items = list(range(30))
    shuffle(items, MersenneTwister(3))
    assert sorted(items) == list(range(30))


def test_shuffle_deterministic():
    a = list("abcdefghij")
    b = list("abcdefghij")
    shuffle(a, MersenneTwister(11))
    shuffle(b, MersenneTwister(11))
    assert a == b


def test_same_seed_same_world():
    w1 = MiddleEarth(20, 20, 10, 42)
    w2 = MiddleEarth(20, 20, 10, 42)
    assert w1.cities == w2.cities
    assert w1.xpos == w2.xpos
    assert w1.itinerary(4) == w2.itinerary(4)


def test_city_count_and_membership():
    world = MiddleEarth(20, 20, 12, 1)
    assert len(world.cities) == 12
    assert len(set(world.cities)) == 12
    assert set(world.cities) <= set(ALL_CITY_NAMES)


def test_minimum_city_count():
    world = MiddleEarth(20, 20, 2, 1)
    assert len(world.cities) == 5


def test_too_many_cities():
    with pytest.raises(ValueError, match="only 40 city names"):
        MiddleEarth(20, 20, 41, 1)


def test_positions_within_bounds():
    world = MiddleEarth(30, 10, 15, 8)
    assert all(0 <= world.xpos[c] <= 30 for c in world.cities)
    assert all(0 <= world.ypos[c] <= 10 for c in world.cities)


def test_distances_symmetric_and_zero_diagonal():
    world = MiddleEarth(20, 20, 10, 5)
    for a in world.cities:
        assert world.distance(a, a) == 0.0
        for b in world.cities:
            assert world.distance(a, b) == world.distance(b, a)
            assert world.distance(a, b) >= 0.0


def test_triangle_inequality():
    world = MiddleEarth(20, 20, 8, 6)
    a, b, c = world.cities[:3]
    assert world.distance(a, c) <= world.distance(a, b) + world.distance(b, c) + 1e-4


def test_unknown_city_raises():
    world = MiddleEarth(20, 20, 5, 5)
    with pytest.raises(KeyError):
        world.distance("Nowhere", world.cities[0])


def test_itinerary_shape():
    world = MiddleEarth(20, 20, 10, 9)
    route = world.itinerary(4)
    assert len(route) == 5
    assert len(set(route)) == 5
    assert set(route) <= set(world.cities)


@pytest.mark.parametrize("length", [10, 11, -1])
def test_itinerary_too_long(length):
    world = MiddleEarth(20, 20, 10, 9)
    with pytest.raises(ValueError, match="itinerary"):
        world.itinerary(length)


def test_describe():
    world = MiddleEarth(20, 20, 6, 2)
    text = world.describe()
    lines = text.splitlines()
    assert lines[0] == "there are 40 locations to choose from; we are using 6"
    assert lines[1] == "they are: "
    assert len(lines) == 8
    assert all(line.startswith("\t") and " @ (" in line for line in lines[2:])


def test_table():
    world = MiddleEarth(20, 20, 5, 2)
    lines = world.table().split("\n")
    assert lines[0] == "Table: "
    assert lines[2] == "Location\txpos\typos\t" + "".join(c + "\t" for c in world.cities)
    rows = lines[3:8]
    assert [row.split("\t")[0] for row in rows] == world.cities
    assert all(len(row.split("\t")) == 3 + 5 + 1 for row in rows)