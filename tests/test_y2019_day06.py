import pytest

from advent.y2019_day06 import (
    parse_orbits,
    part1,
    part2,
    total_orbits,
    transfers_required,
)

MAP = "COM)B\nB)C\nC)D\nD)E\nE)F\nB)G\nG)H\nD)I\nE)J\nJ)K\nK)L\n"
MAP_WITH_TRAVELLERS = MAP + "K)YOU\nI)SAN\n"


def test_parse():
    assert parse_orbits(MAP) == {
        "B": "COM",
        "C": "B",
        "D": "C",
        "E": "D",
        "F": "E",
        "G": "B",
        "H": "G",
        "I": "D",
        "J": "E",
        "K": "J",
        "L": "K",
    }


def test_total_orbits():
    assert total_orbits(parse_orbits(MAP)) == 42


def test_transfers_required():
    assert transfers_required(parse_orbits(MAP_WITH_TRAVELLERS)) == 4


def test_transfers_without_you():
    with pytest.raises(ValueError):
        transfers_required(parse_orbits(MAP))


def test_parse_invalid_line():
    with pytest.raises(ValueError):
        parse_orbits("COM-B\n")


def test_parts():
    assert part1(MAP) == "42"
    assert part2(MAP_WITH_TRAVELLERS) == "4"