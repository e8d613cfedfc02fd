import pytest

from advent.y2020_day17 import cycle, parse_cubes, part1, part2

EXAMPLE = ".#.\n..#\n###\n"


def test_parse_3d():
    cubes = parse_cubes(EXAMPLE, 3)
    assert cubes == {(1, 0, 0), (2, 1, 0), (0, 2, 0), (1, 2, 0), (2, 2, 0)}


def test_parse_4d():
    cubes = parse_cubes(EXAMPLE, 4)
    assert cubes == {
        (1, 0, 0, 0),
        (2, 1, 0, 0),
        (0, 2, 0, 0),
        (1, 2, 0, 0),
        (2, 2, 0, 0),
    }


def test_parse_invalid_character():
    with pytest.raises(ValueError):
        parse_cubes(".#x\n", 3)


def test_parse_too_few_dimensions():
    with pytest.raises(ValueError):
        parse_cubes(EXAMPLE, 1)


def test_cycle_3d():
    cubes = parse_cubes(EXAMPLE, 3)

    cubes = cycle(cubes)
    assert len(cubes) == 11

    cubes = cycle(cubes)
    assert len(cubes) == 21

    cubes = cycle(cubes)
    assert len(cubes) == 38

    for _ in range(3):
        cubes = cycle(cubes)
    assert len(cubes) == 112


def test_cycle_4d():
    cubes = parse_cubes(EXAMPLE, 4)
    for _ in range(6):
        cubes = cycle(cubes)
    assert len(cubes) == 848


def test_cycle_does_not_modify_input():
    cubes = parse_cubes(EXAMPLE, 3)
    before = set(cubes)
    cycle(cubes)
    assert cubes == before


def test_cycle_empty_raises():
    with pytest.raises(ValueError):
        cycle(set())


def test_parts():
    assert part1(EXAMPLE) == "112"
    assert part2(EXAMPLE) == "848"