import pytest

from advent.y2018_day01 import (
    first_revisited_frequency,
    parse_frequency_changes,
    part1,
    part2,
    total_frequency,
)


@pytest.mark.parametrize(
    "changes, expected",
    [
        ([1, -2, 3, 1], 3),
        ([1, 1, 1], 3),
        ([1, 1, -2], 0),
        ([-1, -2, -3], -6),
    ],
)
def test_total_frequency(changes, expected):
    assert total_frequency(changes) == expected


@pytest.mark.parametrize(
    "changes, expected",
    [
        ([1, -2, 3, 1], 2),
        ([1, -1], 0),
        ([3, 3, 4, -2, -4], 10),
        ([-6, 3, 8, 5, -6], 5),
        ([7, 7, -2, -7, -4], 14),
    ],
)
def test_first_revisited_frequency(changes, expected):
    assert first_revisited_frequency(changes) == expected


def test_first_revisited_frequency_empty():
    with pytest.raises(ValueError):
        first_revisited_frequency([])


def test_parse_frequency_changes():
    assert parse_frequency_changes("+1\n-2\n+3\n+1\n") == [1, -2, 3, 1]


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_frequency_changes("+1\nabc\n")


def test_parts():
    text = "+1\n-2\n+3\n+1\n"
    assert part1(text) == "3"
    assert part2(text) == "2"