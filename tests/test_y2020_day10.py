import pytest

from advent.y2020_day10 import (
    differences,
    ordered_joltages,
    parse_adaptors,
    part1,
    part2,
    total_arrangements,
)

SMALL = "16\n10\n15\n5\n1\n11\n7\n19\n6\n12\n4\n"
LARGE = (
    "28\n33\n18\n42\n31\n14\n46\n20\n48\n47\n24\n23\n49\n45\n19\n38\n39\n11\n1\n"
    "32\n25\n35\n8\n17\n7\n9\n4\n2\n34\n10\n3\n"
)


def test_parse():
    assert parse_adaptors(SMALL) == [16, 10, 15, 5, 1, 11, 7, 19, 6, 12, 4]


def test_ordered_joltages_adds_outlet_and_device():
    joltages = ordered_joltages([3, 1, 2])
    assert joltages == [0, 1, 2, 3, 6]


@pytest.mark.parametrize("text, expected", [(SMALL, (7, 5)), (LARGE, (22, 10))])
def test_ordered_differences(text, expected):
    assert differences(ordered_joltages(parse_adaptors(text))) == expected


@pytest.mark.parametrize("text, expected", [(SMALL, 8), (LARGE, 19208)])
def test_arrangements(text, expected):
    assert total_arrangements(parse_adaptors(text)) == expected


def test_part1():
    assert part1(SMALL) == "35"


def test_part2():
    assert part2(LARGE) == "19208"