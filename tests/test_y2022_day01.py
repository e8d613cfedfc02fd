import pytest

from advent.y2022_day01 import most_food, parse_elf_food, part1, part2, top_three_food

EXAMPLE = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000"
TOTALS = [1000 + 2000 + 3000, 4000, 5000 + 6000, 7000 + 8000 + 9000, 10000]


def test_parse():
    assert parse_elf_food(EXAMPLE) == TOTALS
    assert parse_elf_food("1\n2\n3\n\n\n4\n5\n") == [1 + 2 + 3, 4 + 5]
    assert parse_elf_food("") == []


def test_most_food():
    assert most_food(TOTALS) == 24000
    assert most_food([]) == 0


def test_top_three():
    assert top_three_food(list(TOTALS)) == 45000


def test_top_three_leaves_input_unchanged():
    totals = list(TOTALS)
    top_three_food(totals)
    assert totals == TOTALS


def test_top_three_requires_three():
    with pytest.raises(ValueError):
        top_three_food([1, 2])


def test_parts():
    assert part1(EXAMPLE) == "24000"
    assert part2(EXAMPLE) == "45000"