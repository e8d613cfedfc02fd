import pytest

from advent.y2022_day04 import (
    Pair,
    SectionRange,
    fully_contains_count,
    overlaps_count,
    parse_pair,
    parse_pairs,
    part1,
    part2,
)

EXAMPLE = "2-4,6-8\n2-3,4-5\n5-7,7-9\n2-8,3-7\n6-6,4-6\n2-6,4-8\n"


def test_parse():
    pairs = parse_pairs("2-4,6-8\n2-3,4-5\n")
    assert len(pairs) == 2
    assert pairs[0] == Pair(SectionRange(2, 4), SectionRange(6, 8))
    assert pairs[1] == Pair(SectionRange(2, 3), SectionRange(4, 5))


def test_parse_invalid():
    with pytest.raises(ValueError):
        parse_pair("2-4;6-8")


def test_contains_count():
    assert fully_contains_count(parse_pairs(EXAMPLE)) == 2
    assert part1(EXAMPLE) == "2"


def test_overlaps_count():
    assert overlaps_count(parse_pairs(EXAMPLE)) == 4
    assert part2(EXAMPLE) == "4"


def test_pair_predicates():
    assert parse_pair("6-6,4-6").fully_contains() is True
    assert parse_pair("5-7,7-9").fully_contains() is False
    assert parse_pair("5-7,7-9").overlaps() is True
    assert parse_pair("2-3,4-5").overlaps() is False