import pytest

from advent.y2022_day03 import (
    Rucksack,
    parse_rucksacks,
    part1,
    part2,
    priority,
    shared_compartment_priorities_sum,
    shared_group_priorities_sum,
)

EXAMPLE = (
    "vJrwpWtwJgWrhcsFMMfFFhFp\n"
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL\n"
    "PmmdzqPrVvPwwTWBwg\n"
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn\n"
    "ttgJtRGJQctTZtZT\n"
    "CrZsJsPPZsGzwwsLwLmpwMDw\n"
)


def test_parse_rucksacks():
    rucksacks = parse_rucksacks("vJrwpW\njqHR\n")
    assert rucksacks[0].compartment_size == 3
    assert rucksacks[0].first_compartment == "vJr"
    assert rucksacks[0].second_compartment == "wpW"
    assert rucksacks[1].compartment_size == 2
    assert rucksacks[1].first_compartment == "jq"
    assert rucksacks[1].second_compartment == "HR"


def test_item_priority():
    assert priority("p") == 16
    assert priority("L") == 38
    assert priority("a") == 1
    assert priority("Z") == 52


def test_invalid_priority():
    with pytest.raises(ValueError):
        priority("1")


def test_shared_item():
    assert Rucksack("vJrwpWtwJgWrhcsFMMfFFhFp").shared_item() == "p"


def test_no_shared_item():
    with pytest.raises(ValueError):
        Rucksack("abcd").shared_item()


def test_shared_compartment_priorities_sum():
    assert shared_compartment_priorities_sum(parse_rucksacks(EXAMPLE)) == 157
    assert part1(EXAMPLE) == "157"


def test_shared_group_priorities_sum():
    assert shared_group_priorities_sum(parse_rucksacks(EXAMPLE)) == 70
    assert part2(EXAMPLE) == "70"


def test_incomplete_group():
    with pytest.raises(ValueError):
        shared_group_priorities_sum(parse_rucksacks("abab\ncdcd\n"))