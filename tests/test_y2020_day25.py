import pytest

from advent.y2020_day25 import (
    find_encryption_key,
    find_loop_size,
    parse_public_keys,
    part1,
    part2,
    transform,
)

EXAMPLE = "5764801\n17807724\n"


def test_parse_public_keys():
    assert parse_public_keys(EXAMPLE) == (5764801, 17807724)


def test_parse_public_keys_missing():
    with pytest.raises(ValueError):
        parse_public_keys("5764801\n")


def test_transform():
    assert transform(7, 8) == 5764801
    assert transform(7, 11) == 17807724
    assert transform(17807724, 8) == 14897079
    assert transform(5764801, 11) == 14897079


def test_find_loop_size():
    assert find_loop_size(5764801) == 8
    assert find_loop_size(17807724) == 11


def test_find_loop_size_out_of_range():
    with pytest.raises(ValueError):
        find_loop_size(0)


def test_find_encryption_key():
    assert find_encryption_key(*parse_public_keys(EXAMPLE)) == 14897079
    assert part1(EXAMPLE) == "14897079"


def test_part2_is_empty():
    assert part2(EXAMPLE) == ""