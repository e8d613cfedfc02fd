import pytest

from advent.y2018_day02 import (
    closest_box_ids,
    closest_box_ids_shared_chars,
    multiply_twos_and_threes,
    n_of_any_letter,
    part1,
    part2,
)

CHECKSUM_IDS = ["abcdef", "bababc", "abbcde", "abcccd", "aabcdd", "abcdee", "ababab"]
CLOSE_IDS = ["abcde", "fghij", "klmno", "pqrst", "fguij", "axcye", "wvxyz"]


@pytest.mark.parametrize(
    "box_id, n, expected",
    [
        ("abcdef", 2, False),
        ("abcdef", 3, False),
        ("bababc", 2, True),
        ("bababc", 3, True),
        ("abbcde", 2, True),
        ("abbcde", 3, False),
        ("abcccd", 2, False),
        ("abcccd", 3, True),
        ("aabcdd", 2, True),
        ("aabcdd", 3, False),
        ("abcdee", 2, True),
        ("abcdee", 3, False),
        ("ababab", 2, False),
        ("ababab", 3, True),
    ],
)
def test_n_of_any_letter(box_id, n, expected):
    assert n_of_any_letter(box_id, n) is expected


def test_multiply_twos_and_threes():
    assert multiply_twos_and_threes(CHECKSUM_IDS) == 12


def test_closest_box_ids():
    assert closest_box_ids(CLOSE_IDS) == ("fghij", "fguij")


def test_closest_box_ids_shared_chars():
    assert closest_box_ids_shared_chars(CLOSE_IDS) == "fgij"


def test_closest_box_ids_not_found():
    with pytest.raises(ValueError):
        closest_box_ids(["abc", "xyz"])


def test_parts():
    assert part1("\n".join(CHECKSUM_IDS) + "\n") == "12"
    assert part2("\n".join(CLOSE_IDS) + "\n") == "fgij"