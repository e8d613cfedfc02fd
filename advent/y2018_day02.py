"""Box identifier checksums and near-duplicate detection."""

from collections import Counter


def n_of_any_letter(box_id: str, n: int) -> bool:
    """Return True if some letter appears exactly ``n`` times in ``box_id``."""
    return n in Counter(box_id).values()


def multiply_twos_and_threes(box_ids: list[str]) -> int:
    """Return the checksum: ids with a doubled letter times ids with a tripled letter."""
    twos = sum(1 for box_id in box_ids if n_of_any_letter(box_id, 2))
    threes = sum(1 for box_id in box_ids if n_of_any_letter(box_id, 3))
    return twos * threes


def closest_box_ids(box_ids: list[str]) -> tuple[str, str]:
    """Return the first pair of ids that differ in exactly one position."""
    for id1 in box_ids:
        for id2 in box_ids:
            if id1 == id2:
                continue
            if sum(c1 != c2 for c1, c2 in zip(id1, id2)) == 1:
                return id1, id2
    raise ValueError("failed to find closest box IDs")


def closest_box_ids_shared_chars(box_ids: list[str]) -> str:
    """Return the characters the two closest ids have in common."""
    id1, id2 = closest_box_ids(box_ids)
    return "".join(c1 for c1, c2 in zip(id1, id2) if c1 == c2)


def part1(text: str) -> str:
    return str(multiply_twos_and_threes(text.splitlines()))


def part2(text: str) -> str:
    return closest_box_ids_shared_chars(text.splitlines())