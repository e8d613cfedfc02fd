"""Frequency drift: summing changes and finding the first repeated frequency."""

from itertools import accumulate, cycle


def parse_frequency_changes(text: str) -> list[int]:
    """Parse one signed integer per line."""
    return [int(line) for line in text.splitlines()]


def total_frequency(changes: list[int]) -> int:
    """Return the frequency reached after applying every change once."""
    return sum(changes)


def first_revisited_frequency(changes: list[int]) -> int:
    """Return the first frequency reached twice while cycling through the changes."""
    if not changes:
        raise ValueError("at least one frequency change is required")
    seen = {0}
    for frequency in accumulate(cycle(changes)):
        if frequency in seen:
            return frequency
        seen.add(frequency)
    raise AssertionError("unreachable")


def part1(text: str) -> str:
    return str(total_frequency(parse_frequency_changes(text)))


def part2(text: str) -> str:
    return str(first_revisited_frequency(parse_frequency_changes(text)))