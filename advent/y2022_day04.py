"""Camp cleanup: overlapping section assignments."""

from __future__ import annotations

import re
from dataclasses import dataclass

_PAIR_PATTERN = re.compile(r"([0-9]+)-([0-9]+),([0-9]+)-([0-9]+)")


@dataclass(frozen=True)
class SectionRange:
    """An inclusive range of section ids."""

    start: int
    end: int


@dataclass(frozen=True)
class Pair:
    one: SectionRange
    two: SectionRange

    def fully_contains(self) -> bool:
        """Return True if either range contains the other."""
        one, two = self.one, self.two
        return (one.start <= two.start and one.end >= two.end) or (
            two.start <= one.start and two.end >= one.end
        )

    def overlaps(self) -> bool:
        """Return True if the ranges share at least one section."""
        return self.one.start <= self.two.end and self.one.end >= self.two.start


def parse_pair(line: str) -> Pair:
    """Parse a line such as ``2-4,6-8``."""
    match = _PAIR_PATTERN.match(line)
    if match is None:
        raise ValueError(f"failed to parse pair {line!r}")
    a, b, c, d = (int(group) for group in match.groups())
    return Pair(SectionRange(a, b), SectionRange(c, d))


def parse_pairs(text: str) -> list[Pair]:
    """Parse one pair per non-empty line."""
    return [parse_pair(line) for line in text.split("\n") if line]


def fully_contains_count(pairs: list[Pair]) -> int:
    return sum(1 for pair in pairs if pair.fully_contains())


def overlaps_count(pairs: list[Pair]) -> int:
    return sum(1 for pair in pairs if pair.overlaps())


def part1(text: str) -> str:
    return str(fully_contains_count(parse_pairs(text)))


def part2(text: str) -> str:
    return str(overlaps_count(parse_pairs(text)))