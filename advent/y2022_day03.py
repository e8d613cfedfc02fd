"""Rucksack reorganisation: item priorities of shared items."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce

GROUP_SIZE = 3


def priority(item: str) -> int:
    """Return 1-26 for ``a``-``z`` and 27-52 for ``A``-``Z``."""
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise ValueError(f"invalid item {item!r}")


@dataclass(frozen=True)
class Rucksack:
    """A rucksack whose items are split evenly into two compartments."""

    items: str

    @property
    def compartment_size(self) -> int:
        return len(self.items) // 2

    @property
    def first_compartment(self) -> str:
        return self.items[: self.compartment_size]

    @property
    def second_compartment(self) -> str:
        return self.items[self.compartment_size :]

    def shared_item(self) -> str:
        """Return the first item of the first compartment also in the second."""
        second = set(self.second_compartment)
        for item in self.first_compartment:
            if item in second:
                return item
        raise ValueError("no item is shared between the rucksack compartments")

    def unique_items(self) -> set[str]:
        return set(self.items)


def parse_rucksacks(text: str) -> list[Rucksack]:
    """Parse one rucksack per non-empty line."""
    return [Rucksack(line) for line in text.split("\n") if line]


def shared_compartment_priorities_sum(rucksacks: list[Rucksack]) -> int:
    """Sum the priorities of the item shared by each rucksack's compartments."""
    return sum(priority(rucksack.shared_item()) for rucksack in rucksacks)


def shared_group_priorities_sum(rucksacks: list[Rucksack]) -> int:
    """Sum the priorities of the badge item common to each group of three."""
    if len(rucksacks) % GROUP_SIZE:
        raise ValueError(f"rucksack count must be a multiple of {GROUP_SIZE}")
    total = 0
    for start in range(0, len(rucksacks), GROUP_SIZE):
        group = rucksacks[start : start + GROUP_SIZE]
        common = reduce(set.intersection, (r.unique_items() for r in group))
        if len(common) != 1:
            raise ValueError(f"group has {len(common)} common items, expected 1")
        total += priority(common.pop())
    return total


def part1(text: str) -> str:
    return str(shared_compartment_priorities_sum(parse_rucksacks(text)))


def part2(text: str) -> str:
    return str(shared_group_priorities_sum(parse_rucksacks(text)))