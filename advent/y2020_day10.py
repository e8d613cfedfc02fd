"""Joltage adaptor chains: difference counts and arrangement counting."""

from collections import Counter

DEVICE_OFFSET = 3
MAX_STEP = 3


def parse_adaptors(text: str) -> list[int]:
    """Parse one adaptor rating per line."""
    return [int(line) for line in text.splitlines()]


def ordered_joltages(adaptors: list[int]) -> list[int]:
    """Return the outlet, the adaptors and the device, sorted by joltage."""
    joltages = [0, *adaptors]
    joltages.append(max(joltages) + DEVICE_OFFSET)
    return sorted(joltages)


def differences(joltages: list[int]) -> tuple[int, int]:
    """Count the 1-jolt and 3-jolt differences in an ordered list."""
    counts = Counter(b - a for a, b in zip(joltages, joltages[1:]))
    return counts[1], counts[3]


def total_arrangements(adaptors: list[int]) -> int:
    """Count the distinct adaptor chains connecting the outlet to the device."""
    joltages = ordered_joltages(adaptors)
    ways = [0] * len(joltages)
    ways[-1] = 1
    for start in reversed(range(len(joltages) - 1)):
        limit = joltages[start] + MAX_STEP
        ways[start] = sum(
            count
            for joltage, count in zip(joltages[start + 1 :], ways[start + 1 :])
            if joltage <= limit
        )
    return ways[0]


def part1(text: str) -> str:
    ones, threes = differences(ordered_joltages(parse_adaptors(text)))
    return str(ones * threes)


def part2(text: str) -> str:
    return str(total_arrangements(parse_adaptors(text)))