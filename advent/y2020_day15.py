"""The elves' memory game."""

PART1_TURN = 2020
PART2_TURN = 30_000_000


def parse_starting_numbers(text: str) -> list[int]:
    """Parse the comma-separated numbers on the first line."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("no starting numbers given")
    return [int(item) for item in lines[0].split(",")]


def nth_number(starting_numbers: list[int], n: int) -> int:
    """Return the number spoken at zero-based turn ``n``."""
    if not starting_numbers:
        raise ValueError("at least one starting number is required")
    if n < len(starting_numbers):
        return starting_numbers[n]

    last_spoken = {number: turn for turn, number in enumerate(starting_numbers[:-1])}
    current = starting_numbers[-1]
    for turn in range(len(starting_numbers) - 1, n):
        previous = last_spoken.get(current)
        last_spoken[current] = turn
        current = 0 if previous is None else turn - previous
    return current


def part1(text: str) -> str:
    return str(nth_number(parse_starting_numbers(text), PART1_TURN - 1))


def part2(text: str) -> str:
    return str(nth_number(parse_starting_numbers(text), PART2_TURN - 1))