"""Calorie counting for groups of elves."""

TOP_COUNT = 3


def parse_elf_food(text: str) -> list[int]:
    """Sum each blank-line-separated group of numbers; groups totalling zero are dropped."""
    elf_food = []
    current = 0
    for line in text.split("\n"):
        if not line:
            if current > 0:
                elf_food.append(current)
                current = 0
        else:
            current += int(line)
    if current > 0:
        elf_food.append(current)
    return elf_food


def most_food(elf_food: list[int]) -> int:
    """Return the largest total, or 0 if there are no elves."""
    return max(elf_food, default=0)


def top_three_food(elf_food: list[int]) -> int:
    """Return the sum of the three largest totals."""
    if len(elf_food) < TOP_COUNT:
        raise ValueError(f"at least {TOP_COUNT} elves are required")
    return sum(sorted(elf_food, reverse=True)[:TOP_COUNT])


def part1(text: str) -> str:
    return str(most_food(parse_elf_food(text)))


def part2(text: str) -> str:
    return str(top_three_food(parse_elf_food(text)))