"""Command-line entry point that runs both parts of a puzzle day."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable

from advent import (
    y2018_day01,
    y2018_day02,
    y2018_day03,
    y2019_day02,
    y2019_day05,
    y2019_day06,
    y2020_day10,
    y2020_day15,
    y2020_day17,
    y2020_day18,
    y2020_day19,
    y2020_day24,
    y2020_day25,
    y2021_day22,
    y2022_day01,
    y2022_day02,
    y2022_day03,
    y2022_day04,
    y2022_day05,
    y2022_day06,
)
from advent.inputs import InputError, fetch_day_input, input_path

MAX_DAY = 255


@dataclass(frozen=True)
class DayFunctions:
    """The two solvers of a puzzle day; each takes the input text."""

    part1: Callable[[str], str]
    part2: Callable[[str], str]


_DAYS = {
    (2018, 1): y2018_day01,
    (2018, 2): y2018_day02,
    (2018, 3): y2018_day03,
    (2019, 2): y2019_day02,
    (2019, 5): y2019_day05,
    (2019, 6): y2019_day06,
    (2020, 10): y2020_day10,
    (2020, 15): y2020_day15,
    (2020, 17): y2020_day17,
    (2020, 18): y2020_day18,
    (2020, 19): y2020_day19,
    (2020, 24): y2020_day24,
    (2020, 25): y2020_day25,
    (2021, 22): y2021_day22,
    (2022, 1): y2022_day01,
    (2022, 2): y2022_day02,
    (2022, 3): y2022_day03,
    (2022, 4): y2022_day04,
    (2022, 5): y2022_day05,
    (2022, 6): y2022_day06,
}


def get_day_functions(year: int, day: int) -> DayFunctions:
    """Return the solvers for a year and day; raise LookupError if there are none."""
    try:
        module = _DAYS[(year, day)]
    except KeyError:
        raise LookupError(f"Code for day {day} of {year} not found") from None
    return DayFunctions(module.part1, module.part2)


def _parse_number(text: str, what: str, upper: int | None = None) -> int:
    try:
        value = int(text)
    except ValueError:
        raise ValueError(f"Failed to parse input {what}: {text!r}") from None
    if value < 0 or (upper is not None and value > upper):
        raise ValueError(f"Failed to parse input {what}: {text!r}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Run ``advent YEAR DAY``: fetch the input if needed and print both answers."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Please specify a year and a day", file=sys.stderr)
        return 1
    try:
        year = _parse_number(args[0], "year")
        day = _parse_number(args[1], "day", MAX_DAY)
        functions = get_day_functions(year, day)
        path = fetch_day_input(year, day)
        text = path.read_text(encoding="utf-8")
    except (ValueError, LookupError, InputError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Day {day}")
    print(f"Part 1: {functions.part1(text)}")
    print(f"Part 2: {functions.part2(text)}")
    return 0


__all__ = ["DayFunctions", "get_day_functions", "input_path", "main"]