"""Rock, paper, scissors strategy scoring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Choice(Enum):
    """A hand shape; the value is the score for playing it."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3


class Outcome(Enum):
    """A round's result; the value is the score it earns."""

    LOSS = 0
    DRAW = 3
    WIN = 6


# Steps forward around rock -> paper -> scissors from the opponent's shape.
_OUTCOME_BY_STEP = {0: Outcome.DRAW, 1: Outcome.WIN, 2: Outcome.LOSS}
_STEP_BY_OUTCOME = {outcome: step for step, outcome in _OUTCOME_BY_STEP.items()}

_OPPONENT_CODES = {"A": Choice.ROCK, "B": Choice.PAPER, "C": Choice.SCISSORS}
_CHOICE_CODES = {"X": Choice.ROCK, "Y": Choice.PAPER, "Z": Choice.SCISSORS}
_OUTCOME_CODES = {"X": Outcome.LOSS, "Y": Outcome.DRAW, "Z": Outcome.WIN}


@dataclass(frozen=True)
class Round:
    opponent_choice: Choice
    my_choice: Choice
    outcome: Outcome

    def score(self) -> int:
        """Return the shape score plus the outcome score."""
        return self.my_choice.value + self.outcome.value


def round_with_choice(opponent: Choice, mine: Choice) -> Round:
    """Build a round from both shapes, deciding the outcome."""
    step = (mine.value - opponent.value) % 3
    return Round(opponent, mine, _OUTCOME_BY_STEP[step])


def round_with_outcome(opponent: Choice, outcome: Outcome) -> Round:
    """Build a round from the opponent's shape and the desired outcome."""
    mine = Choice((opponent.value - 1 + _STEP_BY_OUTCOME[outcome]) % 3 + 1)
    return Round(opponent, mine, outcome)


def _lookup(codes: dict, code: str):
    try:
        return codes[code]
    except KeyError:
        raise ValueError(f"invalid code {code!r}") from None


def _parse_lines(text: str):
    for line in text.split("\n"):
        if not line:
            continue
        parts = line.split(" ")
        if len(parts) != 2:
            raise ValueError(f"invalid strategy line {line!r}")
        yield _lookup(_OPPONENT_CODES, parts[0]), parts[1]


def parse_strategy_choice(text: str) -> list[Round]:
    """Parse lines where the second column is my shape."""
    return [
        round_with_choice(opponent, _lookup(_CHOICE_CODES, code))
        for opponent, code in _parse_lines(text)
    ]


def parse_strategy_outcome(text: str) -> list[Round]:
    """Parse lines where the second column is the desired outcome."""
    return [
        round_with_outcome(opponent, _lookup(_OUTCOME_CODES, code))
        for opponent, code in _parse_lines(text)
    ]


def strategy_score(strategy: list[Round]) -> int:
    """Return the total score over all rounds."""
    return sum(round_.score() for round_ in strategy)


def part1(text: str) -> str:
    return str(strategy_score(parse_strategy_choice(text)))


def part2(text: str) -> str:
    return str(strategy_score(parse_strategy_outcome(text)))