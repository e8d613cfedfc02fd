"""Message validation against a grammar of numbered rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

MAX_REPEATS = 2


@dataclass(frozen=True)
class Char:
    """Matches a single literal character."""

    char: str


@dataclass(frozen=True)
class Ref:
    """Matches whatever the referenced rule matches."""

    rule_id: int


@dataclass(frozen=True)
class Sequence:
    """Matches each sub-rule in turn."""

    rules: tuple[Rule, ...]


@dataclass(frozen=True)
class Alternatives:
    """Matches the first sub-rule that succeeds."""

    rules: tuple[Rule, ...]


Rule = Union[Char, Ref, Sequence, Alternatives]


def parse_rule(text: str) -> Rule:
    """Parse the body of a rule, the part after ``N: ``."""
    if text.startswith('"'):
        if len(text) < 2:
            raise ValueError(f"invalid character rule {text!r}")
        return Char(text[1])
    if "|" in text:
        return Alternatives(tuple(parse_rule(part) for part in text.split(" | ")))
    if " " in text:
        return Sequence(tuple(parse_rule(part) for part in text.split()))
    try:
        return Ref(int(text))
    except ValueError:
        raise ValueError(f"invalid rule {text!r}") from None


@dataclass
class RulesAndMessages:
    """A rule set together with the messages to check against it."""

    rules: dict[int, Rule]
    messages: list[str]
    orig_rules: dict[int, Rule] = field(default_factory=dict)
    replaced: bool = False

    def __post_init__(self) -> None:
        if not self.orig_rules:
            self.orig_rules = dict(self.rules)

    def replace(self) -> None:
        """Replace rules 8 and 11 with bounded expansions of their looping forms."""
        rule_8 = "| ".join("42 " * repeats for repeats in range(MAX_REPEATS, 0, -1))
        self.rules[8] = parse_rule(rule_8)
        rule_11 = "| ".join(
            "42 " * repeats + "31 " * repeats for repeats in range(MAX_REPEATS, 0, -1)
        )
        self.rules[11] = parse_rule(rule_11)
        self.replaced = True

    def _rule(self, rule_id: int) -> Rule:
        try:
            return self.rules[rule_id]
        except KeyError:
            raise ValueError(f"unknown rule {rule_id}") from None

    def matches(self, message: str, rule: Rule) -> int | None:
        """Return how many leading characters of ``message`` ``rule`` consumes, or None."""
        if not message:
            return None
        if isinstance(rule, Char):
            return 1 if message.startswith(rule.char) else None
        if isinstance(rule, Ref):
            return self.matches(message, self._rule(rule.rule_id))
        if isinstance(rule, Sequence):
            consumed = 0
            for subrule in rule.rules:
                step = self.matches(message[consumed:], subrule)
                if step is None:
                    return None
                consumed += step
            return consumed
        for subrule in rule.rules:
            result = self.matches(message, subrule)
            if result is not None:
                return result
        return None

    def matches_rule_zero(self, message: str) -> bool:
        """Return True if rule 0 consumes the whole message."""
        return self.matches(message, self._rule(0)) == len(message)

    def count_matching(self) -> int:
        """Count the messages that fully match rule 0."""
        return sum(1 for message in self.messages if self.matches_rule_zero(message))


def parse_rules_and_messages(text: str) -> RulesAndMessages:
    """Parse rules, a blank line, then one message per line."""
    lines = iter(text.splitlines())
    rules: dict[int, Rule] = {}
    for line in lines:
        if not line:
            break
        index, sep, body = line.partition(": ")
        if not sep:
            raise ValueError(f"invalid rule line {line!r}")
        rules[int(index)] = parse_rule(body)
    return RulesAndMessages(rules=rules, messages=list(lines))


def part1(text: str) -> str:
    return str(parse_rules_and_messages(text).count_matching())


def part2(text: str) -> str:
    rules_and_messages = parse_rules_and_messages(text)
    rules_and_messages.replace()
    return str(rules_and_messages.count_matching())