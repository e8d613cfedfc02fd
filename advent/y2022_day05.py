"""Supply stacks: moving crates between stacks with a crane."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INSTRUCTION_PATTERN = re.compile(
    r"move\s+([0-9]+)\s+from\s+([0-9]+)\s+to\s+([0-9]+)\n?"
)

Stack = list[str]


@dataclass(frozen=True)
class Instruction:
    """Move ``count`` crates between zero-based stack indices."""

    from_stack: int
    to_stack: int
    count: int


def parse_crate(text: str) -> tuple[str | None, str]:
    """Parse one crate slot at the start of ``text``.

    Returns the crate letter, or None for an empty slot, and the remaining text.
    """
    if len(text) >= 3 and text[0] == "[" and text[2] == "]":
        rest = text[3:]
        if rest.startswith(" "):
            rest = rest[1:]
        return text[1], rest
    if text.startswith("    "):
        return None, text[4:]
    if text.startswith("   "):
        return None, text[3:]
    raise ValueError(f"invalid crate slot at {text[:4]!r}")


def _parse_level(line: str) -> list[str | None]:
    slots = []
    while line:
        crate, line = parse_crate(line)
        slots.append(crate)
    return slots


def parse_stacks(text: str) -> tuple[list[Stack], str]:
    """Parse the crate drawing; return stacks (bottom first) and the text after it."""
    levels = []
    rest = text
    while not rest.startswith(" 1"):
        line, sep, rest = rest.partition("\n")
        if not sep:
            raise ValueError("stack drawing has no numbering line")
        levels.append(_parse_level(line))
    _, sep, rest = rest.partition("\n")
    if not sep:
        raise ValueError("stack numbering line is not terminated")
    rest = rest.lstrip("\n")

    if not levels:
        raise ValueError("no crates in the stack drawing")
    stacks: list[Stack] = [[] for _ in levels[0]]
    for level in reversed(levels):
        if len(level) > len(stacks):
            raise ValueError("crate level is wider than the top level")
        for stack, crate in zip(stacks, level):
            if crate is not None:
                stack.append(crate)
    return stacks, rest


def _to_index(number: str) -> int:
    value = int(number)
    if value < 1:
        raise ValueError(f"invalid stack number {value}")
    return value - 1


def parse_instructions(text: str) -> list[Instruction]:
    """Parse ``move N from A to B`` lines until the end of the text."""
    instructions = []
    pos = 0
    while pos < len(text):
        match = _INSTRUCTION_PATTERN.match(text, pos)
        if match is None:
            raise ValueError(f"invalid move instruction at {text[pos:pos + 20]!r}")
        count, source, dest = match.groups()
        instructions.append(Instruction(_to_index(source), _to_index(dest), int(count)))
        pos = match.end()
    return instructions


def _take(stacks: list[Stack], instruction: Instruction) -> list[str]:
    source = stacks[instruction.from_stack]
    if instruction.count > len(source):
        raise ValueError(
            f"cannot move {instruction.count} crates from a stack of {len(source)}"
        )
    if instruction.count == 0:
        return []
    moved = source[-instruction.count :]
    del source[-instruction.count :]
    return moved


def rearrange_individually(stacks: list[Stack], instructions: list[Instruction]) -> None:
    """Apply the moves one crate at a time, reversing each moved group."""
    for instruction in instructions:
        moved = _take(stacks, instruction)
        stacks[instruction.to_stack].extend(reversed(moved))


def rearrange_in_groups(stacks: list[Stack], instructions: list[Instruction]) -> None:
    """Apply the moves a whole group at a time, keeping each group's order."""
    for instruction in instructions:
        moved = _take(stacks, instruction)
        stacks[instruction.to_stack].extend(moved)


def top_of_stacks(stacks: list[Stack]) -> str:
    """Return the letters of the top crate of every stack."""
    if any(not stack for stack in stacks):
        raise ValueError("a stack is empty")
    return "".join(stack[-1] for stack in stacks)


def part1(text: str) -> str:
    stacks, rest = parse_stacks(text)
    rearrange_individually(stacks, parse_instructions(rest))
    return top_of_stacks(stacks)


def part2(text: str) -> str:
    stacks, rest = parse_stacks(text)
    rearrange_in_groups(stacks, parse_instructions(rest))
    return top_of_stacks(stacks)