"""A minimal intcode machine with add, multiply and halt."""

from dataclasses import dataclass, field
from enum import IntEnum

TARGET_OUTPUT = 19690720


class OpCode(IntEnum):
    ADD = 1
    MULTIPLY = 2
    HALT = 99


def _decode(value: int) -> OpCode:
    try:
        return OpCode(value)
    except ValueError:
        raise ValueError(f"invalid opcode {value}") from None


@dataclass
class Program:
    """An intcode program and its execution state."""

    memory: list[int]
    initial_memory: list[int] = field(init=False)
    instruction_pointer: int = field(default=0, init=False)
    halted: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.initial_memory = list(self.memory)

    def reset(self) -> None:
        """Restore the initial memory and execution state."""
        self.memory = list(self.initial_memory)
        self.instruction_pointer = 0
        self.halted = False

    def run(self) -> None:
        """Execute until a halt instruction is reached."""
        while not self.halted:
            ip = self.instruction_pointer
            opcode = _decode(self.memory[ip])
            if opcode is OpCode.HALT:
                self.halted = True
                continue
            a_addr, b_addr, dest = self.memory[ip + 1 : ip + 4]
            a, b = self.memory[a_addr], self.memory[b_addr]
            self.memory[dest] = a + b if opcode is OpCode.ADD else a * b
            self.instruction_pointer += 4


def parse_program(text: str) -> Program:
    """Parse a comma-separated list of non-negative integers."""
    values = [int(item) for item in text.rstrip().split(",")]
    if any(value < 0 for value in values):
        raise ValueError("program values must be non-negative")
    return Program(values)


def part1(text: str) -> str:
    program = parse_program(text)
    program.memory[1] = 12
    program.memory[2] = 2
    program.run()
    return str(program.memory[0])


def part2(text: str) -> str:
    program = parse_program(text)
    for noun in range(100):
        for verb in range(100):
            program.reset()
            program.memory[1] = noun
            program.memory[2] = verb
            program.run()
            if program.memory[0] == TARGET_OUTPUT:
                return str(100 * noun + verb)
    raise ValueError("no solution found")