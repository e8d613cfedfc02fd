"""An intcode machine with parameter modes, input, output, jumps and comparisons."""

import operator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Sequence

DIAGNOSTIC_SYSTEM_ID = 1
THERMAL_RADIATOR_SYSTEM_ID = 5


class ParameterMode(IntEnum):
    POSITION = 0
    IMMEDIATE = 1

    @classmethod
    def decode(cls, digit: int) -> "ParameterMode":
        try:
            return cls(digit)
        except ValueError:
            raise ValueError(f"invalid parameter mode {digit}") from None


@dataclass(frozen=True)
class Parameter:
    """An instruction operand together with how it is to be interpreted."""

    mode: ParameterMode
    value: int


class _OpCode(IntEnum):
    ADD = 1
    MULTIPLY = 2
    INPUT = 3
    OUTPUT = 4
    JUMP_IF_TRUE = 5
    JUMP_IF_FALSE = 6
    LESS_THAN = 7
    EQUALS = 8
    HALT = 99


_PARAMETER_COUNTS = {
    _OpCode.ADD: 3,
    _OpCode.MULTIPLY: 3,
    _OpCode.INPUT: 1,
    _OpCode.OUTPUT: 1,
    _OpCode.JUMP_IF_TRUE: 2,
    _OpCode.JUMP_IF_FALSE: 2,
    _OpCode.LESS_THAN: 3,
    _OpCode.EQUALS: 3,
    _OpCode.HALT: 0,
}

_BINARY_OPERATIONS: dict[_OpCode, Callable[[int, int], int]] = {
    _OpCode.ADD: operator.add,
    _OpCode.MULTIPLY: operator.mul,
    _OpCode.LESS_THAN: lambda a, b: int(a < b),
    _OpCode.EQUALS: lambda a, b: int(a == b),
}


@dataclass(frozen=True)
class Instruction:
    """A decoded instruction."""

    opcode: _OpCode
    parameters: tuple[Parameter, ...]

    @property
    def length(self) -> int:
        """Number of memory cells the instruction occupies."""
        return 1 + len(self.parameters)


def decode_instruction(memory: Sequence[int], pointer: int) -> Instruction:
    """Decode the instruction that starts at ``pointer``."""
    word = memory[pointer]
    if word < 0:
        raise ValueError(f"invalid opcode: {word}")
    try:
        opcode = _OpCode(word % 100)
    except ValueError:
        raise ValueError(f"invalid opcode: {word % 100}") from None

    if opcode is _OpCode.INPUT:
        modes = [ParameterMode.POSITION]
    elif opcode is _OpCode.HALT:
        modes = []
    else:
        modes = [ParameterMode.decode((word // 10**place) % 10) for place in (2, 3, 4)]

    count = _PARAMETER_COUNTS[opcode]
    operands = memory[pointer + 1 : pointer + 1 + count]
    if len(operands) < count:
        raise ValueError(f"truncated instruction at {pointer}")
    parameters = tuple(Parameter(mode, value) for mode, value in zip(modes, operands))
    return Instruction(opcode, parameters)


def _address(value: int) -> int:
    if value < 0:
        raise ValueError(f"invalid address {value}")
    return value


@dataclass
class Program:
    """An intcode program and its execution state."""

    memory: list[int]
    initial_memory: list[int] = field(init=False)
    instruction_pointer: int = field(default=0, init=False)
    halted: bool = field(default=False, init=False)
    output: list[int] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.initial_memory = list(self.memory)

    def reset(self) -> None:
        """Restore the initial memory and clear execution state and output."""
        self.memory = list(self.initial_memory)
        self.instruction_pointer = 0
        self.halted = False
        self.output.clear()

    def _read(self, parameter: Parameter) -> int:
        if parameter.mode is ParameterMode.IMMEDIATE:
            return parameter.value
        return self.memory[_address(parameter.value)]

    def _write(self, parameter: Parameter, value: int) -> None:
        self.memory[_address(parameter.value)] = value

    def run(self, input_value: int) -> None:
        """Execute until halt, answering every input instruction with ``input_value``."""
        while not self.halted:
            instruction = decode_instruction(self.memory, self.instruction_pointer)
            self.instruction_pointer += instruction.length
            opcode = instruction.opcode
            params = instruction.parameters

            if opcode is _OpCode.HALT:
                self.halted = True
            elif opcode in _BINARY_OPERATIONS:
                result = _BINARY_OPERATIONS[opcode](
                    self._read(params[0]), self._read(params[1])
                )
                self._write(params[2], result)
            elif opcode is _OpCode.INPUT:
                self._write(params[0], input_value)
            elif opcode is _OpCode.OUTPUT:
                self.output.append(self._read(params[0]))
            else:
                condition = self._read(params[0]) != 0
                if condition == (opcode is _OpCode.JUMP_IF_TRUE):
                    self.instruction_pointer = _address(self._read(params[1]))


def parse_program(text: str) -> Program:
    """Parse a comma-separated list of integers."""
    return Program([int(item) for item in text.rstrip().split(",")])


def part1(text: str) -> str:
    program = parse_program(text)
    program.run(DIAGNOSTIC_SYSTEM_ID)
    if not program.output:
        raise ValueError("program produced no output")
    *checks, diagnostic = program.output
    if any(checks):
        raise ValueError(f"diagnostic tests failed: {checks}")
    return str(diagnostic)


def part2(text: str) -> str:
    program = parse_program(text)
    program.run(THERMAL_RADIATOR_SYSTEM_ID)
    if not program.output:
        raise ValueError("program produced no output")
    return str(program.output[0])