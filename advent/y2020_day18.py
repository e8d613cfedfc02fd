"""Arithmetic with unusual operator precedence."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Op(Enum):
    ADD = "+"
    MULT = "*"


class Precedence(Enum):
    LEFT_RIGHT = "left-right"
    ADD_MULT = "add-mult"


@dataclass(frozen=True)
class Literal:
    value: int

    def evaluate(self) -> int:
        return self.value


@dataclass(frozen=True)
class BinOp:
    op: Op
    left: Expr
    right: Expr

    def evaluate(self) -> int:
        left = self.left.evaluate()
        right = self.right.evaluate()
        return left + right if self.op is Op.ADD else left * right


Expr = Union[Literal, BinOp]


def _fold_left(operands: list[Expr], op: Op) -> Expr:
    expr = operands[0]
    for operand in operands[1:]:
        expr = BinOp(op, expr, operand)
    return expr


def _combine(operands: list[Expr], ops: list[Op], precedence: Precedence) -> Expr:
    if precedence is Precedence.LEFT_RIGHT:
        expr = operands[0]
        for op, operand in zip(ops, operands[1:]):
            expr = BinOp(op, expr, operand)
        return expr

    # Additions bind tighter: sum each run between multiplications, then multiply.
    runs: list[list[Expr]] = [[operands[0]]]
    for op, operand in zip(ops, operands[1:]):
        if op is Op.ADD:
            runs[-1].append(operand)
        else:
            runs.append([operand])
    return _fold_left([_fold_left(run, Op.ADD) for run in runs], Op.MULT)


def _parse(text: str, start: int, precedence: Precedence) -> tuple[Expr, int]:
    """Parse from ``start`` until a closing parenthesis or the end of text."""
    operands: list[Expr] = []
    ops: list[Op] = []
    pos = start
    while pos < len(text):
        ch = text[pos]
        pos += 1
        if ch.isdigit() and ch.isascii():
            operands.append(Literal(int(ch)))
        elif ch == "(":
            sub_expr, pos = _parse(text, pos, precedence)
            operands.append(sub_expr)
        elif ch == ")":
            break
        elif ch == "+":
            ops.append(Op.ADD)
        elif ch == "*":
            ops.append(Op.MULT)
        elif ch != " ":
            raise ValueError(f"invalid character {ch!r} in input")

    if not operands or len(operands) != len(ops) + 1:
        raise ValueError("invalid expression")
    return _combine(operands, ops, precedence), pos


def parse_expression(text: str, precedence: Precedence) -> Expr:
    """Parse one expression of single-digit numbers, ``+``, ``*`` and parentheses."""
    expr, _ = _parse(text, 0, precedence)
    return expr


def parse_expressions(text: str, precedence: Precedence) -> list[Expr]:
    """Parse one expression per line."""
    return [parse_expression(line, precedence) for line in text.splitlines()]


def _total(text: str, precedence: Precedence) -> int:
    return sum(expr.evaluate() for expr in parse_expressions(text, precedence))


def part1(text: str) -> str:
    return str(_total(text, Precedence.LEFT_RIGHT))


def part2(text: str) -> str:
    return str(_total(text, Precedence.ADD_MULT))