# nfafront/parse/ast.py
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Union

# ---- Expression tree ----
# Nodes are immutable and own their children. Every node is evaluable
# (evaluate() -> float) and printable (str() -> parenthesized infix).

ADD = "add"
SUB = "sub"
MUL = "mul"
DIV = "div"

_SYMBOLS = {ADD: "+", SUB: "-", MUL: "*", DIV: "/"}


def _ieee_div(a: float, b: float) -> float:
    """Float division that follows IEEE-754 on a zero divisor."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


@dataclass(frozen=True)
class Literal:
    """A NUM lexeme read with `float()`, i.e. double precision."""
    value: float

    def evaluate(self) -> float:
        return self.value

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class BinaryOp:
    op: str  # 'add', 'sub', 'mul', 'div'
    left: "Expr"
    right: "Expr"

    def __post_init__(self) -> None:
        if self.op not in _SYMBOLS:
            raise ValueError(f"unknown operator {self.op!r}")

    def evaluate(self) -> float:
        a = self.left.evaluate()
        b = self.right.evaluate()
        if self.op == ADD:
            return a + b
        if self.op == SUB:
            return a - b
        if self.op == MUL:
            return a * b
        return _ieee_div(a, b)

    def __str__(self) -> str:
        return f"({self.left} {_SYMBOLS[self.op]} {self.right})"


Expr = Union[Literal, BinaryOp]


# Constructor shorthands, mostly for building expected trees.
def add(left: Expr, right: Expr) -> BinaryOp:
    return BinaryOp(ADD, left, right)

def sub(left: Expr, right: Expr) -> BinaryOp:
    return BinaryOp(SUB, left, right)

def mul(left: Expr, right: Expr) -> BinaryOp:
    return BinaryOp(MUL, left, right)

def div(left: Expr, right: Expr) -> BinaryOp:
    return BinaryOp(DIV, left, right)
