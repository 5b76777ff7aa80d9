# nfafront/parse/__init__.py
"""Expression parser for nfafront.

This package provides:
- Expression tree nodes (Literal, BinaryOp) that evaluate and print
- A right-recursive descent parser over a lexer's TokenSeq
"""

from .ast import Literal, BinaryOp, Expr, add, sub, mul, div
from .parser import Parser, ParseError, parse_tokens
