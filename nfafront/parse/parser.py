# nfafront/parse/parser.py
"""Recursive-descent parser for arithmetic expressions.

    sum     -> product (("+" | "-") sum)?
    product -> literal (("*" | "/") product)?
    literal -> NUM | "(" sum ")"

Both operator levels are right recursive, so `5.0-3.0-2.0` is
`sub(5, sub(3, 2))`.
The grammar is kept as written.

Every rule takes the remaining input (`Optional[TokenSeq]`, None = end) and
returns `(expr, rest)`; there is no cursor.
"""

from __future__ import annotations
from typing import Optional, Tuple

from ..diagnostics import locate
from ..lex import Token, TokenSeq
from ..lex.reference import NUM, PLUS, MINUS, TIMES, DIV, LPAREN, RPAREN
from .ast import ADD, SUB, MUL, DIV as OP_DIV, Expr, Literal, BinaryOp

_SUM_OPS = {PLUS: ADD, MINUS: SUB}
_PRODUCT_OPS = {TIMES: MUL, DIV: OP_DIV}

_Rest = Optional[TokenSeq]


class ParseError(SyntaxError):
    def __init__(self, message: str, expected: Optional[str], found: Optional[Token]) -> None:
        super().__init__(message)
        self.expected = expected
        self.found = found


def _describe(tok: Optional[Token]) -> str:
    if tok is None:
        return "end of input"
    return f"{tok.kind} {tok.text!r}"


class Parser:
    """Parses a token sequence produced by the reference lexer.

    `text` is optional; when given, errors carry a caret snippet.
    """

    def __init__(self, text: Optional[str] = None) -> None:
        self.text = text

    # ---- Public API ----
    def parse(self, tokens: _Rest) -> Expr:
        try:
            expr, rest = self.parse_sum(tokens)
        except RecursionError:
            head = tokens.head if tokens is not None else None
            raise self._error(
                "expression nests too deeply", None, head, "Parse error"
            ) from None
        if rest is not None:
            raise self._error(
                f"unexpected token {_describe(rest.head)} after end of expression",
                None, rest.head,
            )
        return expr

    def consume(self, rest: _Rest, kind: str) -> Tuple[Token, _Rest]:
        if rest is None or rest.head.kind != kind:
            found = None if rest is None else rest.head
            raise self._error(f"expected {kind}, found {_describe(found)}", kind, found)
        return rest.head, rest.tail

    # ---- Grammar rules ----
    def parse_sum(self, rest: _Rest) -> Tuple[Expr, _Rest]:
        left, rest = self.parse_product(rest)
        if rest is not None and rest.head.kind in _SUM_OPS:
            op = _SUM_OPS[rest.head.kind]
            _, rest = self.consume(rest, rest.head.kind)
            right, rest = self.parse_sum(rest)
            return BinaryOp(op, left, right), rest
        return left, rest

    def parse_product(self, rest: _Rest) -> Tuple[Expr, _Rest]:
        left, rest = self.parse_literal(rest)
        if rest is not None and rest.head.kind in _PRODUCT_OPS:
            op = _PRODUCT_OPS[rest.head.kind]
            _, rest = self.consume(rest, rest.head.kind)
            right, rest = self.parse_product(rest)
            return BinaryOp(op, left, right), rest
        return left, rest

    def parse_literal(self, rest: _Rest) -> Tuple[Expr, _Rest]:
        head = rest.head if rest is not None else None
        if head is not None and head.kind == NUM:
            tok, rest = self.consume(rest, NUM)
            return Literal(float(tok.text)), rest
        if head is not None and head.kind == LPAREN:
            _, rest = self.consume(rest, LPAREN)
            inner, rest = self.parse_sum(rest)
            _, rest = self.consume(rest, RPAREN)
            return inner, rest
        raise self._error(
            f"expected number or '(', found {_describe(head)}", "number or '('", head
        )

    # ---- Errors ----
    def _error(self, detail: str, expected: Optional[str], found: Optional[Token],
               prefix: Optional[str] = None) -> ParseError:
        if prefix is None:
            prefix = "Parse error at end of input" if found is None else \
                f"Parse error at {found.line}:{found.col}"
        msg = f"{prefix}: {detail}"
        if self.text is not None:
            pos = len(self.text) if found is None else found.pos
            msg += "\n" + locate(self.text, pos).snippet
        return ParseError(msg, expected, found)


def parse_tokens(tokens: _Rest, text: Optional[str] = None) -> Expr:
    return Parser(text).parse(tokens)
