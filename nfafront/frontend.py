# nfafront/frontend.py
"""Lexer + parser pipeline for arithmetic text.

    >>> str(Frontend().parse("3.0+2.0*4.0"))
    '(3.0 + (2.0 * 4.0))'

With `debug=True` each stage reports to stderr.
"""

from __future__ import annotations
import sys
from typing import Optional

from .lex import Lexer, TokenSeq, token_list
from .lex.reference import reference_lexer
from .parse import Expr, Parser


def _eprint(*args, **kw) -> None:
    print(*args, file=sys.stderr, **kw)


class Frontend:
    def __init__(self, debug: bool = False, lexer: Optional[Lexer] = None) -> None:
        self.debug = debug
        self.lex = lexer if lexer is not None else reference_lexer()
        if debug: _eprint(f"[DEBUG] lexer ready | patterns={', '.join(self.lex.kinds)}")

    def tokenize(self, text: str) -> Optional[TokenSeq]:
        tokens = self.lex.tokenize(text)
        if self.debug:
            toks = token_list(tokens)
            _eprint(f"[DEBUG] lexed | chars={len(text)} tokens={len(toks)}")
            for tok in toks:
                _eprint(f"[DEBUG]   {tok.kind:<8} {tok.text!r} @{tok.line}:{tok.col}")
        return tokens

    def parse(self, text: str) -> Expr:
        tokens = self.tokenize(text)
        expr = Parser(text).parse(tokens)
        if self.debug: _eprint(f"[DEBUG] parsed | {expr}")
        return expr

    def evaluate(self, text: str) -> float:
        value = self.parse(text).evaluate()
        if self.debug: _eprint(f"[DEBUG] evaluated | {value!r}")
        return value
