# nfafront/lex/reference.py
"""Reference token set for arithmetic expressions.

    NUM          [0-9]*\\.[0-9]+
    PLUS         \\+
    MINUS        -
    TIMES        \\*
    DIV          /
    LPAREN       \\(
    RPAREN       \\)
    WHITE_SPACE  (' '|\\n|\\r|\\t)*        (ignorable)

Registration order is the order above; it decides ties.
"""

from __future__ import annotations
import regex as re
from typing import List

from ..automaton import Automaton
from . import Lexer

NUM = "NUM"
PLUS = "PLUS"
MINUS = "MINUS"
TIMES = "TIMES"
DIV = "DIV"
LPAREN = "LPAREN"
RPAREN = "RPAREN"
WHITE_SPACE = "WHITE_SPACE"

# the transition alphabet is ASCII only
_ASCII = [chr(cp) for cp in range(128)]


def ascii_class(pattern: str) -> List[str]:
    """ASCII characters matched by a single-character class such as `[0-9]`."""
    rx = re.compile(pattern)
    return [ch for ch in _ASCII if rx.fullmatch(ch)]


DIGITS = ascii_class(r"[0-9]")
BLANKS = ascii_class(r"[ \n\r\t]")


def single_char(ch: str) -> Automaton:
    """0 --ch--> 1(accept)"""
    fa = Automaton()
    fa.add_state(0, is_start=True)
    fa.add_state(1, is_accept=True)
    fa.add_transition(0, ch, 1)
    return fa


def number_automaton() -> Automaton:
    # 0: start, 1: integer part, 2: seen '.', 3: fraction (accept)
    fa = Automaton()
    fa.add_state(0, is_start=True)
    fa.add_state(1)
    fa.add_state(2)
    fa.add_state(3, is_accept=True)
    fa.add_transitions(0, DIGITS, 1)
    fa.add_transitions(1, DIGITS, 1)
    fa.add_transition(0, ".", 2)
    fa.add_transition(1, ".", 2)
    fa.add_transitions(2, DIGITS, 3)
    fa.add_transitions(3, DIGITS, 3)
    return fa


def whitespace_automaton() -> Automaton:
    # a single state that is both start and accept: matches the empty string
    fa = Automaton()
    fa.add_state(0, is_start=True, is_accept=True)
    fa.add_transitions(0, BLANKS, 0)
    return fa


def reference_lexer() -> Lexer:
    """A fresh lexer (with its own automata) for the arithmetic token set."""
    lx = Lexer()
    lx.register_pattern(NUM, number_automaton())
    lx.register_pattern(PLUS, single_char("+"))
    lx.register_pattern(MINUS, single_char("-"))
    lx.register_pattern(TIMES, single_char("*"))
    lx.register_pattern(DIV, single_char("/"))
    lx.register_pattern(LPAREN, single_char("("))
    lx.register_pattern(RPAREN, single_char(")"))
    lx.register_pattern(WHITE_SPACE, whitespace_automaton(), ignorable=True)
    return lx
