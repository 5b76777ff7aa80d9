# nfafront/lex/__init__.py
"""Maximal-munch lexer driven by a list of NFAs.

Features
--------
- Patterns are `(kind, Automaton, ignorable)` entries; registration order is
  the priority order.
- At every position all automata run in lockstep; the **longest** accepted
  prefix wins, ties go to the **earliest registered** pattern.
- Ignorable kinds (whitespace) are matched and dropped.
- The result is a persistent `TokenSeq` (None = empty), no EOF token.

Matching at position p:
  1) reset every automaton (length-0 acceptance is a candidate too)
  2) feed characters while at least one automaton can continue
  3) pick (max length, min index)
  4) nothing accepted, or only the empty prefix → LexError at p

API
---
- `Token(kind, text, pos, line, col)`
- `TokenSeq(head, tail)` / `TokenSeq.from_tokens(list)`
- `Lexer.register_pattern(kind, automaton, ignorable=False)`
- `Lexer.tokenize(text) -> Optional[TokenSeq]`
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from ..automaton import Automaton
from ..diagnostics import locate

# --------- Public datatypes ---------

@dataclass(frozen=True)
class Token:
    kind: str   # pattern kind as registered
    text: str   # lexeme
    pos: int    # 0-based offset
    line: int   # 1-based
    col: int    # 1-based


@dataclass(frozen=True, eq=False, repr=False)
class TokenSeq:
    """Immutable cons cell. The empty sequence is `None`.

    Equality is identity; compare `token_list(...)` results instead.
    """
    head: Token
    tail: Optional["TokenSeq"] = None

    @classmethod
    def from_tokens(cls, tokens: Sequence[Token]) -> Optional["TokenSeq"]:
        seq: Optional[TokenSeq] = None
        for tok in reversed(tokens):
            seq = cls(tok, seq)
        return seq

    def __iter__(self) -> Iterator[Token]:
        cell: Optional[TokenSeq] = self
        while cell is not None:
            yield cell.head
            cell = cell.tail

    def __len__(self) -> int:
        n = 0
        for _ in self:
            n += 1
        return n

    def __repr__(self) -> str:
        return f"TokenSeq({list(self)!r})"


def token_list(seq: Optional[TokenSeq]) -> List[Token]:
    """Flatten a sequence, `None` included, into a Python list."""
    return [] if seq is None else list(seq)


class LexError(SyntaxError):
    def __init__(self, message: str, pos: int, char: str, line: int, col: int) -> None:
        super().__init__(message)
        self.pos = pos
        self.char = char
        self.line = line
        self.col = col

# --------- Core implementation ---------

@dataclass
class _Pattern:
    kind: str
    automaton: Automaton
    ignorable: bool


class Lexer:
    def __init__(self) -> None:
        self._patterns: List[_Pattern] = []

    def register_pattern(self, kind: str, automaton: Automaton, ignorable: bool = False) -> None:
        self._patterns.append(_Pattern(kind, automaton, ignorable))

    @property
    def kinds(self) -> List[str]:
        return [p.kind for p in self._patterns]

    def tokenize(self, text: str) -> Optional[TokenSeq]:
        toks: List[Token] = []
        pos = 0
        line = col = 1
        while pos < len(text):
            idx, length = self._longest_match(text, pos)
            if idx is None or length == 0:
                # the empty prefix never advances the scan
                loc = locate(text, pos)
                ch = text[pos]
                raise LexError(
                    f"Lexing error: unexpected character {ch!r} at {loc.line}:{loc.col}\n"
                    + loc.snippet,
                    pos, ch, loc.line, loc.col,
                )
            pat = self._patterns[idx]
            lexeme = text[pos:pos + length]
            if not pat.ignorable:
                toks.append(Token(pat.kind, lexeme, pos, line, col))
            # advance line/col past the lexeme
            nl = lexeme.count("\n")
            if nl:
                line += nl
                col = len(lexeme) - lexeme.rfind("\n")
            else:
                col += len(lexeme)
            pos += length
        return TokenSeq.from_tokens(toks)

    # ---- Internals ----
    def _longest_match(self, text: str, pos: int) -> Tuple[Optional[int], int]:
        """(pattern index, length) of the winning candidate at `pos`."""
        n = len(self._patterns)
        best: List[int] = [-1] * n     # best accepted length per pattern
        alive: List[bool] = [True] * n

        for i, pat in enumerate(self._patterns):
            pat.automaton.reset()
            if pat.automaton.accepts():
                best[i] = 0

        i = pos
        while i < len(text) and any(alive):
            ch = text[i]
            for k, pat in enumerate(self._patterns):
                if not alive[k]:
                    continue
                if pat.automaton.has_transitions(ch):
                    pat.automaton.apply(ch)
                else:
                    alive[k] = False
            i += 1
            for k, pat in enumerate(self._patterns):
                if alive[k] and pat.automaton.accepts():
                    best[k] = i - pos

        win_idx: Optional[int] = None
        win_len = -1
        for k, length in enumerate(best):
            # strict > keeps the earliest pattern on ties
            if length > win_len:
                win_idx, win_len = k, length
        if win_idx is None:
            return None, 0
        return win_idx, win_len
