# nfafront/__init__.py
"""nfafront – NFA-driven lexer and recursive-descent parser for arithmetic.

- `automaton` : single-pattern NFA simulated by on-the-fly subset tracking
- `lex`       : maximal-munch lexer over registered automata
- `parse`     : expression tree + right-recursive descent parser
- `frontend`  : lex → parse → evaluate pipeline
- `nfac`      : command-line driver
"""

from .automaton import Automaton
from .lex import Lexer, LexError, Token, TokenSeq, token_list
from .lex.reference import reference_lexer
from .parse import Parser, ParseError, parse_tokens, Expr, Literal, BinaryOp
from .frontend import Frontend

__version__ = "0.1.0"
