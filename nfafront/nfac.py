# nfafront/nfac.py
"""nfac – nfafront CLI

Examples
    $ nfac lex   --text "3 + 2*4"
    $ nfac parse --input expr.txt -D
    $ nfac eval  --text "(1.0+2.0)*3.0"

Commands
--------
- lex   : print the token stream
- parse : print the expression tree, fully parenthesized
- eval  : print the value of the expression

Debug mode (-D/--debug) reports every pipeline stage on stderr.
"""

from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import Optional

from .frontend import Frontend, _eprint
from .lex import LexError, token_list


def load_source_text(path: str) -> str:
    text = Path(path).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _read_input(args) -> str:
    if args.text is not None:
        return args.text
    return load_source_text(args.input)

# ------------------------------
# Commands
# ------------------------------

def cmd_lex(args) -> int:
    fe = Frontend(debug=args.debug)
    for i, tok in enumerate(token_list(fe.tokenize(_read_input(args)))):
        print(f"{i:03d}: {tok.kind:<12} {tok.text!r}  @{tok.line}:{tok.col}")
    return 0


def cmd_parse(args) -> int:
    fe = Frontend(debug=args.debug)
    print(fe.parse(_read_input(args)))
    return 0


def cmd_eval(args) -> int:
    fe = Frontend(debug=args.debug)
    print(fe.evaluate(_read_input(args)))
    return 0


def _run(args) -> int:
    try:
        return int(args.func(args))
    except LexError as e:
        _eprint("[LEX ERROR]", str(e))
        return 2
    except SyntaxError as e:
        _eprint("[SYNTAX ERROR]")
        _eprint(str(e))
        return 2
    except OSError as e:
        _eprint("[ERROR]", type(e).__name__, str(e))
        return 2

# ------------------------------
# Entry point
# ------------------------------

def _add_source(p: argparse.ArgumentParser) -> None:
    src_group = p.add_mutually_exclusive_group(required=True)
    src_group.add_argument("--text", help="expression text")
    src_group.add_argument("--input", help="path to a file holding the expression")
    p.add_argument("-D", "--debug", action="store_true", help="print pipeline diagnostics")


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="nfac", description="nfafront arithmetic front-end CLI")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_lex = sub.add_parser("lex", help="tokenize the input")
    _add_source(p_lex)
    p_lex.set_defaults(func=cmd_lex)

    p_parse = sub.add_parser("parse", help="parse the input and print the tree")
    _add_source(p_parse)
    p_parse.set_defaults(func=cmd_parse)

    p_eval = sub.add_parser("eval", help="parse and evaluate the input")
    _add_source(p_eval)
    p_eval.set_defaults(func=cmd_eval)

    args = ap.parse_args(argv)
    return _run(args)

if __name__ == "__main__":
    sys.exit(main())
