import pytest

from nfafront.automaton import Automaton
from nfafront.diagnostics import locate
from nfafront.lex import Lexer, LexError, Token, TokenSeq, token_list
from nfafront.lex.reference import (
    reference_lexer, single_char, ascii_class,
    NUM, PLUS, MINUS, TIMES, DIV, LPAREN, RPAREN,
)


def kinds(text):
    return [t.kind for t in token_list(reference_lexer().tokenize(text))]


def texts(text):
    return [t.text for t in token_list(reference_lexer().tokenize(text))]


@pytest.mark.parametrize("text", ["", " ", "\n\t\r ", "   \n\n"])
def test_ignorable_only_input_is_empty(text):
    assert reference_lexer().tokenize(text) is None


@pytest.mark.parametrize("lexeme", ["0.5", "42.0", ".25", "3.14159", "007.700"])
def test_single_number_surrounded_by_whitespace(lexeme):
    toks = token_list(reference_lexer().tokenize(f"  {lexeme}\t\n"))
    assert len(toks) == 1
    assert toks[0].kind == NUM
    assert toks[0].text == lexeme
    assert toks[0].pos == 2


def test_maximal_munch():
    toks = token_list(reference_lexer().tokenize("12.34"))
    assert toks == [Token(NUM, "12.34", 0, 1, 1)]


def test_all_operators():
    assert kinds("1.0+2.0-3.0*4.0/5.0()") == [
        NUM, PLUS, NUM, MINUS, NUM, TIMES, NUM, DIV, NUM, LPAREN, RPAREN,
    ]


def test_positions_and_lines():
    toks = token_list(reference_lexer().tokenize("1.0 +\n  .5"))
    assert [(t.text, t.pos, t.line, t.col) for t in toks] == [
        ("1.0", 0, 1, 1),
        ("+", 4, 1, 5),
        (".5", 8, 2, 3),
    ]


def test_adjacent_numbers_split_at_second_dot():
    # "1.2.3" -> "1.2" then ".3"
    assert texts("1.2.3") == ["1.2", ".3"]


def test_priority_tie_break():
    lx = Lexer()
    lx.register_pattern("FIRST", single_char("x"))
    lx.register_pattern("SECOND", single_char("x"))
    assert [t.kind for t in token_list(lx.tokenize("xx"))] == ["FIRST", "FIRST"]

    lx = Lexer()
    lx.register_pattern("SECOND", single_char("x"))
    lx.register_pattern("FIRST", single_char("x"))
    assert [t.kind for t in token_list(lx.tokenize("x"))] == ["SECOND"]


def test_longer_later_pattern_beats_earlier_shorter():
    kw = Automaton()
    kw.add_state(0, is_start=True)
    kw.add_state(2, is_accept=True)
    kw.add_transition(0, "a", 1)
    kw.add_transition(1, "b", 2)
    lx = Lexer()
    lx.register_pattern("A", single_char("a"))
    lx.register_pattern("AB", kw)
    assert [t.kind for t in token_list(lx.tokenize("aba"))] == ["AB", "A"]


def test_longest_accept_remembered_after_dying():
    # "a" or "abc": on "abx" the pattern dies at x but "a" was accepted
    fa = Automaton()
    fa.add_state(0, is_start=True)
    fa.add_state(1, is_accept=True)
    fa.add_state(3, is_accept=True)
    fa.add_transition(0, "a", 1)
    fa.add_transition(1, "b", 2)
    fa.add_transition(2, "c", 3)
    lx = Lexer()
    lx.register_pattern("P", fa)
    lx.register_pattern("B", single_char("b"))
    lx.register_pattern("X", single_char("x"))
    assert [t.text for t in token_list(lx.tokenize("abx"))] == ["a", "b", "x"]


def test_unknown_character():
    with pytest.raises(LexError) as info:
        reference_lexer().tokenize("3.0+@2.0")
    e = info.value
    assert e.pos == 4
    assert e.char == "@"
    assert (e.line, e.col) == (1, 5)
    assert "unexpected character '@' at 1:5" in str(e)
    assert str(e).endswith("3.0+@2.0\n    ^")


@pytest.mark.parametrize("text", ["3+2*4", "3", "5-3-2", "(1+2)*3"])
def test_integers_are_not_numbers(text):
    # NUM needs a fractional part; the first bare digit is rejected
    with pytest.raises(LexError) as info:
        reference_lexer().tokenize(text)
    first_digit = next(i for i, ch in enumerate(text) if ch.isdigit())
    assert info.value.pos == first_digit
    assert info.value.char == text[first_digit]


def test_error_location_on_later_line():
    with pytest.raises(LexError) as info:
        reference_lexer().tokenize("1.0 +\n  2.0 ? 3.0")
    e = info.value
    assert (e.pos, e.line, e.col) == (12, 2, 7)
    assert str(e).endswith("  2.0 ? 3.0\n      ^")


def test_zero_length_win_is_an_error():
    # whitespace accepts the empty prefix; it must not stall on "#"
    with pytest.raises(LexError) as info:
        reference_lexer().tokenize("1.0 #")
    assert info.value.pos == 4


def test_no_patterns():
    with pytest.raises(LexError):
        Lexer().tokenize("a")
    assert Lexer().tokenize("") is None


def test_lexer_is_reusable():
    lx = reference_lexer()
    with pytest.raises(LexError):
        lx.tokenize("1.0 $")
    assert [t.text for t in token_list(lx.tokenize("(2.0)"))] == ["(", "2.0", ")"]


def test_token_seq_structure():
    a = Token(NUM, "1.0", 0, 1, 1)
    b = Token(PLUS, "+", 3, 1, 4)
    seq = TokenSeq.from_tokens([a, b])
    assert seq.head == a
    assert seq.tail.head == b
    assert seq.tail.tail is None
    assert len(seq) == 2
    assert list(seq) == [a, b]
    assert TokenSeq.from_tokens([]) is None
    assert token_list(None) == []
    # suffixes can be shared
    other = TokenSeq(a, seq.tail)
    assert other.tail is seq.tail


def test_ascii_class():
    assert ascii_class(r"[0-9]") == list("0123456789")
    assert ascii_class(r"[ \n\r\t]") == ["\t", "\n", "\r", " "]


def test_locate():
    loc = locate("ab\ncd", 4)
    assert (loc.line, loc.col) == (2, 2)
    assert loc.snippet == "cd\n ^"
    end = locate("ab", 2)
    assert (end.line, end.col, end.snippet) == (1, 3, "ab\n  ^")
