import pytest
from hypothesis import given
from hypothesis import strategies as st

from monkey import monkey_token as token
from monkey.monkey_lexer import Lexer, tokenize
from monkey.monkey_token import KEYWORDS, Token, token_hashmap


def lex_pairs(source: str) -> list[tuple[str, str]]:
    return [(tok.type, tok.literal) for tok in tokenize(source)]


def test_single_char_tokens() -> None:
    code = "=+(){},;"
    expected = [
        (token.ASSIGN, "="),
        (token.PLUS, "+"),
        (token.LPAREN, "("),
        (token.RPAREN, ")"),
        (token.LBRACE, "{"),
        (token.RBRACE, "}"),
        (token.COMMA, ","),
        (token.SEMICOLON, ";"),
        (token.EOF, ""),
    ]
    assert lex_pairs(code) == expected


def test_full_program() -> None:
    code = """let five = 5;
let ten = 10;

let add = fn(x, y) {
  x + y;
};

let result = add(five, ten);
!-/*5;
5 < 10 > 5;

if (5 < 10) {
\treturn true;
} else {
\treturn false;
}

10 == 10;
10 != 9;
"""
    expected = [
        (token.LET, "let"),
        (token.IDENT, "five"),
        (token.ASSIGN, "="),
        (token.INT, "5"),
        (token.SEMICOLON, ";"),
        (token.LET, "let"),
        (token.IDENT, "ten"),
        (token.ASSIGN, "="),
        (token.INT, "10"),
        (token.SEMICOLON, ";"),
        (token.LET, "let"),
        (token.IDENT, "add"),
        (token.ASSIGN, "="),
        (token.FUNCTION, "fn"),
        (token.LPAREN, "("),
        (token.IDENT, "x"),
        (token.COMMA, ","),
        (token.IDENT, "y"),
        (token.RPAREN, ")"),
        (token.LBRACE, "{"),
        (token.IDENT, "x"),
        (token.PLUS, "+"),
        (token.IDENT, "y"),
        (token.SEMICOLON, ";"),
        (token.RBRACE, "}"),
        (token.SEMICOLON, ";"),
        (token.LET, "let"),
        (token.IDENT, "result"),
        (token.ASSIGN, "="),
        (token.IDENT, "add"),
        (token.LPAREN, "("),
        (token.IDENT, "five"),
        (token.COMMA, ","),
        (token.IDENT, "ten"),
        (token.RPAREN, ")"),
        (token.SEMICOLON, ";"),
        (token.BANG, "!"),
        (token.MINUS, "-"),
        (token.SLASH, "/"),
        (token.ASTERISK, "*"),
        (token.INT, "5"),
        (token.SEMICOLON, ";"),
        (token.INT, "5"),
        (token.LT, "<"),
        (token.INT, "10"),
        (token.GT, ">"),
        (token.INT, "5"),
        (token.SEMICOLON, ";"),
        (token.IF, "if"),
        (token.LPAREN, "("),
        (token.INT, "5"),
        (token.LT, "<"),
        (token.INT, "10"),
        (token.RPAREN, ")"),
        (token.LBRACE, "{"),
        (token.RETURN, "return"),
        (token.TRUE, "true"),
        (token.SEMICOLON, ";"),
        (token.RBRACE, "}"),
        (token.ELSE, "else"),
        (token.LBRACE, "{"),
        (token.RETURN, "return"),
        (token.FALSE, "false"),
        (token.SEMICOLON, ";"),
        (token.RBRACE, "}"),
        (token.INT, "10"),
        (token.EQ, "=="),
        (token.INT, "10"),
        (token.SEMICOLON, ";"),
        (token.INT, "10"),
        (token.NOT_EQ, "!="),
        (token.INT, "9"),
        (token.SEMICOLON, ";"),
        (token.EOF, ""),
    ]
    assert lex_pairs(code) == expected


def test_two_char_operator_falls_back_to_single() -> None:
    assert lex_pairs("= ! =! !!") == [
        (token.ASSIGN, "="),
        (token.BANG, "!"),
        (token.ASSIGN, "="),
        (token.BANG, "!"),
        (token.BANG, "!"),
        (token.BANG, "!"),
        (token.EOF, ""),
    ]


def test_two_char_operator_at_end_of_input() -> None:
    assert lex_pairs("a==") == [
        (token.IDENT, "a"),
        (token.EQ, "=="),
        (token.EOF, ""),
    ]
    assert lex_pairs("!") == [(token.BANG, "!"), (token.EOF, "")]


def test_identifier_with_underscore() -> None:
    assert lex_pairs("_foo_bar") == [(token.IDENT, "_foo_bar"), (token.EOF, "")]


def test_digits_end_an_identifier() -> None:
    assert lex_pairs("x1") == [
        (token.IDENT, "x"),
        (token.INT, "1"),
        (token.EOF, ""),
    ]


def test_negative_number_is_minus_then_int() -> None:
    assert lex_pairs("-15") == [
        (token.MINUS, "-"),
        (token.INT, "15"),
        (token.EOF, ""),
    ]


def test_keyword_prefix_is_identifier() -> None:
    assert lex_pairs("letter") == [(token.IDENT, "letter"), (token.EOF, "")]


@pytest.mark.parametrize("char", ["@", "#", "$", "~", "?", ".", "\"", "é"])
def test_unrecognized_character_returns_illegal(char: str) -> None:
    tok = Lexer(char).next_token()
    assert tok == Token(token.ILLEGAL, char)


def test_illegal_does_not_swallow_neighbors() -> None:
    assert lex_pairs("a@b") == [
        (token.IDENT, "a"),
        (token.ILLEGAL, "@"),
        (token.IDENT, "b"),
        (token.EOF, ""),
    ]


@pytest.mark.parametrize("source", ["", "   ", "\n\t\r  \n"])
def test_empty_or_blank_input_returns_eof(source: str) -> None:
    lexer = Lexer(source)
    assert lexer.next_token() == Token(token.EOF, "")


def test_eof_is_idempotent() -> None:
    lexer = Lexer("x")
    assert lexer.next_token() == Token(token.IDENT, "x")
    for _ in range(5):
        assert lexer.next_token() == Token(token.EOF, "")


def test_lexer_primes_first_character() -> None:
    lexer = Lexer("abc")
    assert lexer.ch == "a"
    assert lexer.position == 0
    assert lexer.read_position == 1


def test_read_position_after_tokens() -> None:
    lexer = Lexer("== x")
    lexer.next_token()
    assert lexer.position == 2
    assert lexer.read_position == lexer.position + 1


def test_peek_char_beyond_end_returns_empty() -> None:
    lexer = Lexer("a")
    assert lexer.peek_char() == ""


def test_iter_stops_before_eof() -> None:
    tokens = list(Lexer("let x = 5;"))
    assert [t.type for t in tokens] == [
        token.LET,
        token.IDENT,
        token.ASSIGN,
        token.INT,
        token.SEMICOLON,
    ]


@given(st.text(max_size=100))  # type: ignore[misc]
def test_lexer_does_not_crash_on_random_input(text: str) -> None:
    lexer = Lexer(text)
    for _ in range(len(text) + 1):
        tok = lexer.next_token()
        if tok.type == token.EOF:
            break
    else:
        pytest.fail("lexer did not reach EOF")
    assert lexer.next_token().type == token.EOF


@given(st.text(max_size=100))  # type: ignore[misc]
def test_tokens_cover_all_non_whitespace(text: str) -> None:
    literals = "".join(tok.literal for tok in tokenize(text))
    assert literals == "".join(ch for ch in text if ch not in " \t\n\r")


ATOMS = (
    [(lit, typ) for lit, typ in token_hashmap.items()]
    + [(word, typ) for word, typ in KEYWORDS.items()]
    + [("foo", token.IDENT), ("_bar", token.IDENT), ("42", token.INT)]
)


@given(st.lists(st.sampled_from(ATOMS), max_size=30))  # type: ignore[misc]
def test_space_separated_atoms_lex_as_expected(atoms: list[tuple[str, str]]) -> None:
    source = " ".join(lit for lit, _ in atoms)
    assert lex_pairs(source) == list(atoms) + [(token.EOF, "")]
