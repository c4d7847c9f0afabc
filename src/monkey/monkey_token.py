"""
Token model for the Monkey language.

Defines the fixed set of lexical categories produced by the lexer and the
immutable `Token` value carried between the lexer and the parser.

Categories are plain strings whose value is their own name (e.g. ``"IDENT"``,
``"EQ"``); this keeps diagnostics such as
``expected next token to be ASSIGN, got INT instead`` readable without a
separate lookup.

Exports:
    - Token
    - KEYWORDS
    - token_hashmap
    - lookup_ident
    - the category constants (ILLEGAL, EOF, IDENT, INT, ASSIGN, ...)
"""

from dataclasses import dataclass

# Special
ILLEGAL = "ILLEGAL"
EOF = "EOF"

# Identifiers and literals
IDENT = "IDENT"
INT = "INT"

# Operators
ASSIGN = "ASSIGN"
PLUS = "PLUS"
MINUS = "MINUS"
BANG = "BANG"
ASTERISK = "ASTERISK"
SLASH = "SLASH"
LT = "LT"
GT = "GT"
EQ = "EQ"
NOT_EQ = "NOT_EQ"

# Delimiters
COMMA = "COMMA"
SEMICOLON = "SEMICOLON"
LPAREN = "LPAREN"
RPAREN = "RPAREN"
LBRACE = "LBRACE"
RBRACE = "RBRACE"

# Keywords
FUNCTION = "FUNCTION"
LET = "LET"
TRUE = "TRUE"
FALSE = "FALSE"
IF = "IF"
ELSE = "ELSE"
RETURN = "RETURN"

KEYWORDS: dict[str, str] = {
    "fn": FUNCTION,
    "let": LET,
    "true": TRUE,
    "false": FALSE,
    "if": IF,
    "else": ELSE,
    "return": RETURN,
}

# Literal symbol -> category. Two-character entries must share their first
# character with a one-character entry so the lexer can fall back to it.
token_hashmap: dict[str, str] = {
    "=": ASSIGN,
    "==": EQ,
    "!": BANG,
    "!=": NOT_EQ,
    "+": PLUS,
    "-": MINUS,
    "*": ASTERISK,
    "/": SLASH,
    "<": LT,
    ">": GT,
    ",": COMMA,
    ";": SEMICOLON,
    "(": LPAREN,
    ")": RPAREN,
    "{": LBRACE,
    "}": RBRACE,
}

ALL_TOKEN_TYPES: frozenset[str] = frozenset(
    {ILLEGAL, EOF, IDENT, INT}
    | set(token_hashmap.values())
    | set(KEYWORDS.values())
)


def lookup_ident(ident: str) -> str:
    """Returns the keyword category for `ident`, or IDENT if it is not reserved."""
    return KEYWORDS.get(ident, IDENT)


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Attributes:
        type (str): One of the category constants defined in this module.
        literal (str): The exact source text matched; empty for EOF.
    """

    type: str
    literal: str

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.literal})"

