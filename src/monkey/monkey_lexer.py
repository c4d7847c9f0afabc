"""
Lexical analyzer for the Monkey programming language.

Converts raw source text into a stream of `Token` objects, one token per
`next_token()` call.

Classes:
    Lexer: Single-pass scanner over an in-memory source string.

Features:
    - Skips spaces, tabs, newlines and carriage returns
    - Recognizes the two-character operators `==` and `!=` by one-character lookahead
    - Recognizes identifiers and the keywords `fn let true false if else return`
    - Recognizes integer literals (sign is a separate prefix operator)
    - Unknown characters become ILLEGAL tokens; the lexer never raises

Example:
    >>> lexer = Lexer("let x = 5;")
    >>> lexer.next_token()
    Token(LET, let)

Exports:
    - Lexer
    - tokenize
"""

import logging
import string
from collections.abc import Iterator

from monkey import monkey_token as token
from monkey.monkey_token import Token

logger = logging.getLogger(__name__)

WHITESPACE = " \t\n\r"
IDENT_START = string.ascii_letters + "_"
DIGITS = string.digits


class Lexer:
    """Lexical analyzer for the Monkey language.

    Attributes:
        input (str): The full source text.
        position (int): Index of the character held in `ch`.
        read_position (int): Index of the next character to read.
        ch (str): The current character, or "" once input is exhausted.
    """

    def __init__(self, source: str) -> None:
        self.input = source
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.read_char()

    def __iter__(self) -> Iterator[Token]:
        """Yields tokens until (not including) EOF."""
        while True:
            tok = self.next_token()
            if tok.type == token.EOF:
                return
            yield tok

    def read_char(self) -> None:
        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self) -> str:
        """Returns the character after `ch` without consuming it, or "" at EOF."""
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def skip_whitespace(self) -> None:
        while self.ch and self.ch in WHITESPACE:
            self.read_char()

    def read_identifier(self) -> str:
        start = self.position
        while self.ch and self.ch in IDENT_START:
            self.read_char()
        return self.input[start : self.position]

    def read_number(self) -> str:
        start = self.position
        while self.ch and self.ch in DIGITS:
            self.read_char()
        return self.input[start : self.position]

    def next_token(self) -> Token:
        """Consumes and returns the next Token.

        Safe to call after EOF has been reached; keeps returning EOF.

        Returns:
            Token: The next token in the source.
        """
        self.skip_whitespace()

        ch = self.ch
        if ch == "":
            return Token(token.EOF, "")

        # 1. Two-character operators (==, !=) share a first character with a
        # single-character one, so peek before committing.
        pair = ch + self.peek_char()
        if len(pair) == 2 and pair in token.token_hashmap:
            self.read_char()
            self.read_char()
            return Token(token.token_hashmap[pair], pair)

        if ch in token.token_hashmap:
            self.read_char()
            return Token(token.token_hashmap[ch], ch)

        # 2. Identifier or keyword; read_identifier already advances.
        if ch in IDENT_START:
            ident = self.read_identifier()
            return Token(token.lookup_ident(ident), ident)

        # 3. Integer literal
        if ch in DIGITS:
            return Token(token.INT, self.read_number())

        # 4. Unknown character
        self.read_char()
        logger.debug("illegal character %r at offset %d", ch, self.position - 1)
        return Token(token.ILLEGAL, ch)


def tokenize(source: str) -> list[Token]:
    """Lexes `source` completely and returns every token, including the final EOF."""
    lexer = Lexer(source)
    tokens = list(lexer)
    tokens.append(Token(token.EOF, ""))
    return tokens


__all__ = ["Lexer", "tokenize"]
