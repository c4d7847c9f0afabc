"""
Monkey Language Parser

Builds an abstract syntax tree from the lexer's token stream using
top-down operator precedence (Pratt) parsing.

Supported Constructs
--------------------
- Statements:
    * `let <ident> = <expr>;`
    * `return <expr>;`
    * `<expr>;` (the trailing semicolon is optional)

- Expressions:
    * Identifiers, integer literals, `true` / `false`
    * Prefix operators `!` and `-`
    * Infix operators `+ - * / == != < >`
    * Parenthesized grouping `( <expr> )`

Parser Behavior
---------------
- Pulls tokens from a `Lexer` one at a time, holding the current token and
  one token of lookahead.
- Expression parsing is driven by two dispatch tables keyed by token
  category: prefix handlers (start an expression) and infix handlers
  (continue one given the already-parsed left operand).
- Binding is decided solely by `PRECEDENCES`; equal precedence does not
  recurse, so all binary operators are left-associative.
- Syntax errors are collected, not raised. A malformed statement contributes
  no node and parsing continues with the next token.

Entry Points
------------
- `Parser(lexer).parse_program()`: Parse a full program; read `.errors` after.
- `parse(source, strict=False)`: Convenience wrapper returning
  `(program, errors)`; with `strict=True` raises `ParseError` instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import IntEnum

from monkey import monkey_token as token
from monkey.monkey_ast import (
    Boolean,
    Expression,
    ExpressionStatement,
    Identifier,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)
from monkey.monkey_lexer import Lexer
from monkey.monkey_token import Token

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Precedence(IntEnum):
    """Binding power of operators, lowest first."""

    LOWEST = 1
    EQUALS = 2  # ==, !=
    LESSGREATER = 3  # <, >
    SUM = 4  # +, -
    PRODUCT = 5  # *, /
    PREFIX = 6  # -x, !x
    CALL = 7  # f(x)


PRECEDENCES: dict[str, Precedence] = {
    token.EQ: Precedence.EQUALS,
    token.NOT_EQ: Precedence.EQUALS,
    token.LT: Precedence.LESSGREATER,
    token.GT: Precedence.LESSGREATER,
    token.PLUS: Precedence.SUM,
    token.MINUS: Precedence.SUM,
    token.SLASH: Precedence.PRODUCT,
    token.ASTERISK: Precedence.PRODUCT,
}

PrefixParseFn = Callable[[], Expression | None]
InfixParseFn = Callable[[Expression | None], Expression | None]


class ParseError(SyntaxError):
    """Raised by `parse(..., strict=True)` when any diagnostic was collected.

    Attributes:
        errors (list[str]): Every diagnostic, in the order it was recorded.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        summary = f"{len(self.errors)} parse error(s)"
        if self.errors:
            summary += ": " + "; ".join(self.errors)
        super().__init__(summary)


class Parser:
    """
    Monkey Pratt parser.

    Attributes
    ----------
    lexer : Lexer
        Source of tokens; pulled one token per `next_token()`.
    cur_token : Token
        The token under examination.
    peek_token : Token
        One token of lookahead.
    prefix_parse_fns : dict[str, PrefixParseFn]
        Category -> handler for tokens that can start an expression.
    infix_parse_fns : dict[str, InfixParseFn]
        Category -> handler for binary operators.
    """

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self._errors: list[str] = []

        self.cur_token = Token(token.EOF, "")
        self.peek_token = Token(token.EOF, "")
        # prime cur_token and peek_token
        self.next_token()
        self.next_token()

        self.prefix_parse_fns: dict[str, PrefixParseFn] = {}
        self.register_prefix(token.IDENT, self.parse_identifier)
        self.register_prefix(token.INT, self.parse_integer_literal)
        self.register_prefix(token.TRUE, self.parse_boolean)
        self.register_prefix(token.FALSE, self.parse_boolean)
        self.register_prefix(token.BANG, self.parse_prefix_expression)
        self.register_prefix(token.MINUS, self.parse_prefix_expression)
        self.register_prefix(token.LPAREN, self.parse_grouped_expression)

        self.infix_parse_fns: dict[str, InfixParseFn] = {}
        for op in (
            token.PLUS,
            token.MINUS,
            token.SLASH,
            token.ASTERISK,
            token.EQ,
            token.NOT_EQ,
            token.LT,
            token.GT,
        ):
            self.register_infix(op, self.parse_infix_expression)

    @property
    def errors(self) -> list[str]:
        """Diagnostics recorded so far, oldest first."""
        return list(self._errors)

    def register_prefix(self, token_type: str, fn: PrefixParseFn) -> None:
        self.prefix_parse_fns[token_type] = fn

    def register_infix(self, token_type: str, fn: InfixParseFn) -> None:
        self.infix_parse_fns[token_type] = fn

    def next_token(self) -> None:
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, token_type: str) -> bool:
        return self.cur_token.type == token_type

    def peek_token_is(self, token_type: str) -> bool:
        return self.peek_token.type == token_type

    def expect_peek(self, token_type: str) -> bool:
        """Advances if the lookahead has the given category, else records an error."""
        if self.peek_token_is(token_type):
            self.next_token()
            return True
        self.peek_error(token_type)
        return False

    def peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.type, Precedence.LOWEST)

    def cur_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.cur_token.type, Precedence.LOWEST)

    # Diagnostics

    def _error(self, msg: str) -> None:
        logger.debug("parse error: %s", msg)
        self._errors.append(msg)

    def peek_error(self, token_type: str) -> None:
        self._error(
            f"expected next token to be {token_type}, "
            f"got {self.peek_token.type} instead"
        )

    def no_prefix_parse_fn_error(self, token_type: str) -> None:
        self._error(f"no prefix parse function for {token_type} found")

    # Statements

    def parse_program(self) -> Program:
        """Parse statements until EOF. Never raises; check `errors` afterwards."""
        statements: list[Statement] = []
        while not self.cur_token_is(token.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.next_token()
        return Program(statements)

    def parse_statement(self) -> Statement | None:
        if self.cur_token.type == token.LET:
            return self.parse_let_statement()
        if self.cur_token.type == token.RETURN:
            return self.parse_return_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self) -> LetStatement | None:
        let_tok = self.cur_token

        if not self.expect_peek(token.IDENT):
            return None
        name = Identifier(self.cur_token, self.cur_token.literal)

        if not self.expect_peek(token.ASSIGN):
            return None
        self.next_token()

        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            self.skip_terminator()
            return None
        if not self.expect_peek(token.SEMICOLON):
            return None
        return LetStatement(let_tok, name, value)

    def parse_return_statement(self) -> ReturnStatement | None:
        return_tok = self.cur_token
        self.next_token()

        value = self.parse_expression(Precedence.LOWEST)
        if value is None:
            self.skip_terminator()
            return None
        if not self.expect_peek(token.SEMICOLON):
            return None
        return ReturnStatement(return_tok, value)

    def parse_expression_statement(self) -> ExpressionStatement | None:
        stmt_tok = self.cur_token
        expression = self.parse_expression(Precedence.LOWEST)
        self.skip_terminator()
        if expression is None:
            return None
        return ExpressionStatement(stmt_tok, expression)

    def skip_terminator(self) -> None:
        if self.peek_token_is(token.SEMICOLON):
            self.next_token()

    # Expressions

    def parse_expression(self, precedence: Precedence) -> Expression | None:
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.cur_token.type)
            return None
        left = prefix()

        # a failed operand still consumes the rest of the expression; the
        # infix handlers propagate None so nothing partial is kept
        while (
            not self.peek_token_is(token.SEMICOLON)
            and precedence < self.peek_precedence()
        ):
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left
            self.next_token()
            left = infix(left)

        return left

    def parse_identifier(self) -> Expression:
        return Identifier(self.cur_token, self.cur_token.literal)

    def parse_integer_literal(self) -> Expression | None:
        literal = self.cur_token.literal
        try:
            value = int(literal, 10)
        except ValueError:
            value = None
        if value is None or not INT64_MIN <= value <= INT64_MAX:
            self._error(f"could not parse {literal!r} as integer")
            return None
        return IntegerLiteral(self.cur_token, value)

    def parse_boolean(self) -> Expression:
        return Boolean(self.cur_token, self.cur_token_is(token.TRUE))

    def parse_prefix_expression(self) -> Expression | None:
        op_tok = self.cur_token
        self.next_token()
        right = self.parse_expression(Precedence.PREFIX)
        if right is None:
            return None
        return PrefixExpression(op_tok, op_tok.literal, right)

    def parse_infix_expression(self, left: Expression | None) -> Expression | None:
        op_tok = self.cur_token
        # same precedence as the operator itself keeps a - b - c left-associative
        precedence = self.cur_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        if left is None or right is None:
            return None
        return InfixExpression(op_tok, left, op_tok.literal, right)

    def parse_grouped_expression(self) -> Expression | None:
        self.next_token()
        expression = self.parse_expression(Precedence.LOWEST)
        if not self.expect_peek(token.RPAREN):
            return None
        return expression


def parse(source: str, strict: bool = False) -> tuple[Program, list[str]]:
    """Lex and parse `source` in one step.

    Args:
        source (str): Monkey source text.
        strict (bool): If True, raise instead of returning diagnostics.

    Returns:
        tuple[Program, list[str]]: The program and the collected diagnostics.

    Raises:
        ParseError: If `strict` is True and any diagnostic was recorded.
    """
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    errors = parser.errors
    if strict and errors:
        raise ParseError(errors)
    return program, errors


__all__ = ["PRECEDENCES", "ParseError", "Parser", "Precedence", "parse"]
