"""
Defines the abstract syntax tree (AST) node structure for the Monkey language.

Classes:
    Node, Statement, Expression:
        Capability bases. Every node exposes `token_literal()` (the raw text of
        the token that starts it, for diagnostics) and a canonical `str()`
        rendering.

    Program:
        Root of the tree; an ordered tuple of statements.

    LetStatement, ReturnStatement, ExpressionStatement:
        The three statement forms.

    Identifier, IntegerLiteral, Boolean, PrefixExpression, InfixExpression:
        The expression forms.

    ASTDict:
        TypedDict representation for serializing nodes to plain dictionaries,
        suitable for JSON output or debugging.

Rendering:
    The `str()` form is fully parenthesized: prefix expressions render as
    `(<op><right>)`, infix as `(<left> <op> <right>)`, and statements as
    `<keyword> <expr>;`. It exists to check grouping and precedence, not to be
    parsed again.

Nodes are frozen dataclasses: the parser builds each one in a single step
and nothing mutates it afterwards. Every node owns its children outright.

Example:
    >>> Program([ExpressionStatement(tok, InfixExpression(...))])
"""

from dataclasses import dataclass
from typing import Any, TypedDict

from monkey.monkey_token import Token


class ASTDict(TypedDict, total=False):
    """
    TypedDict representation of a node used for serialization.

    Fields:
        kind (str): The node class name (e.g. "LetStatement", "InfixExpression").
        token (str): Literal text of the token that starts the node.
        value (Any): Identifier name, integer or boolean value, where applicable.
        operator (str): Operator text for prefix and infix expressions.
        children (list[ASTDict]): Child nodes in source order.
    """

    kind: str
    token: str
    value: Any
    operator: str
    children: list["ASTDict"]


def _render(node: "Node | None") -> str:
    return "" if node is None else str(node)


def _dump(node: "Node | None") -> list[ASTDict]:
    return [] if node is None else [node.to_dict()]


class Node:
    """Base for every AST node."""

    def token_literal(self) -> str:
        raise NotImplementedError

    def to_dict(self) -> ASTDict:
        raise NotImplementedError


class Statement(Node):
    """A node that can appear directly in a Program."""


class Expression(Node):
    """A node that yields a value and may be nested inside other expressions."""


@dataclass(frozen=True)
class Program(Node):
    statements: tuple[Statement, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "statements", tuple(self.statements))

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)

    def to_dict(self) -> ASTDict:
        return {
            "kind": "Program",
            "token": self.token_literal(),
            "children": [s.to_dict() for s in self.statements],
        }


@dataclass(frozen=True)
class Identifier(Expression):
    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.value

    def to_dict(self) -> ASTDict:
        return {"kind": "Identifier", "token": self.token.literal, "value": self.value}


@dataclass(frozen=True)
class IntegerLiteral(Expression):
    token: Token
    value: int

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.token.literal

    def to_dict(self) -> ASTDict:
        return {
            "kind": "IntegerLiteral",
            "token": self.token.literal,
            "value": self.value,
        }


@dataclass(frozen=True)
class Boolean(Expression):
    token: Token
    value: bool

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.token.literal

    def to_dict(self) -> ASTDict:
        return {"kind": "Boolean", "token": self.token.literal, "value": self.value}


@dataclass(frozen=True)
class PrefixExpression(Expression):
    """`!x` or `-x`."""

    token: Token
    operator: str
    right: Expression | None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"({self.operator}{_render(self.right)})"

    def to_dict(self) -> ASTDict:
        return {
            "kind": "PrefixExpression",
            "token": self.token.literal,
            "operator": self.operator,
            "children": _dump(self.right),
        }


@dataclass(frozen=True)
class InfixExpression(Expression):
    """A binary operation; `token` is the operator token."""

    token: Token
    left: Expression
    operator: str
    right: Expression | None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"({_render(self.left)} {self.operator} {_render(self.right)})"

    def to_dict(self) -> ASTDict:
        return {
            "kind": "InfixExpression",
            "token": self.token.literal,
            "operator": self.operator,
            "children": _dump(self.left) + _dump(self.right),
        }


@dataclass(frozen=True)
class LetStatement(Statement):
    """`let <name> = <value>;`"""

    token: Token
    name: Identifier
    value: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.name} = {_render(self.value)};"

    def to_dict(self) -> ASTDict:
        return {
            "kind": "LetStatement",
            "token": self.token.literal,
            "children": _dump(self.name) + _dump(self.value),
        }


@dataclass(frozen=True)
class ReturnStatement(Statement):
    """`return <value>;`"""

    token: Token
    return_value: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return f"{self.token_literal()} {_render(self.return_value)};"

    def to_dict(self) -> ASTDict:
        return {
            "kind": "ReturnStatement",
            "token": self.token.literal,
            "children": _dump(self.return_value),
        }


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    """A bare expression used as a statement, e.g. `x + 10;`."""

    token: Token
    expression: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return _render(self.expression)

    def to_dict(self) -> ASTDict:
        return {
            "kind": "ExpressionStatement",
            "token": self.token.literal,
            "children": _dump(self.expression),
        }


__all__ = [
    "ASTDict",
    "Boolean",
    "Expression",
    "ExpressionStatement",
    "Identifier",
    "InfixExpression",
    "IntegerLiteral",
    "LetStatement",
    "Node",
    "PrefixExpression",
    "Program",
    "ReturnStatement",
    "Statement",
]
