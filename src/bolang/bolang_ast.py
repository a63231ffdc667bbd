"""
Defines the abstract syntax tree (AST) node classes for the BoLang scripting language.

Classes:
    NodeType:
        Closed enumeration of node kinds. Each node class fixes its own kind at
        class level; it is never an instance field and never reassigned.

    Node / Stmt / Expr:
        Shared behavior (`to_dict`, `children`) and the statement/expression split.

    Program, VarDeclaration, FunctionDeclaration,
    AssignmentExpr, BinaryExpr, CallExpr, MemberExpr,
    Identifier, NumericLiteral, Property, ObjectLiteral:
        Frozen dataclasses, one per syntactic construct. Child sequences are tuples,
        so a tree cannot be patched after the parser builds it.

    ASTDict:
        TypedDict shape of `Node.to_dict()` output, suitable for JSON dumps and tests.

Each node also records the `line` and `col` of the token that started it. Those
positions are diagnostic only and do not take part in equality or hashing.

Example:
    BinaryExpr(Identifier("a"), NumericLiteral(2.0), "+")
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, TypedDict


class NodeType(Enum):
    # Statements
    PROGRAM = "Program"
    VAR_DECLARATION = "VarDeclaration"
    FUNCTION_DECLARATION = "FunctionDeclaration"

    # Expressions
    ASSIGNMENT_EXPR = "AssignmentExpr"
    MEMBER_EXPR = "MemberExpr"
    CALL_EXPR = "CallExpr"
    BINARY_EXPR = "BinaryExpr"

    # Literals
    PROPERTY = "Property"
    OBJECT_LITERAL = "ObjectLiteral"
    NUMERIC_LITERAL = "NumericLiteral"
    IDENTIFIER = "Identifier"

    def __str__(self) -> str:
        return self.value


class ASTDict(TypedDict, total=False):
    """
    Serialized form of a node produced by `Node.to_dict()`.

    Only `kind` is guaranteed; the remaining keys are the node's own fields
    (e.g. `left`/`right`/`operator` for a BinaryExpr) with child nodes nested
    as ASTDicts and tuples turned into lists.
    """

    kind: str


_POSITION_FIELDS = ("line", "col")


class Node:
    """Common behavior of every AST node."""

    kind: ClassVar[NodeType]

    def to_dict(self) -> ASTDict:
        data: dict[str, Any] = {"kind": self.kind.value}
        for f in fields(self):  # type: ignore[arg-type]
            if f.name in _POSITION_FIELDS:
                continue
            data[f.name] = _serialize(getattr(self, f.name))
        return data  # type: ignore[return-value]

    def children(self) -> list[Node]:
        """Direct child nodes in source order."""
        found: list[Node] = []
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if isinstance(value, Node):
                found.append(value)
            elif isinstance(value, tuple):
                found.extend(v for v in value if isinstance(v, Node))
        return found


class Stmt(Node):
    """A node that may appear in a Program or function body."""


class Expr(Stmt):
    """A node that produces a value."""


def _serialize(value: Any) -> Any:
    if isinstance(value, Node):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_serialize(v) for v in value]
    return value


def _position() -> Any:
    return field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Program(Stmt):
    kind: ClassVar[NodeType] = NodeType.PROGRAM

    body: tuple[Stmt, ...] = ()
    line: int = _position()
    col: int = _position()


@dataclass(frozen=True)
class VarDeclaration(Stmt):
    """`let x;`, `let x = expr;` or `const x = expr;`."""

    kind: ClassVar[NodeType] = NodeType.VAR_DECLARATION

    identifier: str
    constant: bool
    value: Expr | None = None
    line: int = _position()
    col: int = _position()

    def __post_init__(self) -> None:
        if self.constant and self.value is None:
            raise ValueError(
                f"Constant '{self.identifier}' must be initialized with a value"
            )


@dataclass(frozen=True)
class FunctionDeclaration(Stmt):
    kind: ClassVar[NodeType] = NodeType.FUNCTION_DECLARATION

    name: str
    parameters: tuple[str, ...]
    body: tuple[Stmt, ...]
    line: int = _position()
    col: int = _position()


@dataclass(frozen=True)
class AssignmentExpr(Expr):
    kind: ClassVar[NodeType] = NodeType.ASSIGNMENT_EXPR

    assignee: Expr
    value: Expr
    line: int = _position()
    col: int = _position()


@dataclass(frozen=True)
class BinaryExpr(Expr):
    kind: ClassVar[NodeType] = NodeType.BINARY_EXPR

    left: Expr
    right: Expr
    operator: str
    line: int = _position()
    col: int = _position()


@dataclass(frozen=True)
class CallExpr(Expr):
    kind: ClassVar[NodeType] = NodeType.CALL_EXPR

    caller: Expr
    args: tuple[Expr, ...]
    line: int = _position()
    col: int = _position()


@dataclass(frozen=True)
class MemberExpr(Expr):
    """`obj.property` (computed=False) or `obj[property]` (computed=True)."""

    kind: ClassVar[NodeType] = NodeType.MEMBER_EXPR

    obj: Expr
    property: Expr
    computed: bool
    line: int = _position()
    col: int = _position()

    def __post_init__(self) -> None:
        if not self.computed and not isinstance(self.property, Identifier):
            raise ValueError(
                "Non-computed member access requires an Identifier property"
            )


@dataclass(frozen=True)
class Identifier(Expr):
    kind: ClassVar[NodeType] = NodeType.IDENTIFIER

    symbol: str
    line: int = _position()
    col: int = _position()


@dataclass(frozen=True)
class NumericLiteral(Expr):
    kind: ClassVar[NodeType] = NodeType.NUMERIC_LITERAL

    value: float
    line: int = _position()
    col: int = _position()


@dataclass(frozen=True)
class Property(Expr):
    """Object literal entry. `value` is None only for shorthand `{ key }`."""

    kind: ClassVar[NodeType] = NodeType.PROPERTY

    key: str
    value: Expr | None = None
    line: int = _position()
    col: int = _position()


@dataclass(frozen=True)
class ObjectLiteral(Expr):
    kind: ClassVar[NodeType] = NodeType.OBJECT_LITERAL

    properties: tuple[Property, ...] = ()
    line: int = _position()
    col: int = _position()


__all__ = [
    "ASTDict",
    "AssignmentExpr",
    "BinaryExpr",
    "CallExpr",
    "Expr",
    "FunctionDeclaration",
    "Identifier",
    "MemberExpr",
    "Node",
    "NodeType",
    "NumericLiteral",
    "ObjectLiteral",
    "Program",
    "Property",
    "Stmt",
    "VarDeclaration",
]
