"""
Renders BoLang ASTs as an indented outline.

This module defines the `AstPrinter` class used by the REPL and CLI to show the
tree produced by the parser. Each node becomes one line, children are indented
two spaces deeper than their parent, and labelled sub-trees (an assignment's
target and value, a member's object and property) get a heading line.

Example:
    >>> print(AstPrinter().render(parse("a + 2")))
    Program
      BinaryExpr (op: +)
        Identifier: a
        NumericLiteral: 2

Raises:
    - `NotImplementedError`: If a node kind has no corresponding render method.
"""

from bolang.bolang_ast import (
    AssignmentExpr,
    BinaryExpr,
    CallExpr,
    FunctionDeclaration,
    Identifier,
    MemberExpr,
    Node,
    NumericLiteral,
    ObjectLiteral,
    Program,
    Property,
    VarDeclaration,
)


def format_number(value: float) -> str:
    """Render integral floats without a trailing `.0`."""
    return str(int(value)) if value.is_integer() else repr(value)


class AstPrinter:
    """Builds an indented text outline of an AST.

    Attributes:
        lines (list[str]): Accumulated output lines.
        indent (int): Current indentation level.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.indent = 0

    def indent_str(self) -> str:
        return "  " * self.indent

    def render(self, node: Node) -> str:
        self.lines = []
        self.indent = 0
        self._visit(node)
        return "\n".join(self.lines)

    def emit(self, text: str) -> None:
        self.lines.append(f"{self.indent_str()}{text}")

    def _visit(self, node: Node) -> None:
        method = getattr(self, f"render_{node.kind.name.lower()}", None)
        if not callable(method):
            raise NotImplementedError(f"No printer for node kind: {node.kind}")
        method(node)

    def _nested(self, *nodes: Node) -> None:
        self.indent += 1
        for child in nodes:
            self._visit(child)
        self.indent -= 1

    def _labelled(self, label: str, node: Node) -> None:
        self.indent += 1
        self.emit(f"{label}:")
        self._nested(node)
        self.indent -= 1

    def render_program(self, node: Program) -> None:
        self.emit("Program")
        self._nested(*node.body)

    def render_var_declaration(self, node: VarDeclaration) -> None:
        keyword = "const" if node.constant else "let"
        self.emit(f"VarDeclaration ({keyword}): {node.identifier}")
        if node.value is not None:
            self._nested(node.value)

    def render_function_declaration(self, node: FunctionDeclaration) -> None:
        params = ", ".join(node.parameters)
        self.emit(f"FunctionDeclaration: {node.name}({params})")
        self._nested(*node.body)

    def render_assignment_expr(self, node: AssignmentExpr) -> None:
        self.emit("AssignmentExpr")
        self._labelled("assignee", node.assignee)
        self._labelled("value", node.value)

    def render_binary_expr(self, node: BinaryExpr) -> None:
        self.emit(f"BinaryExpr (op: {node.operator})")
        self._nested(node.left, node.right)

    def render_call_expr(self, node: CallExpr) -> None:
        self.emit(f"CallExpr ({len(node.args)} args)")
        self._labelled("caller", node.caller)
        if node.args:
            self.indent += 1
            self.emit("args:")
            self._nested(*node.args)
            self.indent -= 1

    def render_member_expr(self, node: MemberExpr) -> None:
        self.emit(f"MemberExpr (computed: {str(node.computed).lower()})")
        self._labelled("object", node.obj)
        self._labelled("property", node.property)

    def render_identifier(self, node: Identifier) -> None:
        self.emit(f"Identifier: {node.symbol}")

    def render_numeric_literal(self, node: NumericLiteral) -> None:
        self.emit(f"NumericLiteral: {format_number(node.value)}")

    def render_property(self, node: Property) -> None:
        if node.value is None:
            self.emit(f"Property: {node.key} (shorthand)")
            return
        self.emit(f"Property: {node.key}")
        self._nested(node.value)

    def render_object_literal(self, node: ObjectLiteral) -> None:
        self.emit(f"ObjectLiteral ({len(node.properties)} properties)")
        self._nested(*node.properties)


__all__ = ["AstPrinter", "format_number"]
