"""
BoLang Language Parser

Parses BoLang tokens into an immutable abstract syntax tree (AST).

This module implements a recursive-descent parser that transforms the flat list
of lexer-generated `Token` objects into a `Program` node. Operator precedence is
encoded as a ladder of parse methods, each one calling the next tighter level for
its operands.

Precedence (lowest to highest)
------------------------------
- Assignment: `a = b = 3` (right-associative, any expression as target)
- Object literal: `{ x, y: 2 }`
- Additive: `+ -` (left-associative)
- Multiplicative: `* / %` (left-associative)
- Call: `f(a, b)()`
- Member: `obj.key`, `obj[expr]`
- Primary: identifiers, numbers, `( expr )`

Statements
----------
- `let x;`, `let x = expr;`, `const x = expr;`
- `fn name(a, b) { ... }`
- Expression statements, optionally terminated by `;`

Entry Points
------------
- `Parser(tokens).parse()`: Parse a token list into a `Program`.
- `parse(source)`: Tokenize and parse source text, raising on failure.
- `try_parse(source)`: Tokenize and parse, returning a `ParseResult` instead of raising.
- `parse_source(provider)`: Same as `try_parse` for a `SourceProvider`.

Raises
------
ParseError
    Raised when a required token is missing, a primary expression cannot start,
    a grammar rule is violated, or the input nests deeper than the interpreter
    stack allows.
LexicalError
    Propagated from the lexer by `parse()`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bolang.bolang_ast import (
    AssignmentExpr,
    BinaryExpr,
    CallExpr,
    Expr,
    FunctionDeclaration,
    Identifier,
    MemberExpr,
    NumericLiteral,
    ObjectLiteral,
    Program,
    Property,
    Stmt,
    VarDeclaration,
)
from bolang.bolang_constants import (
    ADDITIVE_OPERATORS,
    EOF_VALUE,
    MULTIPLICATIVE_OPERATORS,
    TokenType,
)
from bolang.bolang_errors import BoLangError, ParseError
from bolang.bolang_lexer import Token, tokenize
from bolang.bolang_source import SourceProvider

logger = logging.getLogger(__name__)


class Parser:
    """
    BoLang Parser Class

    Consumes a token list through a private cursor and builds a `Program`.
    A Parser instance is single-use: `parse()` walks the cursor to EOF.

    Attributes
    ----------
    tokens : list[Token]
        The input token stream. An EOF token is appended if missing.
    position : int
        Current index into the token stream.
    source_name : str | None
        Name attached to raised errors.

    Raises
    ------
    ParseError
        When an invalid construct or malformed syntax is encountered.
    """

    def __init__(self, tokens: list[Token], source_name: str | None = None) -> None:
        if not tokens or tokens[-1].type is not TokenType.EOF:
            last = tokens[-1] if tokens else None
            tokens = list(tokens) + [
                Token(
                    TokenType.EOF,
                    EOF_VALUE,
                    last.line if last else 1,
                    last.col + len(last.value) if last else 1,
                )
            ]
        self.tokens: list[Token] = tokens
        self.position: int = 0
        self.source_name = source_name

    # Cursor

    def current(self) -> Token:
        return self.tokens[self.position]

    def peek(self, offset: int = 1) -> Token:
        index = min(self.position + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def not_eof(self) -> bool:
        return self.current().type is not TokenType.EOF

    def advance(self) -> Token:
        """Consumes and returns the current token. EOF is never consumed."""
        tok = self.current()
        if tok.type is not TokenType.EOF:
            self.position += 1
        return tok

    def expect(self, type_: TokenType, message: str) -> Token:
        """Consumes the current token, failing unless it has type `type_`."""
        tok = self.current()
        if tok.type is not type_:
            raise self.error(f"{message} Got {tok!r}, expecting {type_}.", tok)
        return self.advance()

    def error(self, message: str, token: Token | None = None) -> ParseError:
        return ParseError(
            message,
            token if token is not None else self.current(),
            source_name=self.source_name,
        )

    # Statements

    def parse(self) -> Program:
        """Parse the whole token stream into a Program."""
        first = self.current()
        body: list[Stmt] = []
        try:
            while self.not_eof():
                body.append(self.parse_statement())
        except RecursionError:
            raise self.error("Expression nested too deeply.") from None
        logger.debug("parsed %d top-level statements", len(body))
        return Program(tuple(body), line=first.line, col=first.col)

    def parse_statement(self) -> Stmt:
        tok = self.current()
        if tok.type in (TokenType.LET, TokenType.CONST):
            return self.parse_var_declaration()
        if tok.type is TokenType.FN:
            return self.parse_fn_declaration()

        expr = self.parse_expression()
        if self.current().type is TokenType.SEMICOLON:
            self.advance()
        return expr

    def parse_var_declaration(self) -> VarDeclaration:
        """`let IDENT ;` or `(let | const) IDENT = EXPR ;`"""
        keyword = self.advance()
        is_constant = keyword.type is TokenType.CONST
        identifier = self.expect(
            TokenType.IDENTIFIER,
            "Expected identifier name following let | const keywords.",
        ).value

        if self.current().type is TokenType.SEMICOLON:
            if is_constant:
                raise self.error(
                    "Must assign value to constant expression. No value provided."
                )
            self.advance()
            return VarDeclaration(
                identifier, False, line=keyword.line, col=keyword.col
            )

        self.expect(
            TokenType.EQUALS,
            "Expected equals token following identifier in var declaration.",
        )
        value = self.parse_expression()
        self.expect(
            TokenType.SEMICOLON,
            "Variable declaration statement must end with semicolon.",
        )
        return VarDeclaration(
            identifier, is_constant, value, line=keyword.line, col=keyword.col
        )

    def parse_fn_declaration(self) -> FunctionDeclaration:
        """`fn IDENT ( params ) { stmt* }`"""
        fn_tok = self.advance()
        name = self.expect(
            TokenType.IDENTIFIER, "Expected function name following fn keyword."
        ).value

        params_start = self.current()
        parameters: list[str] = []
        for arg in self.parse_args():
            if not isinstance(arg, Identifier):
                raise self.error(
                    "Inside function declaration expected parameters to be identifiers.",
                    params_start,
                )
            parameters.append(arg.symbol)

        self.expect(
            TokenType.OPEN_BRACE, "Expected function body following declaration."
        )
        body: list[Stmt] = []
        while self.not_eof() and self.current().type is not TokenType.CLOSE_BRACE:
            body.append(self.parse_statement())
        self.expect(
            TokenType.CLOSE_BRACE,
            "Closing brace expected inside function declaration.",
        )

        return FunctionDeclaration(
            name, tuple(parameters), tuple(body), line=fn_tok.line, col=fn_tok.col
        )

    # Expressions

    def parse_expression(self) -> Expr:
        return self.parse_assignment_expr()

    def parse_assignment_expr(self) -> Expr:
        left = self.parse_object_expr()

        if self.current().type is TokenType.EQUALS:
            self.advance()
            value = self.parse_assignment_expr()
            return AssignmentExpr(left, value, line=left.line, col=left.col)

        return left

    def parse_object_expr(self) -> Expr:
        """`{ key, key: expr, ... }` with shorthand keys and a trailing comma."""
        if self.current().type is not TokenType.OPEN_BRACE:
            return self.parse_additive_expr()

        open_tok = self.advance()
        properties: list[Property] = []

        while self.not_eof() and self.current().type is not TokenType.CLOSE_BRACE:
            key_tok = self.expect(TokenType.IDENTIFIER, "Object literal key expected.")
            key = key_tok.value

            # { key, }
            if self.current().type is TokenType.COMMA:
                self.advance()
                properties.append(Property(key, line=key_tok.line, col=key_tok.col))
                continue
            # { key }
            if self.current().type is TokenType.CLOSE_BRACE:
                properties.append(Property(key, line=key_tok.line, col=key_tok.col))
                continue

            self.expect(
                TokenType.COLON, "Missing colon following identifier in ObjectExpr."
            )
            value = self.parse_expression()
            properties.append(Property(key, value, line=key_tok.line, col=key_tok.col))

            if self.current().type is not TokenType.CLOSE_BRACE:
                self.expect(
                    TokenType.COMMA,
                    "Expected comma or closing brace following property.",
                )

        self.expect(TokenType.CLOSE_BRACE, "Object literal missing closing brace.")
        return ObjectLiteral(tuple(properties), line=open_tok.line, col=open_tok.col)

    def _at_operator(self, operators: frozenset[str]) -> bool:
        tok = self.current()
        return tok.type is TokenType.BINARY_OPERATOR and tok.value in operators

    def parse_additive_expr(self) -> Expr:
        left = self.parse_multiplicative_expr()

        while self._at_operator(ADDITIVE_OPERATORS):
            operator = self.advance().value
            right = self.parse_multiplicative_expr()
            left = BinaryExpr(left, right, operator, line=left.line, col=left.col)

        return left

    def parse_multiplicative_expr(self) -> Expr:
        left = self.parse_call_member_expr()

        while self._at_operator(MULTIPLICATIVE_OPERATORS):
            operator = self.advance().value
            right = self.parse_call_member_expr()
            left = BinaryExpr(left, right, operator, line=left.line, col=left.col)

        return left

    def parse_call_member_expr(self) -> Expr:
        """`foo.x()()`"""
        member = self.parse_member_expr()

        if self.current().type is TokenType.OPEN_PAREN:
            return self.parse_call_expr(member)

        return member

    def parse_call_expr(self, caller: Expr) -> CallExpr:
        call = CallExpr(caller, tuple(self.parse_args()), line=caller.line, col=caller.col)

        while self.current().type is TokenType.OPEN_PAREN:
            call = CallExpr(call, tuple(self.parse_args()), line=call.line, col=call.col)

        return call

    def parse_args(self) -> list[Expr]:
        self.expect(TokenType.OPEN_PAREN, "Expected open parenthesis.")
        args = (
            []
            if self.current().type is TokenType.CLOSE_PAREN
            else self.parse_arguments_list()
        )
        self.expect(
            TokenType.CLOSE_PAREN, "Missing closing parenthesis inside arguments list."
        )
        return args

    def parse_arguments_list(self) -> list[Expr]:
        args = [self.parse_assignment_expr()]

        while self.current().type is TokenType.COMMA:
            self.advance()
            args.append(self.parse_assignment_expr())

        return args

    def parse_member_expr(self) -> Expr:
        obj = self.parse_primary_expr()

        while self.current().type in (TokenType.DOT, TokenType.OPEN_BRACKET):
            operator = self.advance()
            prop: Expr

            if operator.type is TokenType.DOT:
                # obj.key
                computed = False
                prop_tok = self.current()
                prop = self.parse_primary_expr()
                if not isinstance(prop, Identifier):
                    raise self.error(
                        "Cannot use dot operator without right hand side being an identifier.",
                        prop_tok,
                    )
            else:
                # obj[expr]
                computed = True
                prop = self.parse_expression()
                self.expect(
                    TokenType.CLOSE_BRACKET, "Missing closing bracket in computed value."
                )

            obj = MemberExpr(obj, prop, computed, line=obj.line, col=obj.col)

        return obj

    def parse_primary_expr(self) -> Expr:
        tok = self.current()

        if tok.type is TokenType.IDENTIFIER:
            self.advance()
            return Identifier(tok.value, line=tok.line, col=tok.col)

        if tok.type is TokenType.NUMBER:
            self.advance()
            return NumericLiteral(float(tok.value), line=tok.line, col=tok.col)

        if tok.type is TokenType.OPEN_PAREN:
            self.advance()
            value = self.parse_expression()
            self.expect(
                TokenType.CLOSE_PAREN,
                "Unexpected token found inside parenthesized expression. Expected closing parenthesis.",
            )
            return value

        raise self.error(f"Unexpected token found during parsing: {tok!r}", tok)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of `try_parse`: exactly one of `program` and `error` is set."""

    program: Program | None = None
    error: BoLangError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Program:
        """Return the program, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        assert self.program is not None  # for mypy
        return self.program


def parse(source: str, source_name: str | None = None) -> Program:
    """Tokenize and parse `source`, raising LexicalError or ParseError on failure."""
    return Parser(tokenize(source, source_name), source_name).parse()


def try_parse(source: str, *, source_name: str | None = None) -> ParseResult:
    """Tokenize and parse `source` without raising BoLang errors."""
    try:
        return ParseResult(program=parse(source, source_name))
    except BoLangError as e:
        logger.debug("parse of %s failed: %s", source_name or "<string>", e)
        return ParseResult(error=e)


def parse_source(provider: SourceProvider) -> ParseResult:
    """Read `provider` and parse it with `try_parse`.

    Raises:
        OSError, UnicodeDecodeError: If the provider cannot be read.
    """
    return try_parse(provider.read(), source_name=provider.name)


__all__ = ["ParseResult", "Parser", "parse", "parse_source", "try_parse"]
