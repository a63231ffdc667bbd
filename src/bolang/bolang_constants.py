"""
Shared lexical tables for the BoLang front end.

Exports:
    - TokenType: closed enumeration of every token kind the lexer can produce.
    - KEYWORDS: read-only mapping of reserved words to their token types.
    - SINGLE_CHAR_TOKENS: read-only mapping of punctuation characters to token types.
    - ADDITIVE_OPERATORS / MULTIPLICATIVE_OPERATORS: operator lexemes per precedence level.
    - WHITESPACE: characters skipped between tokens.
"""

from enum import Enum
from types import MappingProxyType

__version__ = "0.1.0"


class TokenType(Enum):
    # Literals
    NUMBER = "Number"
    IDENTIFIER = "Identifier"

    # Keywords
    LET = "Let"
    CONST = "Const"
    FN = "Fn"

    # Grouping and operators
    BINARY_OPERATOR = "BinaryOperator"
    EQUALS = "Equals"
    COMMA = "Comma"
    DOT = "Dot"
    COLON = "Colon"
    SEMICOLON = "Semicolon"
    OPEN_PAREN = "OpenParen"
    CLOSE_PAREN = "CloseParen"
    OPEN_BRACE = "OpenBrace"
    CLOSE_BRACE = "CloseBrace"
    OPEN_BRACKET = "OpenBracket"
    CLOSE_BRACKET = "CloseBracket"

    EOF = "EndOfInput"

    def __str__(self) -> str:
        return self.value


KEYWORDS = MappingProxyType(
    {
        "let": TokenType.LET,
        "const": TokenType.CONST,
        "fn": TokenType.FN,
    }
)

SINGLE_CHAR_TOKENS = MappingProxyType(
    {
        "(": TokenType.OPEN_PAREN,
        ")": TokenType.CLOSE_PAREN,
        "{": TokenType.OPEN_BRACE,
        "}": TokenType.CLOSE_BRACE,
        "[": TokenType.OPEN_BRACKET,
        "]": TokenType.CLOSE_BRACKET,
        "+": TokenType.BINARY_OPERATOR,
        "-": TokenType.BINARY_OPERATOR,
        "*": TokenType.BINARY_OPERATOR,
        "/": TokenType.BINARY_OPERATOR,
        "%": TokenType.BINARY_OPERATOR,
        "=": TokenType.EQUALS,
        ";": TokenType.SEMICOLON,
        ":": TokenType.COLON,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
    }
)

ADDITIVE_OPERATORS = frozenset({"+", "-"})
MULTIPLICATIVE_OPERATORS = frozenset({"*", "/", "%"})

WHITESPACE = frozenset({" ", "\t", "\n", "\r"})

EOF_VALUE = "EOF"

__all__ = [
    "ADDITIVE_OPERATORS",
    "__version__",
    "EOF_VALUE",
    "KEYWORDS",
    "MULTIPLICATIVE_OPERATORS",
    "SINGLE_CHAR_TOKENS",
    "TokenType",
    "WHITESPACE",
]
