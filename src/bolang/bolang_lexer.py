"""
Lexical analyzer for the BoLang scripting language.

This module converts raw source text into a flat sequence of tokens:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: Immutable token with type, lexeme, and source location.
    Lexer: Converts a CharacterStream into a sequence of tokens.

Features:
    - Skips spaces, tabs, newlines and carriage returns
    - Single-character punctuation and operators: ( ) { } [ ] + - * / % = ; : , .
    - Maximal runs of decimal digits become NUMBER tokens
    - Maximal runs of letters become keywords (`let`, `const`, `fn`) or identifiers
    - Always closes the sequence with exactly one EOF token

Raises:
    LexicalError: If a character matches none of the classes above.

Example:
    >>> [t.type.name for t in tokenize("let x = 5;")]
    ['LET', 'IDENTIFIER', 'EQUALS', 'NUMBER', 'SEMICOLON', 'EOF']

Exports:
    - CharacterStream
    - Token
    - Lexer
    - tokenize
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from bolang.bolang_constants import (
    EOF_VALUE,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    WHITESPACE,
    TokenType,
)
from bolang.bolang_errors import LexicalError

logger = logging.getLogger(__name__)


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            EOFError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise EOFError(
                f"CharacterStreamError: Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character at `offset` without advancing, or "" when out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Attributes:
        type (TokenType): The token kind.
        value (str): The exact lexeme (``"EOF"`` for the terminal token).
        line (int): The 1-based line number where the token starts.
        col (int): The 1-based column number where the token starts.
    """

    type: TokenType
    value: str
    line: int = 0
    col: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"


class Lexer:
    """Lexical analyzer for BoLang.

    The Lexer pulls characters from a CharacterStream and yields Token objects
    one at a time through `next_token()`, or all at once through `tokens()`.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
        source_name (str | None): Name reported in error locations.
    """

    def __init__(self, stream: CharacterStream, source_name: str | None = None) -> None:
        self.stream = stream
        self.source_name = source_name

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        while not self.stream.end_of_file() and self.peek() in WHITESPACE:
            self.advance()

    def read_while(self, predicate: Callable[[str], bool]) -> str:
        """Consumes the maximal run of characters satisfying `predicate`."""
        chars: list[str] = []
        while not self.stream.end_of_file() and predicate(self.peek()):
            chars.append(self.advance())
        return "".join(chars)

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Once the stream is exhausted every call returns an EOF token.

        Raises:
            LexicalError: If the current character cannot start any token.
        """
        self.skip_whitespace()

        line, col = self.stream.line, self.stream.column
        if self.stream.end_of_file():
            return Token(TokenType.EOF, EOF_VALUE, line, col)

        ch = self.peek()

        # 1. Punctuation and operators
        if ch in SINGLE_CHAR_TOKENS:
            self.advance()
            return Token(SINGLE_CHAR_TOKENS[ch], ch, line, col)

        # 2. Number
        if ch.isdecimal():
            return Token(TokenType.NUMBER, self.read_while(str.isdecimal), line, col)

        # 3. Identifier or keyword
        if ch.isalpha():
            ident = self.read_while(str.isalpha)
            return Token(KEYWORDS.get(ident, TokenType.IDENTIFIER), ident, line, col)

        raise LexicalError(ch, line=line, col=col, source_name=self.source_name)

    def tokens(self) -> Iterator[Token]:
        """Yields every token up to and including the terminal EOF token."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type is TokenType.EOF:
                return


def tokenize(source: str, source_name: str | None = None) -> list[Token]:
    """Tokenizes `source` into a list that always ends with one EOF token.

    Raises:
        LexicalError: On the first unrecognized character.
    """
    tokens = list(Lexer(CharacterStream(source), source_name).tokens())
    logger.debug("tokenized %d characters into %d tokens", len(source), len(tokens))
    return tokens


__all__ = ["CharacterStream", "Lexer", "Token", "tokenize"]
