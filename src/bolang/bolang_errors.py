"""
Error types raised by the BoLang lexer and parser.

Classes:
    BoLangError: Base class for every front-end failure. Subclasses `SyntaxError`
        so callers that already guard parsing with `except SyntaxError` keep working.
    LexicalError: A character in the source belongs to no recognized class.
    ParseError: The token stream does not match the grammar.

All errors are terminal for the parse that raised them. Drivers catch them,
report `format()`, and move on to the next input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bolang.bolang_lexer import Token


class BoLangError(SyntaxError):
    """Base class for lexer and parser errors carrying a source location."""

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        col: int | None = None,
        source_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.col = col
        self.source_name = source_name

    def __str__(self) -> str:
        return self.message

    def location(self) -> str | None:
        parts: list[str] = []
        if self.source_name:
            parts.append(self.source_name)
        if self.line is not None:
            parts.append(str(self.line))
            if self.col is not None:
                parts.append(str(self.col))
        return ":".join(parts) if parts else None

    def format(self) -> str:
        """Render the message with its `name:line:col` suffix when known."""
        where = self.location()
        if where is None:
            return f"{type(self).__name__}: {self.message}"
        return f"{type(self).__name__}: {self.message} ({where})"


class LexicalError(BoLangError):
    """Raised when the lexer meets a character it cannot classify.

    Attributes:
        char (str): The offending character.
        code_point (int): Its Unicode code point.
    """

    def __init__(
        self,
        char: str,
        *,
        line: int | None = None,
        col: int | None = None,
        source_name: str | None = None,
    ) -> None:
        self.char = char
        self.code_point = ord(char)
        super().__init__(
            f"Unrecognized character in source: {self.code_point} {char!r}",
            line=line,
            col=col,
            source_name=source_name,
        )


class ParseError(BoLangError):
    """Raised when the parser cannot continue at the current token.

    Attributes:
        token (Token | None): The token the parser was looking at, if any.
    """

    def __init__(
        self,
        message: str,
        token: Token | None = None,
        *,
        source_name: str | None = None,
    ) -> None:
        self.token = token
        super().__init__(
            message,
            line=token.line if token is not None else None,
            col=token.col if token is not None else None,
            source_name=source_name,
        )


__all__ = ["BoLangError", "LexicalError", "ParseError"]
