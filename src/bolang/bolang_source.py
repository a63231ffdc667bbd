"""
Source providers: where the parser's input text comes from.

Drivers hand the front end a `SourceProvider` rather than a path, so the same
entry point (`bolang_parser.parse_source`) serves inline strings, files, and
REPL input alike.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".bo"


class SourceProvider(Protocol):
    """Anything with a display `name` and a `read()` returning source text."""

    name: str

    def read(self) -> str: ...


class StringSource:
    def __init__(self, text: str, name: str = "<string>") -> None:
        self.text = text
        self.name = name

    def read(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"StringSource(name={self.name!r})"


class FileSource:
    """Reads UTF-8 source text from `path` each time `read()` is called.

    Raises:
        OSError: If the file cannot be opened; left to the caller to report.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.name = str(path)

    def read(self) -> str:
        logger.debug("reading source from %s", self.path)
        return self.path.read_text(encoding="utf-8")

    def __repr__(self) -> str:
        return f"FileSource(path={self.name!r})"


__all__ = ["FileSource", "SOURCE_SUFFIX", "SourceProvider", "StringSource"]
