"""Character sources the lexer reads from, with position tracking and pushback."""

from __future__ import annotations

import os
from typing import List, Optional, Union

from clexkit.tokens import Position

EOF = ""


class SourceReader:
    """Reads characters from text, tracking line and column, with pushback."""

    def __init__(self, text: str, filename: Optional[str] = None) -> None:
        self._text = text
        self._index = 0
        self._pushed: List[str] = []
        self.filename = filename
        self.line = 1
        self.col = 1

    @property
    def position(self) -> Position:
        """Current position in the source."""
        return Position(self.line, self.col, self.filename)

    def next_char(self) -> str:
        """Consume and return the next character, or EOF."""
        self.col += 1
        if self._pushed:
            c = self._pushed.pop()
        elif self._index < len(self._text):
            c = self._text[self._index]
            self._index += 1
        else:
            c = EOF
        if c == "\n":
            self.line += 1
            self.col = 1
        return c

    def peek_char(self) -> str:
        """Return the next character without consuming it, or EOF."""
        if self._pushed:
            return self._pushed[-1]
        if self._index < len(self._text):
            return self._text[self._index]
        return EOF

    def push_char(self, c: str) -> None:
        """Return ``c`` to the input so it is read next; EOF is ignored."""
        if c != EOF:
            self._pushed.append(c)


def open_source(path: Union[str, "os.PathLike[str]"]) -> SourceReader:
    """Read a source file into a SourceReader; raises OSError if it cannot be read."""
    with open(path, encoding="utf-8") as fh:
        text = fh.read()
    return SourceReader(text, os.fspath(path))