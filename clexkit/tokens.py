"""Tokens produced by the lexer, source positions and the compiler error."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union


class TokenType(IntEnum):
    """Kinds of token the lexer produces."""

    KEYWORD = 0
    IDENTIFIER = 1
    OPERATOR = 2
    SYMBOL = 3
    NUMBER = 4
    STRING = 5
    COMMENT = 6
    NEWLINE = 7


@dataclass(frozen=True)
class Position:
    """A place in a source file."""

    line: int = 1
    col: int = 1
    filename: Optional[str] = None

    def __str__(self) -> str:
        return f"line {self.line}, column {self.col}, file {self.filename}"


class CompilerError(Exception):
    """Raised when compilation cannot continue."""

    def __init__(self, message: str, position: Optional[Position] = None) -> None:
        self.message = message.rstrip("\n")
        self.position = position
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} at {self.position}"


TokenValue = Union[str, int, None]


@dataclass
class Token:
    """A lexical token with its value and where it was found."""

    type: TokenType
    value: TokenValue = None
    pos: Position = Position()
    whitespace: bool = False
    between_brackets: Optional[str] = None

    def is_keyword(self, value: str) -> bool:
        """True if this is the keyword ``value``."""
        return self.type is TokenType.KEYWORD and self.value == value

    def is_symbol(self, value: str) -> bool:
        """True if this is the symbol character ``value``."""
        return self.type is TokenType.SYMBOL and self.value == value

    def is_operator(self, value: str) -> bool:
        """True if this is the operator ``value``."""
        return self.type is TokenType.OPERATOR and self.value == value

    def is_discardable(self) -> bool:
        """True for tokens the parser skips: newlines, comments and line continuations."""
        return (
            self.type is TokenType.NEWLINE
            or self.type is TokenType.COMMENT
            or self.is_symbol("\\")
        )