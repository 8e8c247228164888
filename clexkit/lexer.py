"""Lexical analysis of C-like source text into tokens."""

from __future__ import annotations

import os
from typing import Iterable, List, Optional, Tuple, Union

from clexkit.source import EOF, SourceReader, open_source
from clexkit.tokens import CompilerError, Position, Token, TokenType

KEYWORDS = frozenset(
    {
        "unsigned",
        "signed",
        "char",
        "short",
        "int",
        "long",
        "float",
        "double",
        "void",
        "struct",
        "union",
        "static",
        "__ignore_typecheck",
        "return",
        "include",
        "sizeof",
        "if",
        "else",
        "while",
        "for",
        "do",
        "break",
        "continue",
        "switch",
        "case",
        "default",
        "goto",
        "typedef",
        "const",
        "extern",
        "retrict",
    }
)

VALID_OPERATORS = frozenset(
    {
        "+", "-", "*", "/", "!", "^",
        "+=", "-=", "*=", "/=",
        ">>", "<<", ">=", "<=", ">", "<",
        "||", "&&", "|", "&",
        "++", "--", "=", "!=", "==", "->",
        "(", "[", ",", ".", "...", "~", "?", "%",
    }
)

_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_OPERATOR_START = frozenset("+-*><^%!=~|&([,.?")
_SYMBOLS = frozenset("{}:;#\\)]")
_TREATED_AS_ONE = frozenset("([,.*?")
_SINGLE_OPERATORS = frozenset("+-/*=><|&^%!([,.~?")
_ESCAPES = {"n": "\n", "\\": "\\", "t": "\t", "'": "'"}


def is_keyword(word: str) -> bool:
    """True if ``word`` is a reserved keyword."""
    return word in KEYWORDS


def is_valid_operator(op: str) -> bool:
    """True if ``op`` is an operator the lexer accepts."""
    return op in VALID_OPERATORS


def _is_identifier_char(c: str) -> bool:
    return c != EOF and c.isascii() and (c.isalnum() or c == "_")


class Lexer:
    """Turns the characters of a SourceReader into a list of tokens."""

    def __init__(self, reader: SourceReader) -> None:
        self._reader = reader
        self._tokens: List[Token] = []
        self._depth = 0
        self._capture: Optional[List[str]] = None
        self._captured: List[Tuple[Token, List[str]]] = []
        self._line = 1
        self._col = 1

    def tokenize(self) -> List[Token]:
        """Read every token up to the end of input; raises CompilerError on bad input."""
        self._tokens = []
        self._depth = 0
        self._capture = None
        self._captured = []
        while (token := self._read_next_token()) is not None:
            self._tokens.append(token)
        # Tokens inside parentheses see everything read until the outermost one closed.
        for token, chars in self._captured:
            token.between_brackets = "".join(chars)
        return list(self._tokens)

    # character access

    def _peek(self) -> str:
        return self._reader.peek_char()

    def _next(self) -> str:
        c = self._reader.next_char()
        if self._in_expression() and c != EOF:
            self._capture.append(c)
        self._col += 1
        if c == "\n":
            self._line += 1
            self._col = 1
        return c

    def _push(self, c: str) -> None:
        self._reader.push_char(c)

    def _take_while(self, predicate) -> str:
        chars = []
        c = self._peek()
        while c != EOF and predicate(c):
            chars.append(c)
            self._next()
            c = self._peek()
        return "".join(chars)

    def _error(self, message: str) -> CompilerError:
        return CompilerError(message, self._reader.position)

    # token construction

    def _make(self, token_type: TokenType, value=None) -> Token:
        token = Token(
            token_type,
            value,
            pos=Position(self._line, self._col, self._reader.filename),
        )
        if self._in_expression():
            self._captured.append((token, self._capture))
        return token

    def _last_token(self) -> Optional[Token]:
        return self._tokens[-1] if self._tokens else None

    def _in_expression(self) -> bool:
        return self._depth > 0

    def _new_expression(self) -> None:
        self._depth += 1
        if self._depth == 1:
            self._capture = []

    def _finish_expression(self) -> None:
        self._depth -= 1
        if self._depth < 0:
            raise self._error("closed an expression that was never opened")

    # readers

    def _read_next_token(self) -> Optional[Token]:
        while True:
            c = self._peek()
            token = self._handle_comment()
            if token is not None:
                return token
            if c == EOF:
                return None
            if c in _DIGITS:
                return self._make_number()
            if c in ("x", "b"):
                return self._make_special_number()
            if c in _OPERATOR_START:
                return self._make_operator_or_string()
            if c in _SYMBOLS:
                return self._make_symbol()
            if c == '"':
                return self._make_string('"', '"')
            if c == "'":
                return self._make_quote()
            if c in (" ", "\t"):
                last = self._last_token()
                if last is not None:
                    last.whitespace = True
                self._next()
                continue
            if c == "\n":
                self._next()
                return self._make(TokenType.NEWLINE)
            if c.isascii() and (c.isalpha() or c == "_"):
                return self._make_identifier_or_keyword()
            raise self._error("invalid token")

    def _make_number(self) -> Token:
        return self._make(TokenType.NUMBER, int(self._take_while(lambda ch: ch in _DIGITS)))

    def _make_special_number(self) -> Token:
        last = self._last_token()
        if last is None or not (last.type is TokenType.NUMBER and last.value == 0):
            return self._make_identifier_or_keyword()
        self._tokens.pop()
        if self._peek() == "x":
            self._next()
            digits = self._take_while(lambda ch: ch in _HEX_DIGITS)
            return self._make(TokenType.NUMBER, int(digits, 16) if digits else 0)
        self._next()
        digits = self._take_while(lambda ch: ch in _DIGITS)
        if any(ch not in "01" for ch in digits):
            raise self._error("invalid binary number")
        return self._make(TokenType.NUMBER, int(digits, 2) if digits else 0)

    def _make_string(self, start: str, end: str) -> Token:
        if self._next() != start:
            raise self._error(f"expected {start!r} to open a string")
        chars = []
        c = self._next()
        while c != end and c != EOF:
            if c != "\\":
                chars.append(c)
            c = self._next()
        return self._make(TokenType.STRING, "".join(chars))

    def _read_op(self) -> str:
        first = self._next()
        op = first
        single = True
        if first not in _TREATED_AS_ONE:
            following = self._peek()
            if following in _SINGLE_OPERATORS:
                op += following
                self._next()
                single = False
        if not single:
            if not is_valid_operator(op):
                self._push(op[1])
                op = first
        elif not is_valid_operator(op):
            raise self._error(f"operator {op} is not valid")
        return op

    def _make_operator_or_string(self) -> Token:
        op = self._peek()
        if op == "<":
            last = self._last_token()
            if last is not None and last.is_keyword("include"):
                return self._make_string("<", ">")
        token = self._make(TokenType.OPERATOR, self._read_op())
        if op == "(":
            self._new_expression()
        return token

    def _make_symbol(self) -> Token:
        c = self._next()
        if c == ")":
            self._finish_expression()
        return self._make(TokenType.SYMBOL, c)

    def _make_identifier_or_keyword(self) -> Token:
        word = self._take_while(_is_identifier_char)
        kind = TokenType.KEYWORD if is_keyword(word) else TokenType.IDENTIFIER
        return self._make(kind, word)

    def _handle_comment(self) -> Optional[Token]:
        if self._peek() != "/":
            return None
        self._next()
        following = self._peek()
        if following == "/":
            self._next()
            text = self._take_while(lambda ch: ch != "\n")
            return self._make(TokenType.COMMENT, text)
        if following == "*":
            self._next()
            return self._make_multiline_comment()
        self._push("/")
        return self._make_operator_or_string()

    def _make_multiline_comment(self) -> Token:
        chars = []
        while True:
            chars.append(self._take_while(lambda ch: ch != "*"))
            if self._peek() == EOF:
                raise self._error("comment was not closed")
            self._next()
            if self._peek() == "/":
                self._next()
                break
        return self._make(TokenType.COMMENT, "".join(chars))

    def _make_quote(self) -> Token:
        self._next()
        c = self._next()
        if c == "\\":
            c = _ESCAPES.get(self._next(), "\0")
        if self._next() != "'":
            raise self._error("a ' was opened but not closed with a '")
        return self._make(TokenType.NUMBER, ord(c) if c else 0)


def lex_string(text: str, filename: Optional[str] = None) -> List[Token]:
    """Tokenize ``text``."""
    return Lexer(SourceReader(text, filename)).tokenize()


def lex_file(path: Union[str, "os.PathLike[str]"]) -> List[Token]:
    """Tokenize the file at ``path``."""
    return Lexer(open_source(path)).tokenize()


def format_token_list(tokens: Iterable[Token]) -> str:
    """Render tokens one per line in the lexer's listing format."""
    lines = []
    for token in tokens:
        kind = token.type
        if kind is TokenType.IDENTIFIER:
            lines.append(f"TOKEN\tID: {token.value}")
        elif kind is TokenType.KEYWORD:
            lines.append(f"TOKEN\tKE: {token.value}")
        elif kind is TokenType.NEWLINE:
            lines.append("TOKEN\tNL ")
        elif kind is TokenType.COMMENT:
            lines.append("TOKEN\tCO: ")
        elif kind is TokenType.NUMBER:
            brackets = "(null)" if token.between_brackets is None else token.between_brackets
            lines.append(f"TOKEN\tNU: {token.value} \t PARENTESES: {brackets}")
        elif kind is TokenType.OPERATOR:
            lines.append(f"TOKEN\tOP: {token.value}")
        elif kind is TokenType.STRING:
            lines.append(f"TOKEN\tST: {token.value}")
        elif kind is TokenType.SYMBOL:
            lines.append(f"TOKEN\tSY: {token.value}")
    return "".join(line + "\n" for line in lines)