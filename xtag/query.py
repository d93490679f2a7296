"""A small query language for filtering entries by filename and tags.

A query is a conjunction of space separated predicates, each of the form
``[-][filename=|tag=]<pattern>``; patterns may be double-quoted.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from xtag.types import ScanTag

_SPACES = " \t\n\r"


class TokenType(enum.Enum):
    STRING = enum.auto()
    EQUALS = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType = TokenType.STRING
    lexeme: str = ""
    start_index: int = 0


class Scanner:
    """Splits query text into tokens."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._cursor = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        self._skip_whitespace()
        if self._cursor >= len(self._text):
            raise StopIteration
        char = self._text[self._cursor]
        if char == "=":
            return self._take(TokenType.EQUALS, 1)
        if char == '"':
            return self._scan_quoted()
        return self._scan_string()

    def _skip_whitespace(self) -> None:
        while self._cursor < len(self._text) and self._text[self._cursor] in _SPACES:
            self._cursor += 1

    def _take(self, token_type: TokenType, length: int) -> Token:
        start = self._cursor
        self._cursor += length
        return Token(token_type, self._text[start : start + length], start)

    def _scan_quoted(self) -> Token:
        self._cursor += 1
        end = self._text.find('"', self._cursor)
        if end < 0:
            return self._take(TokenType.STRING, len(self._text) - self._cursor)
        token = self._take(TokenType.STRING, end - self._cursor)
        self._cursor += 1
        return token

    def _scan_string(self) -> Token:
        end = self._cursor + 1
        while end < len(self._text) and self._text[end] != "=" and self._text[end] not in _SPACES:
            end += 1
        return self._take(TokenType.STRING, end - self._cursor)


class Scope(enum.IntFlag):
    NONE = 0
    FILENAME = 1 << 0
    TAG = 1 << 1


def _fold(text: str) -> str:
    return "".join(c.lower() if 32 <= ord(c) < 127 else c for c in text)


def _icontains(haystack: str, needle: str) -> bool:
    if not needle:
        return False
    return _fold(needle) in _fold(haystack)


@dataclass
class Predicate:
    scope: Scope = Scope.FILENAME | Scope.TAG
    pattern: str = ""
    invert: bool = False

    def is_match(self, filename: str, tags: Iterable[ScanTag]) -> bool:
        matched = False
        if self.scope & Scope.TAG:
            matched = any(_icontains(tag.value, self.pattern) for tag in tags)
        if not matched and self.scope & Scope.FILENAME:
            matched = _icontains(filename, self.pattern)
        return not matched if self.invert else matched


@dataclass
class Expression:
    predicates: list[Predicate] = field(default_factory=list)

    def is_match(self, filename: str, tags: Iterable[ScanTag]) -> bool:
        tags = list(tags)
        return all(p.is_match(filename, tags) for p in self.predicates)


def _apply_scope(predicate: Predicate, text: str) -> None:
    if text.startswith("-"):
        predicate.invert = True
        text = text[1:]
    if text in ("f", "filename"):
        predicate.scope = Scope.FILENAME
    elif text in ("t", "tag"):
        predicate.scope = Scope.TAG


def parse(text: str) -> Expression:
    """Parse query text into an expression."""
    tokens = list(Scanner(text))
    cursor = 0

    def token_at(index: int) -> Token:
        return tokens[index] if index < len(tokens) else Token()

    expression = Expression()
    while cursor < len(tokens):
        predicate = Predicate(pattern=token_at(cursor).lexeme)
        cursor += 1
        if token_at(cursor).type is TokenType.EQUALS:
            cursor += 1
            _apply_scope(predicate, predicate.pattern)
            predicate.pattern = token_at(cursor).lexeme
            cursor += 1
        elif predicate.pattern.startswith("-"):
            predicate.invert = True
            predicate.pattern = predicate.pattern[1:]
        expression.predicates.append(predicate)
    return expression