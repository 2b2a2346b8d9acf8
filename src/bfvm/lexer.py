from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

CODE_CHARS = frozenset('><+-.,[]')


@dataclass(frozen=True)
class Symbol:
    char: str
    offset: int
    line: int
    column: int


def is_code_char(ch: str) -> bool:
    return ch in CODE_CHARS


def strip_comments(source: str) -> str:
    """Drop every character that is not one of the eight symbols."""
    return ''.join(c for c in source if is_code_char(c))


def scan(source: str) -> Iterator[Symbol]:
    line = 1
    column = 0
    for offset, ch in enumerate(source):
        if ch == '\n':
            line += 1
            column = 0
            continue
        column += 1
        if is_code_char(ch):
            yield Symbol(char=ch, offset=offset, line=line, column=column)
