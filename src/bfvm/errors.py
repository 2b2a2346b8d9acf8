from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = max(1, min(line_no_1, len(lines)))
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx and column > 0:
            out.append(f"       | {' ' * (column - 1)}^")
    return "\n".join(out)


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'missing_bracket':
        return 'Every "[" needs a matching "]" later in the program.'
    if kind == 'excessive_bracket':
        return 'This "]" closes nothing. Remove it or add a "[" before it.'
    if kind == 'cannot_move_left':
        return 'The tape starts at cell 0 and only grows to the right.'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BFCompileError(BFError):
    kind: str
    offset: int
    line: int
    column: int
    context: str


class MissingBracketError(BFCompileError):
    pass


class ExcessiveBracketError(BFCompileError):
    pass


@dataclass
class BFRuntimeError(BFError):
    kind: str
    cursor: int


class CannotMoveLeftError(BFRuntimeError):
    pass


class BFInputError(BFError):
    """Input stream closed or unreadable. Not recoverable."""


_COMPILE_ERRORS = {
    'missing_bracket': (MissingBracketError, 'missing bracket'),
    'excessive_bracket': (ExcessiveBracketError, 'excessive bracket'),
}


def make_compile_error(*, kind: str, source: str, offset: int, line: int, column: int) -> BFCompileError:
    cls, label = _COMPILE_ERRORS[kind]
    lines = source.split('\n')
    ctx = _build_context(lines, line, column)
    hint = _hint_for(kind)
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=f"CompileError: {label} (line {line}, column {column})\n{ctx}{hint_block}",
        kind=kind,
        offset=offset,
        line=line,
        column=column,
        context=ctx,
    )


def make_cannot_move_left(*, cursor: int = 0) -> CannotMoveLeftError:
    hint = _hint_for('cannot_move_left')
    return CannotMoveLeftError(
        message=f"RuntimeError: cannot move left of cell {cursor}\nHint: {hint}",
        kind='cannot_move_left',
        cursor=cursor,
    )
