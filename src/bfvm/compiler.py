from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .errors import make_compile_error
from .lexer import Symbol, scan
from .program import ATOMS, Instruction, Loop, Program

logger = logging.getLogger(__name__)


class Compiler:
    """
    Compiler from source text to a ``Program`` tree.

    Parsing Strategy:
    - One left-to-right pass over the recognized symbols
    - A '[' opens a new frame on an explicit stack of bodies
    - The matching ']' pops the frame; its body becomes a ``Loop`` in the parent
    - Every other character is skipped by the lexer

    Nesting depth is not limited by the Python call stack.

    Errors are structural only: a ']' with nothing to close, or input that
    ends while a '[' is still open. Either aborts the whole compile.
    """

    def __init__(self):
        self.source = ''

    def compile(self, source: str) -> Program:
        """
        Compile ``source`` into a top-level program.

        Args:
            source: program text; characters other than the eight symbols
                are ignored

        Returns:
            The compiled ``Program``

        Raises:
            MissingBracketError: a '[' is still open at end of input
            ExcessiveBracketError: a ']' appears at top level
        """
        self.source = source
        # (opening '[' or None for top level, instructions collected so far)
        frames: List[Tuple[Optional[Symbol], List[Instruction]]] = [(None, [])]

        for sym in scan(source):
            if sym.char == '[':
                frames.append((sym, []))
            elif sym.char == ']':
                if len(frames) == 1:
                    raise self._error('excessive_bracket', sym)
                _, body = frames.pop()
                frames[-1][1].append(Loop(Program(tuple(body))))
            else:
                frames[-1][1].append(ATOMS[sym.char])

        if len(frames) > 1:
            raise self._error('missing_bracket', frames[-1][0])

        program = Program(tuple(frames[0][1]))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "compiled %d instructions (depth %d)", program.instruction_count(), program.depth()
            )
        return program

    def _error(self, kind: str, sym: Symbol):
        return make_compile_error(
            kind=kind,
            source=self.source,
            offset=sym.offset,
            line=sym.line,
            column=sym.column,
        )


def compile_source(source: str) -> Program:
    return Compiler().compile(source)
