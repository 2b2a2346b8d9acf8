from __future__ import annotations

import logging
import sys
from typing import BinaryIO, List, Optional, Tuple

from .errors import BFInputError, make_cannot_move_left
from .program import (
    Decrement,
    Increment,
    Input,
    Instruction,
    Loop,
    MoveLeft,
    MoveRight,
    Output,
    Program,
)
from .state import MachineState

logger = logging.getLogger(__name__)


class VirtualMachine:
    """
    Tree-walking executor for compiled programs.

    The tape starts as one zero cell and grows to the right on demand.
    Loops are entered by pushing a frame on an explicit control stack, so
    nesting depth is not limited by the Python call stack.
    """

    def __init__(self, stdin: Optional[BinaryIO] = None, stdout: Optional[BinaryIO] = None):
        self.state = MachineState()
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> BinaryIO:
        return self._stdin if self._stdin is not None else sys.stdin.buffer

    @property
    def stdout(self) -> BinaryIO:
        return self._stdout if self._stdout is not None else sys.stdout.buffer

    @property
    def tape(self) -> bytes:
        return bytes(self.state.tape)

    @property
    def cursor(self) -> int:
        return self.state.cursor

    def cell(self, index: int) -> int:
        return self.state.tape[index]

    def reset(self) -> None:
        self.state.reset()

    def execute(self, program: Program) -> None:
        """
        Run ``program`` against the current tape.

        Raises:
            CannotMoveLeftError: a '<' was executed at cell 0
            BFInputError: the input stream ended or failed during ','
        """
        logger.debug("execute: %d instructions", len(program))
        self._run(program)
        logger.debug(
            "execute finished: tape length %d, cursor %d", len(self.state.tape), self.state.cursor
        )

    def _run(self, program: Program) -> None:
        st = self.state
        # each frame: (enclosing instruction tuple, index of the Loop being run)
        frames: List[Tuple[Tuple[Instruction, ...], int]] = []
        body, pc = program.instructions, 0
        while True:
            if pc == len(body):
                if not frames:
                    return
                # back to the enclosing Loop, which re-reads the cell
                body, pc = frames.pop()
                continue
            instr = body[pc]
            if isinstance(instr, Loop):
                if st.current != 0:
                    frames.append((body, pc))
                    body, pc = instr.body.instructions, 0
                    continue
            elif isinstance(instr, MoveRight):
                st.cursor += 1
                if st.cursor == len(st.tape):
                    st.tape.append(0)
            elif isinstance(instr, MoveLeft):
                if st.cursor == 0:
                    raise make_cannot_move_left(cursor=st.cursor)
                st.cursor -= 1
            elif isinstance(instr, Increment):
                st.current += 1
            elif isinstance(instr, Decrement):
                st.current -= 1
            elif isinstance(instr, Output):
                self._write(st.current)
            elif isinstance(instr, Input):
                st.current = self._read()
            pc += 1

    def _write(self, value: int) -> None:
        out = self.stdout
        out.write(bytes((value,)))
        out.flush()

    def _read(self) -> int:
        try:
            data = self.stdin.read(1)
        except (OSError, ValueError) as e:
            raise BFInputError(message=f"InputError: cannot read input ({e})") from e
        if not data:
            raise BFInputError(message="InputError: cannot read input (end of stream)")
        return data[0]
