from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union


# ---------------- Instructions ----------------
@dataclass(frozen=True)
class MoveRight:
    pass  # '>'


@dataclass(frozen=True)
class MoveLeft:
    pass  # '<'


@dataclass(frozen=True)
class Increment:
    pass  # '+'


@dataclass(frozen=True)
class Decrement:
    pass  # '-'


@dataclass(frozen=True)
class Output:
    pass  # '.'


@dataclass(frozen=True)
class Input:
    pass  # ','


@dataclass(frozen=True)
class Loop:
    body: "Program"


Instruction = Union[MoveRight, MoveLeft, Increment, Decrement, Output, Input, Loop]

MOVE_RIGHT = MoveRight()
MOVE_LEFT = MoveLeft()
INCREMENT = Increment()
DECREMENT = Decrement()
OUTPUT = Output()
INPUT = Input()

ATOMS = {
    '>': MOVE_RIGHT,
    '<': MOVE_LEFT,
    '+': INCREMENT,
    '-': DECREMENT,
    '.': OUTPUT,
    ',': INPUT,
}
_SYMBOLS = {type(instr): ch for ch, instr in ATOMS.items()}


# ---------------- Program ----------------
@dataclass(frozen=True)
class Program:
    instructions: Tuple[Instruction, ...] = ()

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def depth(self) -> int:
        """Maximum loop nesting depth (0 for a loop-free program)."""
        best = 0
        stack: List[Tuple[Program, int]] = [(self, 0)]
        while stack:
            program, level = stack.pop()
            best = max(best, level)
            for instr in program.instructions:
                if isinstance(instr, Loop):
                    stack.append((instr.body, level + 1))
        return best

    def instruction_count(self) -> int:
        """Instructions in the whole tree; a loop counts as one plus its body."""
        c = 0
        stack: List[Program] = [self]
        while stack:
            program = stack.pop()
            c += len(program.instructions)
            for instr in program.instructions:
                if isinstance(instr, Loop):
                    stack.append(instr.body)
        return c


def emit(program: Program) -> str:
    out: List[str] = []
    stack: List[Iterator[Instruction]] = [iter(program)]
    while stack:
        for instr in stack[-1]:
            if isinstance(instr, Loop):
                out.append("[")
                stack.append(iter(instr.body))
                break
            out.append(_SYMBOLS[type(instr)])
        else:
            stack.pop()
            if stack:
                out.append("]")
    return "".join(out)
