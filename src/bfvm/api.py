from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from .compiler import compile_source
from .program import Program
from .vm import VirtualMachine

DEFAULT_SOURCE = "++++++++[>+>++++++>++++<<<-]>[>+.>.<<-]"


@dataclass(frozen=True)
class RunResult:
    program: Program
    tape: bytes
    cursor: int


def compile_string(source: str) -> Program:
    return compile_source(source)


def compile_file(path: str | Path, *, encoding: str = "utf-8") -> Program:
    p = Path(path)
    return compile_string(p.read_text(encoding=encoding))


def run_program(program: Program, *, stdin: Optional[BinaryIO] = None, stdout: Optional[BinaryIO] = None) -> RunResult:
    vm = VirtualMachine(stdin=stdin, stdout=stdout)
    vm.execute(program)
    return RunResult(program=program, tape=vm.tape, cursor=vm.cursor)


def run_string(source: str, *, stdin: Optional[BinaryIO] = None, stdout: Optional[BinaryIO] = None) -> RunResult:
    return run_program(compile_string(source), stdin=stdin, stdout=stdout)


def run_file(
    path: str | Path,
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    encoding: str = "utf-8",
) -> RunResult:
    return run_program(compile_file(path, encoding=encoding), stdin=stdin, stdout=stdout)
