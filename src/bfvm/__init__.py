from .api import DEFAULT_SOURCE, RunResult, compile_file, compile_string, run_file, run_program, run_string
from .compiler import Compiler, compile_source
from .errors import (
    BFCompileError,
    BFError,
    BFInputError,
    BFRuntimeError,
    CannotMoveLeftError,
    ExcessiveBracketError,
    MissingBracketError,
)
from .program import Decrement, Increment, Input, Loop, MoveLeft, MoveRight, Output, Program, emit
from .vm import VirtualMachine

__all__ = [
    'Compiler',
    'compile_source',
    'VirtualMachine',
    'Program',
    'Loop',
    'MoveRight',
    'MoveLeft',
    'Increment',
    'Decrement',
    'Output',
    'Input',
    'emit',
    'BFError',
    'BFCompileError',
    'MissingBracketError',
    'ExcessiveBracketError',
    'BFRuntimeError',
    'CannotMoveLeftError',
    'BFInputError',
    'DEFAULT_SOURCE',
    'RunResult',
    'compile_string',
    'compile_file',
    'run_program',
    'run_string',
    'run_file',
]
