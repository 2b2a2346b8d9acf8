from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .api import DEFAULT_SOURCE, compile_string, run_program
from .errors import BFCompileError, BFInputError, BFRuntimeError

EXIT_OK = 0
EXIT_UNREADABLE_FILE = 1
EXIT_COMPILE_ERROR = 2
EXIT_RUNTIME_ERROR = 3
EXIT_INPUT_ERROR = 4


def _read_source(filename: Optional[str]) -> str:
    if filename is None:
        return DEFAULT_SOURCE
    with open(filename, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bfvm",
        description="Run a tape program (eight-symbol brainfuck dialect).",
    )
    parser.add_argument("file", nargs="?", help="Source file (default: built-in demo program)")
    args = parser.parse_args(argv)

    try:
        source = _read_source(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Cannot read file {args.file}: {e}", file=sys.stderr)
        return EXIT_UNREADABLE_FILE

    try:
        program = compile_string(source)
    except BFCompileError as e:
        print(e, file=sys.stderr)
        return EXIT_COMPILE_ERROR

    try:
        run_program(program)
    except BFRuntimeError as e:
        print(f"\n{e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except BFInputError as e:
        print(f"\n{e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
