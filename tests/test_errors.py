#!/usr/bin/env python3
"""
Error taxonomy and diagnostic rendering.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfvm import compile_source
from bfvm.errors import (
    BFCompileError,
    BFError,
    BFInputError,
    BFRuntimeError,
    CannotMoveLeftError,
    MissingBracketError,
    make_cannot_move_left,
)


def test_taxonomies_are_disjoint():
    assert issubclass(MissingBracketError, BFCompileError)
    assert issubclass(CannotMoveLeftError, BFRuntimeError)
    assert not issubclass(BFCompileError, BFRuntimeError)
    assert not issubclass(BFInputError, BFRuntimeError)
    assert issubclass(BFInputError, BFError)


def test_compile_error_context_marks_offending_line():
    source = "+++\n++[>+\n<-\n.\n"
    with pytest.raises(MissingBracketError) as info:
        compile_source(source)
    err = info.value
    assert (err.line, err.column) == (2, 3)
    lines = err.context.split("\n")
    assert ">    2 | ++[>+" in lines
    assert "       |   ^" in lines
    assert "     1 | +++" in lines
    assert "Hint:" in str(err)
    assert str(err).startswith("CompileError: missing bracket (line 2, column 3)")


def test_context_window_is_clipped_at_file_start():
    with pytest.raises(BFCompileError) as info:
        compile_source("]\n+\n+\n+\n+")
    lines = info.value.context.split("\n")
    assert lines[0] == ">    1 | ]"
    assert lines[-1] == "     3 | +"


def test_runtime_error_message():
    err = make_cannot_move_left(cursor=0)
    assert isinstance(err, CannotMoveLeftError)
    assert err.cursor == 0
    assert str(err).startswith("RuntimeError: cannot move left of cell 0")


def main():
    print("=== Errors Test ===\n")
    test_taxonomies_are_disjoint()
    test_compile_error_context_marks_offending_line()
    test_context_window_is_clipped_at_file_start()
    test_runtime_error_message()
    print("✓ All error tests passed")


if __name__ == "__main__":
    main()
