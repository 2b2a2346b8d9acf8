#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfvm import BFInputError
from bfvm.api import run_file


def main():
    # Type a line then press enter
    path = os.path.join(os.path.dirname(__file__), "echo_line.bf")
    try:
        run_file(path)
    except BFInputError as e:
        print(f"\n{e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
