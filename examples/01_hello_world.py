#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfvm.api import run_file


def main():
    path = os.path.join(os.path.dirname(__file__), "hello.bf")
    result = run_file(path)
    print(f"tape: {list(result.tape)}  cursor: {result.cursor}", file=sys.stderr)


if __name__ == "__main__":
    main()
