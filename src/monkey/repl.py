"""Line-oriented front end: read a line, print its tokens, repeat."""

from __future__ import annotations

import getpass
import os
import sys
from typing import TextIO

from .lexer import Lexer

PROMPT = ">> "


def start(stdin: TextIO, stdout: TextIO) -> None:
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            # end of stream
            return
        if not line.strip():
            continue
        for tok in Lexer(line):
            print(tok, file=stdout)


def _current_user() -> str:
    return os.environ.get("USER") or os.environ.get("USERNAME") or getpass.getuser()


def main() -> int:
    print(f"Hello {_current_user()}! This is the Monkey programming language!")
    print("Feel free to type in commands")
    start(sys.stdin, sys.stdout)
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
