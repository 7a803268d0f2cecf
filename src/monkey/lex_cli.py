"""Simple CLI to lex (or parse) a Monkey source file and print the result."""

from __future__ import annotations

import argparse
from pathlib import Path

from .lexer import tokenize
from .parser import Parser


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Lex a Monkey source file")
    ap.add_argument("path", type=Path, help="Path to Monkey source (.mk)")
    ap.add_argument(
        "--parse",
        action="store_true",
        help="Parse into statements instead of printing tokens",
    )
    args = ap.parse_args(argv)

    try:
        text = args.path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log_error(f"file not found: {args.path}")
        return 1

    if not args.parse:
        log_step("lexing")
        for t in tokenize(text):
            print(f"{t}\t(line {t.line}, col {t.col})")
        return 0

    log_step("parsing")
    parser = Parser.from_source(text)
    program = parser.parse_program()
    for stmt in program.statements:
        print(stmt)
    if parser.errors:
        for err in parser.errors:
            log_error(err)
        return 1
    return 0


def log_step(msg: str) -> None:
    print(f"[monkey] {msg}...")


def log_error(msg: str) -> None:
    print(f"[monkey:error] {msg}")


if __name__ == "__main__":
    raise SystemExit(main())
