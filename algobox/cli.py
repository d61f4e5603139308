"""Command-line front end for the string and calculator tools."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from algobox.numbers import calculate
from algobox.text import (
    replace_characters,
    reverse_string,
    substring,
    truncated_concat,
)

_OPERATION_NAMES = {
    "+": "addition",
    "-": "subtraction",
    "*": "multiplication",
    "/": "division",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algobox", description="String operations and a small calculator."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    length = commands.add_parser("length", help="length of a string")
    length.add_argument("text")

    copy = commands.add_parser("copy", help="copy a word over a string")
    copy.add_argument("text")
    copy.add_argument("word")

    concat = commands.add_parser("concat", help="concatenate two strings")
    concat.add_argument("text")
    concat.add_argument("suffix")

    reverse = commands.add_parser("reverse", help="reverse a string")
    reverse.add_argument("text")

    replace = commands.add_parser("replace", help="replace characters in a string")
    replace.add_argument("text")
    replace.add_argument("old")
    replace.add_argument("new")

    sub = commands.add_parser("substring", help="take part of a string")
    sub.add_argument("text")
    sub.add_argument("position", type=int, help="1-based start position")
    sub.add_argument("length", type=int)

    calc = commands.add_parser("calc", help="combine two integers")
    calc.add_argument("a", type=int)
    calc.add_argument("operator")
    calc.add_argument("b", type=int)
    return parser


def _run_calc(a: int, operator: str, b: int) -> str:
    name = _OPERATION_NAMES.get(operator)
    if name is None:
        raise ValueError("The entered operation cannot be performed.")
    return f"The {name} of {a} and {b} is {calculate(a, operator, b)}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command and return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "length":
            message = f"The length of the string '{args.text}' is {len(args.text)}"
        elif args.command == "copy":
            message = f"After copying '{args.word}'"
        elif args.command == "concat":
            result = truncated_concat(args.text, args.suffix)
            message = f"The concatenated string is '{result}'"
        elif args.command == "reverse":
            message = f"The reversed string is {reverse_string(args.text)}"
        elif args.command == "replace":
            result = replace_characters(args.text, args.old, args.new)
            message = f"The replaced string is --> {result}"
        elif args.command == "substring":
            result = substring(args.text, args.position, args.length)
            message = f"The sub string is {result}"
        else:
            message = _run_calc(args.a, args.operator, args.b)
    except (ValueError, ZeroDivisionError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(message)
    return 0


if __name__ == "__main__":
    sys.exit(main())