"""Greeting command: prints a (possibly shouted, possibly repeated) hello."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

_POSITIVE_INT = re.compile(r"\+?[0-9]+")
_MAX_COUNT = 2**64


class UsageError(Exception):
    """Raised when the command line cannot be understood."""

    def __init__(self, message: str, hint: bool = False) -> None:
        super().__init__(message)
        self.hint = hint


@dataclass
class HelloOptions:
    """Settings gathered from the command line."""

    name: str = "World"
    upper: bool = False
    repeat: int = 1
    show_help: bool = False


def help_text() -> str:
    """Return the usage text."""
    return (
        "Usage: hello [OPTIONS] [NAME]\n"
        "Arguments:\n"
        "  [NAME] Name to greet [default: World]\n"
        "Options:\n"
        "  --upper Convert to uppercase\n"
        "  --repeat Repeat greeting N times [default: 1]\n"
        "  -h, --help Print help"
    )


def _positive_int(text: str) -> int | None:
    if not _POSITIVE_INT.fullmatch(text):
        return None
    value = int(text)
    if value <= 0 or value >= _MAX_COUNT:
        return None
    return value


def parse_args(argv: list[str]) -> HelloOptions:
    """Parse arguments; a help flag stops parsing at once."""
    options = HelloOptions()
    args = iter(argv)
    for arg in args:
        if arg in ("-h", "--help"):
            options.show_help = True
            return options
        if arg == "--upper":
            options.upper = True
        elif arg == "--repeat":
            value = next(args, None)
            if value is None:
                raise UsageError("Missing value for --repeat", hint=True)
            count = _positive_int(value)
            if count is None:
                raise UsageError("--repeat expects a positive integer")
            options.repeat = count
        elif arg.startswith("-"):
            raise UsageError(f"Unknown option: {arg}", hint=True)
        else:
            options.name = arg
    return options


def greet(name: str = "World", upper: bool = False, repeat: int = 1) -> list[str]:
    """Return the greeting lines."""
    message = f"Hello, {name}!"
    if upper:
        message = message.upper()
    return [message] * repeat


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except UsageError as err:
        print(err, file=sys.stderr)
        if err.hint:
            print("Try '--help' for usage", file=sys.stderr)
        return 2
    if options.show_help:
        print(help_text())
        return 0
    for line in greet(options.name, options.upper, options.repeat):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())