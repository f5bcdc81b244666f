"""Word frequency counter for text given as arguments or on standard input."""

from __future__ import annotations

import re
import sys
from collections import Counter
from dataclasses import dataclass, field
from itertools import groupby

_POSITIVE_INT = re.compile(r"\+?[0-9]+")
_MAX_COUNT = 2**64
DEFAULT_TOP = 10


class UsageError(Exception):
    """Raised when the command line cannot be understood."""

    def __init__(self, message: str, hint: bool = False) -> None:
        super().__init__(message)
        self.hint = hint


@dataclass
class WordfreqOptions:
    """Settings gathered from the command line."""

    top: int = DEFAULT_TOP
    min_length: int = 1
    ignore_case: bool = False
    text_parts: list[str] = field(default_factory=list)
    show_help: bool = False


def help_text() -> str:
    """Return the usage text."""
    return (
        "Usage: wordfreq [OPTIONS]\n"
        "Count word frequency in text\n"
        "Arguments:\n"
        "  Text to analyze (or use stdin)\n"
        "Options:\n"
        "  --top Show top N words [default: 10]\n"
        "  --min-length Ignore words shorter than N [default: 1]\n"
        "  --ignore-case Case insensitive counting\n"
        "  -h, --help"
    )


def format_number(n: int) -> str:
    """Format an integer with commas between groups of three digits."""
    return f"{n:,}"


def count_words(text: str, min_length: int = 1, ignore_case: bool = False) -> Counter:
    """Count runs of alphanumeric characters in ``text``."""
    counts: Counter = Counter()
    for is_word, chars in groupby(text, key=str.isalnum):
        if not is_word:
            continue
        word = "".join(chars)
        if ignore_case:
            word = word.lower()
        if len(word) < min_length:
            continue
        counts[word] += 1
    return counts


def rank_words(counts: dict[str, int]) -> list[tuple[str, int]]:
    """Order words by descending count, then alphabetically."""
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def report(counts: dict[str, int], top_n: int = DEFAULT_TOP) -> list[str]:
    """Return the report lines: a header and the top ``top_n`` words."""
    header = "Word frequency:" if top_n == DEFAULT_TOP else f"Top {top_n} words:"
    lines = [header]
    lines.extend(f"{word}: {format_number(n)}" for word, n in rank_words(counts)[:top_n])
    return lines


def _positive_option(args, name: str) -> int:
    value = next(args, None)
    if value is None:
        raise UsageError(f"Missing value for {name}")
    if _POSITIVE_INT.fullmatch(value):
        number = int(value)
        if 0 < number < _MAX_COUNT:
            return number
    raise UsageError(f"{name} expects a positive integer")


def parse_args(argv: list[str]) -> WordfreqOptions:
    """Parse arguments; a help flag stops parsing at once."""
    options = WordfreqOptions()
    args = iter(argv)
    for arg in args:
        if arg in ("-h", "--help"):
            options.show_help = True
            return options
        if arg == "--ignore-case":
            options.ignore_case = True
        elif arg == "--top":
            options.top = _positive_option(args, "--top")
        elif arg == "--min-length":
            options.min_length = _positive_option(args, "--min-length")
        elif arg.startswith("-"):
            raise UsageError(f"Unknown option: {arg}", hint=True)
        else:
            options.text_parts.append(arg)
    return options


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

    if options.text_parts:
        text = " ".join(options.text_parts)
    else:
        try:
            text = sys.stdin.read()
        except (OSError, UnicodeDecodeError) as err:
            print(f"Failed to read stdin: {err}", file=sys.stderr)
            return 1

    counts = count_words(text, options.min_length, options.ignore_case)
    for line in report(counts, options.top):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())