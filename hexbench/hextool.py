"""Read and write binary files in hexadecimal."""

from __future__ import annotations

import argparse
import os
import re
import sys
from pathlib import Path

_U64_LIMIT = 2**64
_HEX_DIGITS = re.compile(r"\+?[0-9a-fA-F]+")
_DEC_DIGITS = re.compile(r"\+?[0-9]+")


def _parse_unsigned(text: str, base: int, limit: int) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    pattern = _HEX_DIGITS if base == 16 else _DEC_DIGITS
    if not pattern.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text, base)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    return value


def parse_offset(text: str) -> int:
    """Parse a decimal or ``0x``-prefixed hexadecimal offset."""
    if text.startswith(("0x", "0X")):
        try:
            return _parse_unsigned(text[2:], 16, _U64_LIMIT)
        except ValueError as err:
            raise ValueError(f"Invalid hex offset: {err}") from None
    try:
        return _parse_unsigned(text, 10, _U64_LIMIT)
    except ValueError as err:
        raise ValueError(f"Invalid decimal offset: {err}") from None


def hex_to_bytes(text: str) -> bytes:
    """Decode a string of hex digit pairs, ignoring surrounding whitespace."""
    text = text.strip()
    if len(text) % 2:
        raise ValueError("Hex string must have even length")
    out = bytearray()
    for pos in range(0, len(text), 2):
        try:
            out.append(_parse_unsigned(text[pos:pos + 2], 16, 256))
        except ValueError as err:
            raise ValueError(f"Invalid hex at position {pos}: {err}") from None
    return bytes(out)


def printable(data: bytes) -> str:
    """Render bytes as ASCII, replacing non-printable bytes with '.'."""
    return "".join(chr(b) if 0x20 <= b <= 0x7E else "." for b in data)


def hex_dump(data: bytes, start_offset: int = 0) -> list[str]:
    """Format data as hex dump lines of 16 bytes each."""
    lines = []
    for index, start in enumerate(range(0, len(data), 16)):
        chunk = data[start:start + 16]
        offset = start_offset + index * 16
        cells = [f"{b:02x} " + (" " if j == 7 else "") for j, b in enumerate(chunk)]
        padding = ["   " + (" " if j == 7 else "") for j in range(len(chunk), 16)]
        lines.append(f"{offset:08x}: {''.join(cells)}{''.join(padding)} |{printable(chunk)}|")
    return lines


def read_hex(path: str | os.PathLike, offset: int = 0, size: int = 256) -> bytes:
    """Read up to ``size`` bytes from ``path`` starting at ``offset``."""
    with open(path, "rb") as handle:
        handle.seek(offset)
        return handle.read(size)


def write_hex(path: str | os.PathLike, hex_string: str, offset: int = 0) -> bytes:
    """Write decoded hex to ``path`` at ``offset`` without truncating; return the bytes."""
    data = hex_to_bytes(hex_string)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT, 0o666)
    with os.fdopen(fd, "wb") as handle:
        handle.seek(offset)
        handle.write(data)
    return data


def write_report(data: bytes, offset: int) -> list[str]:
    """Return the lines describing a completed write."""
    return [
        f"Writing {len(data)} bytes at offset 0x{offset:08x}",
        "  Hex:   " + "".join(f"{b:02x} " for b in data),
        "  ASCII: " + printable(data),
        "✓ Successfully written",
    ]


def _size(text: str) -> int:
    try:
        return _parse_unsigned(text, 10, _U64_LIMIT)
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err)) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hextool", description="Read and write binary files in hexadecimal"
    )
    parser.add_argument("-f", "--file", metavar="file", type=Path)
    parser.add_argument("-r", "--read", action="store_true")
    parser.add_argument("-w", "--write", metavar="hex")
    parser.add_argument("-o", "--offset", metavar="off")
    parser.add_argument("-s", "--size", metavar="n", type=_size)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _build_parser().parse_args(argv)

    if args.file is None:
        print("Error: --file is required", file=sys.stderr)
        return 1

    offset = 0
    if args.offset is not None:
        try:
            offset = parse_offset(args.offset)
        except ValueError as err:
            print(f"Error: {err}", file=sys.stderr)
            return 1

    if args.read:
        size = 256 if args.size is None else args.size
        try:
            data = read_hex(args.file, offset, size)
        except OSError as err:
            print(f"Error reading file: {err}", file=sys.stderr)
            return 1
        for line in hex_dump(data, offset):
            print(line)
    elif args.write is not None:
        try:
            data = write_hex(args.file, args.write, offset)
        except (OSError, ValueError) as err:
            print(f"Error writing file: {err}", file=sys.stderr)
            return 1
        for line in write_report(data, offset):
            print(line)
    else:
        print("Error: Either --read or --write must be specified", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())