"""Line-oriented text helpers: CSV rows, token splitting and console pauses."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Iterator
from itertools import takewhile
from os import PathLike
from typing import TextIO

MAX_LINE_LENGTH = 1024
MAX_FIELDS = 300

_QUOTE = '"'


def parse_csv_line(line: str, separator: str = ",") -> list[str]:
    """Split one CSV line into fields.

    A field may be wrapped in double quotes, in which case it may contain the
    separator.  Everything from the first newline on is ignored.  A run of two
    separators after an unquoted field counts as one, and at most
    ``MAX_FIELDS - 1`` fields are returned.
    """
    buf: list[str | None] = list(line.split("\n", 1)[0])
    size = len(buf)
    starts: list[int] = []
    ptr = 0

    while ptr < size and len(starts) < MAX_FIELDS - 1:
        if buf[ptr] == _QUOTE:
            ptr += 1
            start = ptr
            while ptr < size and not (
                buf[ptr] == _QUOTE and ptr + 1 < size and buf[ptr + 1] == separator
            ):
                ptr += 1
        else:
            start = ptr
            while ptr < size and buf[ptr] != separator:
                ptr += 1

        if ptr < size:
            buf[ptr] = None
            ptr += 1
            if ptr < size and buf[ptr] == separator:
                ptr += 1

        if ptr >= 2 and buf[ptr - 2] == _QUOTE:
            buf[ptr - 2] = None

        starts.append(start)

    return [
        "".join(takewhile(lambda char: char is not None, buf[start:]))  # type: ignore[arg-type]
        for start in starts
    ]


def read_csv(path: str | PathLike[str], separator: str = ",") -> Iterator[list[str]]:
    """Yield the fields of every line of a CSV file.

    Lines longer than ``MAX_LINE_LENGTH - 1`` characters are read in pieces,
    each piece parsed as a line of its own.
    """
    chunk = MAX_LINE_LENGTH - 1
    with open(path, encoding="utf-8", newline="\n") as handle:
        for raw in handle:
            for offset in range(0, len(raw), chunk):
                yield parse_csv_line(raw[offset:offset + chunk], separator)


def split_string(text: str, delimiters: str) -> list[str]:
    """Split on any of the delimiter characters, dropping empty tokens.

    Leading and trailing spaces are removed from each token.
    """
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delimiters:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return [token.strip(" ") for token in tokens]


def clear_screen() -> None:
    """Clear the terminal."""
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


def wait_for_key(stream: TextIO | None = None) -> None:
    """Prompt and wait for a key press, consuming a pending newline first."""
    source = sys.stdin if stream is None else stream
    print("Presione una tecla para continuar...", flush=True)
    source.read(1)
    source.read(1)