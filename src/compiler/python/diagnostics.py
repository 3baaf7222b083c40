"""Diagnostic records produced by the Dice analyzer.

Positions are zero-based. Columns are counted in UTF-16 code units, the
unit LSP clients use unless they negotiate otherwise, so a diagnostic can
be handed to an editor without re-encoding.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Severity(IntEnum):
    # Values match LSP DiagnosticSeverity
    ERROR = 1
    WARNING = 2

    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Position:
    line: int
    character: int


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position

    @classmethod
    def on_line(cls, line: int, start: int, end: int) -> Range:
        return cls(Position(line, start), Position(line, end))


@dataclass(frozen=True)
class Diagnostic:
    range: Range
    severity: Severity
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        start, end = self.range.start, self.range.end
        return (f"{start.line}:{start.character}-{end.line}:{end.character} "
                f"{self.severity.label()}: {self.message}")


# Unicode White_Space. str.strip() with no argument also drops U+001C..U+001F.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def codepoint_offset(line: str, utf16_col: int) -> int:
    """Index into *line* of the character at UTF-16 column *utf16_col*."""
    units = 0
    for index, ch in enumerate(line):
        if units >= utf16_col:
            return index
        units += char_width(ch)
    return len(line) + max(utf16_col - units, 0)


def utf16_len(text: str) -> int:
    """Length of *text* in UTF-16 code units.

    Lone surrogates (e.g. from ``surrogateescape`` decoding) count as one
    unit instead of raising.
    """
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def char_width(ch: str) -> int:
    """UTF-16 width of a single character: 2 outside the BMP, else 1."""
    return 2 if ord(ch) > 0xFFFF else 1


def split_lines(text: str) -> list[str]:
    """Split document text into lines.

    Lines end at ``\\n``; one trailing ``\\r`` is dropped from each line and a
    final newline does not open an empty last line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
