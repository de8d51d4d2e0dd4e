from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

import regex

from PySubtext.SubtitleError import EmptyInputError

_LINE_BREAK_PATTERN = regex.compile(r'\r\n|\n|\r')

class LineCursor:
    """
    Forward iterator over decoded text lines with a single line of pushback.

    Lines are stored without their terminators. The cursor can be rewound to the start,
    which the format prober does once after scanning.
    """
    def __init__(self, lines : list[str]|None = None):
        self.lines : list[str] = lines or []
        self.position : int = 0

    @classmethod
    def Load(cls, source : str|TextIO|Iterable[str]) -> LineCursor:
        """
        Read all available lines from a string, file object or iterable of lines.

        Raises:
            EmptyInputError: If the source yields no lines
        """
        if isinstance(source, str):
            lines = SplitLines(source)
        elif hasattr(source, 'read'):
            lines = SplitLines(source.read())
        else:
            lines = [ _strip_terminator(line) for line in source ]

        if lines:
            lines[0] = lines[0].lstrip('\ufeff')

        if not lines:
            raise EmptyInputError("No lines to parse in subtitle source")

        return cls(lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.lines)

    def Next(self) -> str|None:
        """
        Return the next line and advance, or None when the input is exhausted
        """
        if self.position >= len(self.lines):
            return None

        line = self.lines[self.position]
        self.position += 1
        return line

    def PushBack(self) -> None:
        """
        Step back one line so that the last line read is returned again by Next
        """
        if self.position > 0:
            self.position -= 1

    def Rewind(self) -> None:
        self.position = 0

    def __len__(self) -> int:
        return len(self.lines)

def SplitLines(content : str) -> list[str]:
    """
    Split text into lines on any line terminator. A final terminator does not start a new line.
    """
    if not content:
        return []

    lines = _LINE_BREAK_PATTERN.split(content)
    if lines and lines[-1] == "":
        lines.pop()
    return lines

def _strip_terminator(line : str) -> str:
    return line.rstrip('\r\n')
