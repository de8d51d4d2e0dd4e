from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import regex

from PySubtext.LineCursor import LineCursor
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleError import MalformedCueError
from PySubtext.SubtitleFormat import SubtitleFormat

class SubtitleFormatParser(ABC):
    """
    Abstract interface for reading cues in one subtitle grammar.

    Each call to parse_next_cue consumes as many lines as one cue needs and leaves the cursor
    positioned after them. Lines that do not fit the grammar are skipped, never reported.
    """

    SUPPORTED_FORMATS : list[SubtitleFormat] = []

    def __init__(self, subtitle_format : SubtitleFormat|None = None):
        if subtitle_format is None:
            subtitle_format = self.SUPPORTED_FORMATS[0]

        if subtitle_format not in self.SUPPORTED_FORMATS:
            raise ValueError(f"{type(self).__name__} does not support {subtitle_format.display_name}")

        self.format : SubtitleFormat = subtitle_format

    @abstractmethod
    def parse_next_cue(self, cursor : LineCursor, state : ParseState, index : int) -> SubtitleCue|None:
        """
        Read the next cue from the cursor.

        Args:
            cursor: Line cursor positioned at the next unread line
            state: Mutable state for the parse session
            index: Zero-based index of the cue being read

        Returns:
            SubtitleCue: The next cue, or None when the input is exhausted
        """
        raise NotImplementedError

    def get_formats(self) -> list[SubtitleFormat]:
        """
        Get the formats handled by this parser.
        """
        return list(self.__class__.SUPPORTED_FORMATS)

    def _next_match(self, cursor : LineCursor, pattern : regex.Pattern) -> regex.Match|None:
        """
        Read forward until a line matches the pattern, discarding lines that don't.

        Returns:
            regex.Match: The match for the first matching line, or None if the input ran out
        """
        while (line := cursor.Next()) is not None:
            match = pattern.match(line)
            if match:
                return match
        return None

    def _read_block(self, cursor : LineCursor, is_terminator) -> str|None:
        """
        Concatenate lines, each followed by a line break, until a terminating line.

        Returns:
            str: The block text, or None if the input ran out before the terminator
        """
        text = ""
        while (line := cursor.Next()) is not None:
            if is_terminator(line):
                return text
            text += f"{line}\n"
        return None

class LineParser(SubtitleFormatParser):
    """
    Base class for grammars where every cue is a single self-contained line.
    """

    def parse_next_cue(self, cursor : LineCursor, state : ParseState, index : int) -> SubtitleCue|None:
        while (line := cursor.Next()) is not None:
            try:
                cue = self.parse_line(line, state)
            except MalformedCueError as e:
                logging.debug(f"Skipping {self.format.display_name} line: {e.line!r}")
                continue

            if cue is not None:
                return cue

        return None

    @abstractmethod
    def parse_line(self, line : str, state : ParseState) -> SubtitleCue|None:
        """
        Parse a single line.

        Returns:
            SubtitleCue: The cue, or None if the line was consumed without producing one

        Raises:
            MalformedCueError: If the line does not match the grammar
        """
        raise NotImplementedError
