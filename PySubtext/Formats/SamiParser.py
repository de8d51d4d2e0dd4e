import regex

from PySubtext.Helpers.Parse import ParseLeadingNumber
from PySubtext.LineCursor import LineCursor
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatParser import SubtitleFormatParser

# Maximum cue text size. Longer text is silently truncated.
SAMI_TEXT_LIMIT = 8192

_START_TAG = regex.compile(r'Start=', regex.IGNORECASE)
_BREAK_TAG = regex.compile(r'<br', regex.IGNORECASE)

class SamiParser(SubtitleFormatParser):
    """
    Parser for SAMI subtitles.

    SAMI is scanned as a character stream rather than line by line: each cue begins at a
    Start= attribute, its text follows the next <P ...> tag and runs until the next tag
    holding a Start=, which can be on the same line.
    Tags are dropped except <br>, which becomes a line break; &nbsp; and tabs become spaces.
    """

    SUPPORTED_FORMATS = [SubtitleFormat.SAMI]

    def parse_next_cue(self, cursor : LineCursor, state : ParseState, index : int) -> SubtitleCue|None:
        current = None
        if state.sami_column is not None:
            line = cursor.Next()
            if line is not None:
                current = (line, state.sami_column)
            state.sami_column = None

        found = self._search(cursor, current, "Start=")
        if not found:
            return None

        line, pos = found
        start_ms, pos = ParseLeadingNumber(line, pos)

        found = self._search(cursor, (line, pos), "<P")
        if found:
            found = self._search(cursor, found, ">")
        if not found:
            return None

        text = self._read_text(cursor, state, *found)

        return SubtitleCue(start_us=start_ms * 1000, stop_us=0, text=text)

    def _read_text(self, cursor : LineCursor, state : ParseState, line : str|None, pos : int) -> str:
        """
        Collect cue text until a tag holding the next Start= (which is left for the next cue) or the end of input
        """
        text : list[str] = []

        while True:
            while line is not None and pos >= len(line):
                line, pos = cursor.Next(), 0

            if line is None:
                break

            char = None
            if line[pos] == '<':
                if _BREAK_TAG.match(line, pos):
                    char = '\n'
                elif self._tag_has_start(line, pos):
                    # The next cue resumes from this tag, which may share a line with this cue
                    state.sami_column = pos
                    cursor.PushBack()
                    break

                found = self._search(cursor, (line, pos), ">")
                line, pos = found if found else (None, 0)

            elif line.startswith('&nbsp;', pos):
                char = ' '
                pos += 6

            elif line[pos] == '\t':
                char = ' '
                pos += 1

            else:
                char = line[pos]
                pos += 1

            if char and len(text) < SAMI_TEXT_LIMIT - 1:
                text.append(char)

        return ''.join(text)

    def _search(self, cursor : LineCursor, current : tuple[str, int]|None, needle : str) -> tuple[str, int]|None:
        """
        Case-insensitive search for a string, first in the rest of the current line and then in
        the following lines.

        Returns:
            tuple[str, int]: The line containing the string and the position just after it, or None
        """
        pattern = regex.compile(regex.escape(needle), regex.IGNORECASE)

        if current:
            line, pos = current
            match = pattern.search(line, pos)
            if match:
                return line, match.end()

        while (line := cursor.Next()) is not None:
            match = pattern.search(line)
            if match:
                return line, match.end()

        return None

    def _tag_has_start(self, line : str, pos : int) -> bool:
        """ Check whether the tag opening at pos carries a Start= attribute before it closes """
        tag_end = line.find('>', pos)
        return _START_TAG.search(line, pos, tag_end if tag_end >= 0 else len(line)) is not None
