import regex

from PySubtext.Helpers.Parse import INT
from PySubtext.Helpers.Time import CentisecondTimeToMicroseconds
from PySubtext.LineCursor import LineCursor
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatParser import SubtitleFormatParser

_CUE_START_PATTERN = regex.compile(r'\{T' + INT + ':' + INT + ':' + INT + ':' + INT)

class DVDSubtitleParser(SubtitleFormatParser):
    """
    Parser for DVDSubtitle files.

        {T h1:m1:s1:c1
        Line1
        Line2
        }

    where c1 is in hundredths of a second. Cues have no stop time.
    """

    SUPPORTED_FORMATS = [SubtitleFormat.DVDSubtitle]

    def parse_next_cue(self, cursor : LineCursor, state : ParseState, index : int) -> SubtitleCue|None:
        match = self._next_match(cursor, _CUE_START_PATTERN)
        if not match:
            return None

        start = CentisecondTimeToMicroseconds(*match.groups())

        text = self._read_block(cursor, lambda line: line == '}')
        if text is None:
            return None

        return SubtitleCue(start_us=start, stop_us=0, text=text)
