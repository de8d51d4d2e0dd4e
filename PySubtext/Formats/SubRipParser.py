import regex

from PySubtext.Helpers.Parse import INT
from PySubtext.Helpers.Time import TimeToMicroseconds
from PySubtext.LineCursor import LineCursor
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatParser import SubtitleFormatParser

_SUBRIP_TIMING = regex.compile(INT + ':' + INT + ':' + INT + ',' + INT + r'\s*-->' + INT + ':' + INT + ':' + INT + ',' + INT)
_SUBVIEWER_TIMING = regex.compile(INT + ':' + INT + ':' + INT + r'\.' + INT + ',' + INT + ':' + INT + ':' + INT + r'\.' + INT)

class SubRipParser(SubtitleFormatParser):
    """
    Parser for SubRip and SubViewer subtitles.

    SubRip:
        n
        h1:m1:s1,d1 --> h2:m2:s2,d2
        Line1
        Line2
        [empty line]

    SubViewer (v1/v2):
        h1:m1:s1.d1,h2:m2:s2.d2
        Line1[br]Line2
        [empty line]

    Cue numbers are ignored. Every text line is followed by a line break in the cue text.
    An entry that is not terminated by an empty line before the end of input is dropped.
    """

    SUPPORTED_FORMATS = [SubtitleFormat.SubRip, SubtitleFormat.SubViewer]

    def parse_next_cue(self, cursor : LineCursor, state : ParseState, index : int) -> SubtitleCue|None:
        pattern = _SUBVIEWER_TIMING if self.format == SubtitleFormat.SubViewer else _SUBRIP_TIMING

        match = self._next_match(cursor, pattern)
        if not match:
            return None

        start = TimeToMicroseconds(*match.groups()[:4])
        stop = TimeToMicroseconds(*match.groups()[4:8])

        text = self._read_block(cursor, lambda line: len(line) == 0)
        if text is None:
            return None

        if self.format == SubtitleFormat.SubViewer:
            text = text.replace('[br]', '\n')

        return SubtitleCue(start_us=start, stop_us=stop, text=text)
