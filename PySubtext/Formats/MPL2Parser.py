import regex

from PySubtext.Helpers.Parse import INT
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleError import MalformedCueError
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatParser import LineParser

_OPEN_CUE_PATTERN = regex.compile(r'\[' + INT + r'\]\[\]\s*+(.+)')
_CUE_PATTERN = regex.compile(r'\[' + INT + r'\]\[' + INT + r'\]\s*+(.+)')

# MPL2 times are in tenths of a second
_MPL2_UNIT = 100000

class MPL2Parser(LineParser):
    """
    Parser for MPL2 subtitles.

        [n1][n2]Line1|Line2|Line3...

    where n1 and n2 are times in tenths of a second and n2 can be empty.
    A leading / (italic marker) is removed from each line.
    """

    SUPPORTED_FORMATS = [SubtitleFormat.MPL2]

    def parse_line(self, line : str, state : ParseState) -> SubtitleCue|None:
        match = _OPEN_CUE_PATTERN.match(line)
        if match:
            start, stop, text = int(match.group(1)), 0, match.group(2)
        else:
            match = _CUE_PATTERN.match(line)
            if not match:
                raise MalformedCueError("Not an MPL2 cue", line)
            start, stop, text = int(match.group(1)), int(match.group(2)), match.group(3)

        lines = [ text_line.lstrip('/') for text_line in text.split('|') ]

        return SubtitleCue(start_us=start * _MPL2_UNIT, stop_us=stop * _MPL2_UNIT, text='\n'.join(lines))
