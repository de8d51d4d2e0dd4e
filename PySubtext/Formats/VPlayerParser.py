import regex

from PySubtext.Helpers.Parse import INT
from PySubtext.Helpers.Time import TimeToMicroseconds
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleError import MalformedCueError
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatParser import LineParser

_CUE_PATTERN = regex.compile(INT + ':' + INT + ':' + INT + r'.(.+)')

class VPlayerParser(LineParser):
    """
    Parser for VPlayer subtitles.

        h:m:s:Line1|Line2|Line3...
    or
        h:m:s Line1|Line2|Line3...

    VPlayer cues have no stop time.
    """

    SUPPORTED_FORMATS = [SubtitleFormat.VPlayer]

    def parse_line(self, line : str, state : ParseState) -> SubtitleCue|None:
        match = _CUE_PATTERN.match(line)
        if not match:
            raise MalformedCueError("Not a VPlayer cue", line)

        hours, minutes, seconds, text = match.groups()
        return SubtitleCue(
            start_us=TimeToMicroseconds(hours, minutes, seconds),
            stop_us=0,
            text=text.replace('|', '\n')
        )
