import regex

from PySubtext.Helpers.Parse import INT
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleError import MalformedCueError
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatParser import LineParser

_CUE_PATTERN = regex.compile(INT + ',' + INT + r',"(.+)')

class PJSParser(LineParser):
    """
    Parser for Phoenix Japanimation Society subtitles.

        n1,n2,"Line"

    Times are multiplied by ten. The character closing the quoted text is removed.
    """

    SUPPORTED_FORMATS = [SubtitleFormat.PJS]

    def parse_line(self, line : str, state : ParseState) -> SubtitleCue|None:
        match = _CUE_PATTERN.match(line)
        if not match:
            raise MalformedCueError("Not a PJS cue", line)

        start, stop, text = match.groups()
        return SubtitleCue(start_us=10 * int(start), stop_us=10 * int(stop), text=text[:-1])
