import regex

from PySubtext.Helpers.Parse import INT
from PySubtext.LineCursor import LineCursor
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatParser import SubtitleFormatParser

_MARKER_PATTERN = regex.compile(r'-->>' + INT)

class AQTitleParser(SubtitleFormatParser):
    """
    Parser for AQTitle subtitles.

        -->> n
        Line1
        Line2

    A cue runs from its marker to the next marker or the end of input. The marker value is
    used as the start time without scaling, and cues have no stop time.

    Lines before the first marker belong to the first cue. Input with no marker at all
    becomes a single cue starting at 0.
    """

    SUPPORTED_FORMATS = [SubtitleFormat.AQTitle]

    def parse_next_cue(self, cursor : LineCursor, state : ParseState, index : int) -> SubtitleCue|None:
        start : int = 0
        opened : bool = False
        text : str = ""

        while True:
            line = cursor.Next()
            if line is None:
                return None

            match = _MARKER_PATTERN.match(line)
            if match:
                if opened:
                    # The next cue begins here
                    cursor.PushBack()
                    break

                start = int(match.group(1))
                opened = True

            else:
                text += f"{line}\n"
                if cursor.at_end:
                    break

        return SubtitleCue(start_us=start, stop_us=0, text=text)
