import logging

from PySubtext.LineCursor import LineCursor
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleFormatParser import SubtitleFormatParser

class CueAssembler:
    """
    Drives a format parser over a line cursor until the input is exhausted, collecting the cues.

    Cues are kept in the order the parser produces them. They are not sorted or validated:
    out of order, negative or empty cues are passed through for the caller to deal with.
    """
    def __init__(self, parser : SubtitleFormatParser, state : ParseState|None = None):
        self.parser : SubtitleFormatParser = parser
        self.state : ParseState = state or ParseState()
        self.cues : list[SubtitleCue] = []

    def Assemble(self, cursor : LineCursor) -> list[SubtitleCue]:
        """
        Read every cue from the cursor.

        Returns:
            list[SubtitleCue]: The cues in file order
        """
        while True:
            self.state.cue_index = len(self.cues)

            cue = self.parser.parse_next_cue(cursor, self.state, self.state.cue_index)
            if cue is None:
                break

            self.cues.append(cue)

        logging.debug(f"Loaded {len(self.cues)} {self.parser.format.display_name} subtitles")
        return self.cues
