import regex

from PySubtext.Helpers.Parse import INT, ParseLeadingInt
from PySubtext.Helpers.Time import CentisecondTimeToMicroseconds
from PySubtext.LineCursor import LineCursor
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatParser import SubtitleFormatParser

# Dialogue: <marked or layer>,h:m:s.cc,h:m:s.cc,<remaining fields and text>
_DIALOGUE_PATTERN = regex.compile(
    r'Dialogue:\s*([^,]{1,15}),' + INT + ':' + INT + ':' + INT + r'\.' + INT + ',' + INT + ':' + INT + ':' + INT + r'\.' + INT + r',(.+)'
)

class SSAParser(SubtitleFormatParser):
    """
    Parser for SubStation Alpha v1, v2-4 and Advanced SubStation Alpha scripts.

    SSA2-4:
        Format: Marked, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
        Dialogue: Marked=0,0:02:40.65,0:02:41.79,Wolf main,Cher,0000,0000,0000,,Et les enregistrements...

    ASS:
        Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
        Dialogue: Layer#,0:02:40.65,0:02:41.79,Wolf main,Cher,0000,0000,0000,,Et les enregistrements...

    SSA1 has one field fewer before the text.

    Cue text keeps the fields after the timings, prefixed so that it always reads
    ReadOrder, Layer, Style, Name, MarginL, MarginR, MarginV, Effect, Text.
    Every other line is appended verbatim to the session header.
    """

    SUPPORTED_FORMATS = [SubtitleFormat.ASS, SubtitleFormat.SSA2_4, SubtitleFormat.SSA1]

    def parse_next_cue(self, cursor : LineCursor, state : ParseState, index : int) -> SubtitleCue|None:
        while (line := cursor.Next()) is not None:
            match = _DIALOGUE_PATTERN.match(line)
            if not match:
                state.AppendHeader(line)
                continue

            marker = match.group(1)
            start = CentisecondTimeToMicroseconds(*match.groups()[1:5])
            stop = CentisecondTimeToMicroseconds(*match.groups()[5:9])
            fields = match.group(10)

            return SubtitleCue(start_us=start, stop_us=stop, text=self._repair_fields(fields, marker, index))

        return None

    def _repair_fields(self, fields : str, marker : str, index : int) -> str:
        if self.format == SubtitleFormat.SSA1:
            return f",{fields}"

        layer = ParseLeadingInt(marker) if self.format == SubtitleFormat.ASS else 0
        return f"{index},{layer},{fields}"
