import logging
from collections.abc import Iterable
from typing import NamedTuple

import regex

from PySubtext.Helpers.Parse import INT
from PySubtext.LineCursor import LineCursor
from PySubtext.SubtitleFormat import SubtitleFormat

# Number of lines examined before giving up
PROBE_LINE_LIMIT = 256

class FormatSignature(NamedTuple):
    """
    A line pattern identifying a subtitle format.

    A strong signature settles the format as soon as it matches. A weak signature only
    records a tentative result and lets the scan continue, so that a later strong match can
    override it.
    """
    format : SubtitleFormat
    pattern : regex.Pattern
    strong : bool = True

    def matches(self, line : str) -> bool:
        return self.pattern.search(line) is not None

def _prefix(text : str) -> regex.Pattern:
    return regex.compile(r'^' + regex.escape(text), regex.IGNORECASE)

# Checked in order for each line, first match wins. The order matters because several
# signatures overlap, e.g. every ASS script type line is also an SSA2-4 script type line.
FORMAT_SIGNATURES : list[FormatSignature] = [
    FormatSignature(SubtitleFormat.SAMI, regex.compile(r'<SAMI>', regex.IGNORECASE)),
    FormatSignature(SubtitleFormat.MicroDVD, regex.compile(r'^\{' + INT + r'\}\{(?:' + INT + r')?\}')),
    FormatSignature(SubtitleFormat.SubRip, regex.compile(r'^' + INT + ':' + INT + ':' + INT + ',' + INT + r'\s*-->' + INT + ':' + INT + ':' + INT + ',' + INT)),
    FormatSignature(SubtitleFormat.SSA1, _prefix("!: This is a Sub Station Alpha v1")),
    FormatSignature(SubtitleFormat.ASS, _prefix("ScriptType: v4.00+")),
    FormatSignature(SubtitleFormat.SSA2_4, _prefix("ScriptType: v4.00")),
    FormatSignature(SubtitleFormat.SSA2_4, _prefix("Dialogue: Marked")),
    FormatSignature(SubtitleFormat.ASS, _prefix("Dialogue:")),
    FormatSignature(SubtitleFormat.SubViewer, regex.compile(r'\[INFORMATION\]', regex.IGNORECASE)),
    FormatSignature(SubtitleFormat.JacoSub, regex.compile(r'^(?:' + INT + ':' + INT + ':' + INT + r'\.' + INT + INT + ':' + INT + ':' + INT + r'|@' + INT + r'\s*@' + INT + r')'), strong=False),
    # VPlayer needs ':' or whitespace after h:m:s, so bare SubViewer timings (h:m:s.cc) are not claimed
    FormatSignature(SubtitleFormat.VPlayer, regex.compile(r'^' + INT + ':' + INT + ':' + INT + r'[:\s]')),
    FormatSignature(SubtitleFormat.DVDSubtitle, regex.compile(r'^\{T' + INT + ':' + INT + ':' + INT + ':' + INT)),
    FormatSignature(SubtitleFormat.MPL2, regex.compile(r'^\[' + INT + r'\]\[(?:' + INT + r')?\]')),
    FormatSignature(SubtitleFormat.MPSub, regex.compile(r'^FORMAT=(?:TIME|' + INT + ')'), strong=False),
    FormatSignature(SubtitleFormat.AQTitle, regex.compile(r'^-->>' + INT), strong=False),
    FormatSignature(SubtitleFormat.PJS, regex.compile(r'^' + INT + ',' + INT + r',"'), strong=False),
]

class SubtitleFormatProber:
    """
    Guesses the grammar of subtitle text by scanning its first lines for known signatures.
    """
    def __init__(self, signatures : list[FormatSignature]|None = None, line_limit : int = PROBE_LINE_LIMIT):
        self.signatures : list[FormatSignature] = signatures or FORMAT_SIGNATURES
        self.line_limit : int = line_limit

    def Probe(self, cursor : LineCursor) -> SubtitleFormat:
        """
        Detect the format of the lines in the cursor, then rewind it for parsing.

        Returns:
            SubtitleFormat: The detected format, or SubtitleFormat.Unknown
        """
        logging.debug("Autodetecting subtitle format")

        lines : list[str] = []
        while len(lines) < self.line_limit:
            line = cursor.Next()
            if line is None:
                break
            lines.append(line)

        cursor.Rewind()

        return self.ProbeLines(lines)

    def ProbeLines(self, lines : Iterable[str]) -> SubtitleFormat:
        """
        Detect the format from a sequence of lines. Only the first line_limit lines are examined.
        """
        detected = SubtitleFormat.Unknown

        for count, line in enumerate(lines):
            if count >= self.line_limit:
                break

            signature = self.MatchLine(line)
            if signature is None:
                continue

            detected = signature.format
            if signature.strong:
                break

        return detected

    def MatchLine(self, line : str) -> FormatSignature|None:
        """
        Find the first signature matching a line
        """
        for signature in self.signatures:
            if signature.matches(line):
                return signature
        return None
