import logging

import regex

from PySubtext.Helpers.Parse import INT, ParseLeadingFloat
from PySubtext.ParseState import FrameDuration, ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleError import MalformedCueError
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatParser import LineParser

_OPEN_CUE_PATTERN = regex.compile(r'\{' + INT + r'\}\{\}(.+)')
_CUE_PATTERN = regex.compile(r'\{' + INT + r'\}\{' + INT + r'\}(.+)')

class MicroDvdParser(LineParser):
    """
    Parser for MicroDVD subtitles.

        {n1}{n2}Line1|Line2|Line3...

    where n1 and n2 are video frame numbers and n2 can be empty. A cue {1}{1}23.976 declares
    the frame rate of the file and does not produce a cue.
    """

    SUPPORTED_FORMATS = [SubtitleFormat.MicroDVD]

    def parse_line(self, line : str, state : ParseState) -> SubtitleCue|None:
        match = _OPEN_CUE_PATTERN.match(line)
        if match:
            start, stop, text = int(match.group(1)), 0, match.group(2)
        else:
            match = _CUE_PATTERN.match(line)
            if not match:
                raise MalformedCueError("Not a MicroDVD cue", line)
            start, stop, text = int(match.group(1)), int(match.group(2)), match.group(3)

        if start == 1 and stop == 1:
            self._apply_frame_rate(text, state)
            return None

        return SubtitleCue(
            start_us=start * state.frame_duration,
            stop_us=stop * state.frame_duration,
            text=text.replace('|', '\n')
        )

    def _apply_frame_rate(self, text : str, state : ParseState) -> None:
        """ Use a {1}{1}fps declaration unless an fps override is in effect """
        fps = ParseLeadingFloat(text)
        if fps > 0.0 and not state.has_fps_override:
            state.frame_duration = FrameDuration(fps)
            logging.debug(f"MicroDVD frame rate declared as {fps}")
