import logging

import regex

from PySubtext.Helpers.Parse import FLOAT, ParseLeadingFloat
from PySubtext.LineCursor import LineCursor
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatParser import SubtitleFormatParser

_FORMAT_TIME_PATTERN = regex.compile(r'FORMAT=TIME')
_FORMAT_FPS_PATTERN = regex.compile(r'FORMAT=(.+)')
_TIMING_PATTERN = regex.compile(FLOAT + FLOAT)

class MPSubParser(SubtitleFormatParser):
    """
    Parser for MPlayer MPSub subtitles.

        FORMAT=TIME

        wait duration
        Line1
        Line2
        [empty line]

    Each timing line gives the pause since the end of the previous cue and the duration
    of this one, so times accumulate over the whole session. FORMAT=TIME selects timings in
    seconds; FORMAT=<fps> selects frame timings and declares the frame rate.
    """

    SUPPORTED_FORMATS = [SubtitleFormat.MPSub]

    def parse_next_cue(self, cursor : LineCursor, state : ParseState, index : int) -> SubtitleCue|None:
        while True:
            line = cursor.Next()
            if line is None:
                return None

            if _FORMAT_TIME_PATTERN.match(line):
                state.mpsub_scale = 100.0
                continue

            format_match = _FORMAT_FPS_PATTERN.match(line)
            if format_match:
                self._apply_frame_rate(format_match.group(1), state)
                continue

            timing = _TIMING_PATTERN.match(line)
            if timing:
                wait, duration = float(timing.group(1)), float(timing.group(2))
                state.mpsub_total += wait * state.mpsub_scale
                start = int(10000.0 * state.mpsub_total)
                state.mpsub_total += duration * state.mpsub_scale
                stop = int(10000.0 * state.mpsub_total)
                break

        text = self._read_block(cursor, lambda line: len(line) == 0)
        if text is None:
            return None

        return SubtitleCue(start_us=start, stop_us=stop, text=text)

    def _apply_frame_rate(self, value : str, state : ParseState) -> None:
        """ Frame based timings. The declared rate is kept unless an fps override is already set """
        fps = ParseLeadingFloat(value)
        if fps > 0.0 and not state.has_fps_override:
            state.fps_override = fps
            logging.debug(f"MPSub frame rate declared as {fps}")

        state.mpsub_scale = 1.0
