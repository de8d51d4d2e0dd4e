import logging

import regex

from PySubtext.Helpers.Parse import INT
from PySubtext.LineCursor import LineCursor
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatParser import SubtitleFormatParser

_TIME_CUE_PATTERN = regex.compile(
    INT + ':' + INT + ':' + INT + r'\.' + INT + INT + ':' + INT + ':' + INT + r'\.' + INT + r'\s*+(.+)'
)
_FRAME_CUE_PATTERN = regex.compile(r'@' + INT + r'\s*@' + INT + r'\s*+(.+)')
_DIRECTIVE_NAME_PATTERN = regex.compile(r'#[A-Za-z]+')
_SHIFT_PATTERN = regex.compile(r'\s*([-+]?)(\d+)(?::(\d+))?(?::(\d+))?(?:\.(\d+))?')
_RESOLUTION_PATTERN = regex.compile(INT)

# A leading directive field: a bracketed directive or an upper case directive code
_CUE_DIRECTIVE_PATTERN = regex.compile(r'^[ \t]*(?:\[[^\]]*\]|[A-Z][A-Z0-9]*)[ \t]+(?=\S)')

class JacoSubParser(SubtitleFormatParser):
    """
    Parser for JacoSub scripts.

        h1:m1:s1.f1 h2:m2:s2.f2 [directive] text
        @f1 @f2 [directive] text
        #S[HIFT] [-]h:m:s.f
        #T[IMERES] n

    Frame values are divided by the time resolution (30 by default) after applying the time
    shift. Both are set by directive lines and stay in effect for the rest of the session.
    """

    SUPPORTED_FORMATS = [SubtitleFormat.JacoSub]

    def parse_next_cue(self, cursor : LineCursor, state : ParseState, index : int) -> SubtitleCue|None:
        while True:
            line = cursor.Next()
            if line is None:
                return None

            match = _TIME_CUE_PATTERN.match(line)
            if match:
                values = [ int(value) for value in match.groups()[:8] ]
                start = self._time_to_us(*values[:4], state=state)
                stop = self._time_to_us(*values[4:], state=state)
                text = match.group(9)
                break

            match = _FRAME_CUE_PATTERN.match(line)
            if match:
                start = self._frames_to_us(int(match.group(1)), state)
                stop = self._frames_to_us(int(match.group(2)), state)
                text = match.group(3)
                break

            if line.startswith('#'):
                self._apply_directive(line, state)

        text = _CUE_DIRECTIVE_PATTERN.sub('', text, count=1)

        text = self._strip_control_codes(text, cursor, state)
        if text is None:
            return None

        return SubtitleCue(start_us=start, stop_us=stop, text=text)

    def _time_to_us(self, hours : int, minutes : int, seconds : int, frames : int, state : ParseState) -> int:
        total_seconds = hours * 3600 + minutes * 60 + seconds
        return int((total_seconds + (frames + state.jacosub_shift) / state.jacosub_resolution) * 1000000)

    def _frames_to_us(self, frames : int, state : ParseState) -> int:
        return int((frames + state.jacosub_shift) / state.jacosub_resolution * 1000000)

    def _apply_directive(self, line : str, state : ParseState) -> None:
        """
        Handle the #SHIFT and #TIMERES directives. Other directives are ignored.
        """
        name = _DIRECTIVE_NAME_PATTERN.match(line)
        if not name:
            return

        kind = line[1].upper()
        arguments = line[name.end():]

        if kind == 'S':
            match = _SHIFT_PATTERN.match(arguments)
            if not match:
                return

            sign, *fields, frames = match.groups()
            values = [ int(value) for value in fields if value is not None ]
            hours, minutes, seconds = ([0, 0] + values)[-3:]

            shift = (hours * 3600 + minutes * 60 + seconds) * state.jacosub_resolution + int(frames or 0)
            state.jacosub_shift = -shift if sign == '-' else shift
            logging.debug(f"JacoSub time shift set to {state.jacosub_shift} frames")

        elif kind == 'T':
            match = _RESOLUTION_PATTERN.match(arguments)
            if match and int(match.group(1)) > 0:
                state.jacosub_resolution = int(match.group(1))
                logging.debug(f"JacoSub time resolution set to {state.jacosub_resolution}")

    def _strip_control_codes(self, text : str, cursor : LineCursor, state : ParseState) -> str|None:
        """
        Remove comments and formatting codes from cue text.

        {...} encloses a comment, ~ is a hard space and runs of blanks collapse to one space.
        \\n is a line break, \\C and \\F take one argument character and \\B, \\I, \\U, \\D, \\N
        are dropped. A backslash at the end of the line continues the cue on the next line.

        Returns:
            str: The cleaned text, or None if a continuation ran past the end of input
        """
        output : list[str] = []
        comment = state.jacosub_comment
        i = 0

        while i < len(text):
            char = text[i]
            following = text[i + 1] if i + 1 < len(text) else ''

            if char == '{':
                comment += 1

            elif char == '}':
                if comment:
                    comment = 0
                    if following == ' ':
                        i += 1

            elif char == '~':
                if not comment:
                    output.append(' ')

            elif char in ' \t':
                if following not in (' ', '\t') and not comment:
                    output.append(' ')

            elif char == '\\':
                if not following:
                    continuation = cursor.Next()
                    if continuation is None:
                        state.jacosub_comment = comment
                        return None

                    text, i = continuation.lstrip(' '), 0
                    continue

                if following == 'n':
                    if not comment:
                        output.append('\n')
                    i += 1

                elif following.upper() in ('C', 'F'):
                    i += 2

                elif following in 'BbIiUuDN':
                    i += 1

                elif following in '~{\\':
                    if not comment:
                        output.append(following)
                    i += 1

                elif not comment:
                    output.append(char)

            elif not comment:
                output.append(char)

            i += 1

        state.jacosub_comment = comment
        return ''.join(output)
