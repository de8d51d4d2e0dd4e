from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TextIO

from PySubtext.CueAssembler import CueAssembler
from PySubtext.LineCursor import LineCursor
from PySubtext.Options import Options
from PySubtext.ParseState import ParseState
from PySubtext.SettingsType import SettingsType
from PySubtext.SubtitleData import SubtitleData
from PySubtext.SubtitleError import SubtitleParseError, UnrecognizedFormatError
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatProber import SubtitleFormatProber
from PySubtext.SubtitleFormatRegistry import SubtitleFormatRegistry

class SubtitleLoader:
    """
    Runs a parse session: reads the source lines, selects the format, parses every cue and
    builds the timeline index.

    Every call starts a fresh session with its own state, so a loader can be reused.
    """
    def __init__(self, options : Options|SettingsType|None = None, prober : SubtitleFormatProber|None = None):
        self.options : Options = options if isinstance(options, Options) else Options(options)
        self.prober : SubtitleFormatProber = prober or SubtitleFormatProber()

    def load_file(self, path : str) -> SubtitleData:
        """
        Load and parse a subtitle file, retrying with the fallback encoding if the default fails.

        Raises:
            SubtitleParseError: If the file cannot be read or decoded
        """
        try:
            try:
                with open(path, 'r', encoding=self.options.default_encoding, newline='') as f:
                    return self.parse_file(f)
            except UnicodeDecodeError:
                logging.debug(f"Unable to decode {path} as {self.options.default_encoding}, trying {self.options.fallback_encoding}")
                with open(path, 'r', encoding=self.options.fallback_encoding, newline='') as f:
                    return self.parse_file(f)
        except (OSError, UnicodeDecodeError) as e:
            raise SubtitleParseError(f"Unable to read subtitle file {path}", e)

    def parse_file(self, file_obj : TextIO) -> SubtitleData:
        return self.parse_lines(file_obj)

    def parse_string(self, content : str) -> SubtitleData:
        return self.parse_lines(content)

    def parse_lines(self, source : str|TextIO|Iterable[str]) -> SubtitleData:
        """
        Parse subtitles from a string, a file object or an iterable of lines.

        Raises:
            EmptyInputError: If the source contains no lines
            UnrecognizedFormatError: If the format is unknown or cannot be detected
        """
        state = ParseState.FromFrameRates(self.options.original_fps, self.options.sub_fps)

        cursor = LineCursor.Load(source)

        subtitle_format = self._select_format(cursor)

        parser = SubtitleFormatRegistry.create_parser(subtitle_format)

        assembler = CueAssembler(parser, state)
        cues = assembler.Assemble(cursor)

        metadata = {
            'codec': subtitle_format.codec,
            'frame_duration': state.frame_duration,
            'line_count': cursor.line_count,
        }
        if state.fps_override:
            metadata['fps'] = state.fps_override

        header = state.header if subtitle_format.is_ssa else None

        data = SubtitleData(cues=cues, header=header, detected_format=subtitle_format, metadata=metadata)

        logging.info(f"Loaded {len(data.cues)} subtitles as {subtitle_format.display_name}")
        return data

    def _select_format(self, cursor : LineCursor) -> SubtitleFormat:
        """
        Use the explicitly requested format, or probe the cursor to detect one.
        """
        if not self.options.auto_detect:
            subtitle_format = self.options.subtitle_format
            logging.debug(f"Using {subtitle_format.display_name} format as requested")
            return subtitle_format

        subtitle_format = self.prober.Probe(cursor)
        if subtitle_format == SubtitleFormat.Unknown:
            logging.error("Failed to recognize subtitle type")
            raise UnrecognizedFormatError("Failed to recognize subtitle type")

        logging.debug(f"Detected {subtitle_format.display_name} format")
        return subtitle_format
