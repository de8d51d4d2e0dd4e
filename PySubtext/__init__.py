"""
PySubtext - Text Subtitle Parsing Library

Reads text subtitle files in a dozen legacy and current grammars (SubRip, MicroDVD,
SubStation Alpha, SAMI, JacoSub and others), detecting the format automatically, and
produces an ordered list of timed cues with a seekable timeline.

Basic Usage
-----------

# Configure options (all optional)
opts = init_options(sub_fps=23.976)

# Load and parse a subtitle file, detecting its format
data = load_subtitles("movie.sub", options=opts)

for cue in data.cues:
    print(cue.start_us, cue.stop_us, cue.text)

# Parse subtitles from a string with an explicit format
data = parse_subtitles("{0}{25}Hello|World", options=init_options(sub_type="microdvd"))

# Convert to SubRip
srt_text = ComposeSrt(data.cues)
"""
from __future__ import annotations

from PySubtext.CueAssembler import CueAssembler
from PySubtext.LineCursor import LineCursor
from PySubtext.Options import Options
from PySubtext.ParseState import ParseState
from PySubtext.SettingsType import SettingType, SettingsType
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleData import SubtitleData
from PySubtext.SubtitleError import (
    EmptyInputError,
    MalformedCueError,
    SubtitleError,
    SubtitleParseError,
    UnrecognizedFormatError,
)
from PySubtext.SubtitleExport import ComposeSrt
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatProber import SubtitleFormatProber
from PySubtext.SubtitleFormatRegistry import SubtitleFormatRegistry
from PySubtext.SubtitleLoader import SubtitleLoader
from PySubtext.TimelineIndex import TimelineIndex
from PySubtext.version import __version__


def init_options(**settings: SettingType) -> Options:
    """
    Create and return an :class:`Options` instance containing settings for a parse session.

    Parameters
    ----------
    **settings : SettingType
        Keyword settings, e.g.

        sub_type = "subrip",        # or "auto" (default) to detect the format
        original_fps = 25.0,        # frame rate of the video
        sub_fps = 23.976,           # frame rate override for frame-based formats

        Options that are not specified will be assigned default values.

    Returns
    -------
    Options
        An Options instance with the specified configuration.
    """
    return Options(SettingsType(settings))

def parse_subtitles(content : str, options : Options|SettingsType|None = None) -> SubtitleData:
    """
    Parse subtitle text held in a string.

    Parameters
    ----------
    content : str
        The subtitle text.

    options : Options or SettingsType, optional
        Session settings, see :func:`init_options`.

    Returns
    -------
    SubtitleData : The parsed cues, script header and detected format.

    Raises
    ------
    EmptyInputError if there is no content, UnrecognizedFormatError if the format is not known.
    """
    loader = SubtitleLoader(options)
    return loader.parse_string(content)

def load_subtitles(filepath : str, options : Options|SettingsType|None = None) -> SubtitleData:
    """
    Load and parse a subtitle file.

    Parameters
    ----------
    filepath : str
        Path to the subtitle file.

    options : Options or SettingsType, optional
        Session settings, see :func:`init_options`.

    Returns
    -------
    SubtitleData : The parsed cues, script header and detected format.
    """
    loader = SubtitleLoader(options)
    return loader.load_file(filepath)

__all__ = [
    '__version__',
    'ComposeSrt',
    'CueAssembler',
    'EmptyInputError',
    'LineCursor',
    'MalformedCueError',
    'Options',
    'ParseState',
    'SettingsType',
    'SubtitleCue',
    'SubtitleData',
    'SubtitleError',
    'SubtitleFormat',
    'SubtitleFormatProber',
    'SubtitleFormatRegistry',
    'SubtitleLoader',
    'SubtitleParseError',
    'TimelineIndex',
    'UnrecognizedFormatError',
    'init_options',
    'load_subtitles',
    'parse_subtitles',
]
