from __future__ import annotations

from typing import Any

from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.TimelineIndex import TimelineIndex

class SubtitleData:
    """
    Result of parsing a subtitle source: the cues and the file-level information around them.

    Attributes:
        cues (list[SubtitleCue]): Cues in the order they appear in the source
        header (str|None): Verbatim script header for the SSA/ASS family, otherwise None
        detected_format (SubtitleFormat): The format the source was parsed as
        metadata (dict[str, Any]): Session details, e.g. frame rates and codec name
        timeline (TimelineIndex): Seek/position index over the cues
    """
    def __init__(self, cues : list[SubtitleCue]|None = None, header : str|None = None, detected_format : SubtitleFormat = SubtitleFormat.Unknown, metadata : dict[str, Any]|None = None):
        self.cues : list[SubtitleCue] = cues or []
        self.header : str|None = header
        self.detected_format : SubtitleFormat = detected_format
        self.metadata : dict[str, Any] = metadata or {}
        self.timeline : TimelineIndex = TimelineIndex(self.cues)

    @property
    def duration(self) -> int:
        """ Total duration in microseconds """
        return self.timeline.duration

    @property
    def codec(self) -> str:
        return self.detected_format.codec

    def __len__(self) -> int:
        return len(self.cues)

    def __str__(self) -> str:
        return f"{self.detected_format.display_name} subtitles: {len(self.cues)} cues, duration {self.duration}us"
