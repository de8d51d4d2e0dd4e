from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

@dataclass
class SubtitleCue:
    """
    A single timed text entry.

    Attributes:
        start_us (int): Start time in microseconds
        stop_us (int): Stop time in microseconds, 0 when the format does not specify one
        text (str): Display text, may contain embedded line breaks and may be empty
    """
    start_us : int = 0
    stop_us : int = 0
    text : str = ""

    def __post_init__(self):
        if self.text is None:
            self.text = ""

    @property
    def start(self) -> timedelta:
        return timedelta(microseconds=self.start_us)

    @property
    def end(self) -> timedelta|None:
        """ Stop time as a timedelta, or None for an open-ended cue """
        if self.stop_us <= 0:
            return None
        return timedelta(microseconds=self.stop_us)

    @property
    def open_ended(self) -> bool:
        return self.stop_us <= 0

    def __str__(self) -> str:
        return f"{self.start_us} --> {self.stop_us}: {self.text!r}"
