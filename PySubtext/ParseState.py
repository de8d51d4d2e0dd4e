from __future__ import annotations

import logging

DEFAULT_FRAME_DURATION = 40000      # microseconds per frame at 25 fps
DEFAULT_JACOSUB_RESOLUTION = 30     # JacoSub frames per second
DEFAULT_MPSUB_SCALE = 100.0         # MPSub timings in seconds

class ParseState:
    """
    Mutable context for a single parse session.

    Holds the running state that some grammars carry from one cue to the next. A new instance
    is created for every session and is never shared, so repeated or concurrent sessions
    cannot interfere with each other.

    Attributes:
        frame_duration (int): Active frame duration in microseconds (MicroDVD)
        fps_override (float|None): Explicit frames-per-second override, if any
        header (str): Verbatim non-dialogue script text (SSA/ASS family)
        cue_index (int): Index of the next cue to be produced (used as ReadOrder for SSA/ASS)
        mpsub_scale (float): MPSub timing scale set by the FORMAT= directive
        mpsub_total (float): MPSub cumulative time total
        jacosub_shift (int): JacoSub time shift in frames, set by #S directives
        jacosub_resolution (int): JacoSub frames per second, set by #T directives
        jacosub_comment (int): JacoSub comment nesting depth
        sami_column (int|None): Column of a SAMI Start= tag that begins the next cue on a line already read
    """
    def __init__(self, frame_duration : int = DEFAULT_FRAME_DURATION, fps_override : float|None = None):
        self.frame_duration : int = frame_duration
        self.fps_override : float|None = fps_override
        self.header : str = ""
        self.cue_index : int = 0
        self.mpsub_scale : float = DEFAULT_MPSUB_SCALE
        self.mpsub_total : float = 0.0
        self.jacosub_shift : int = 0
        self.jacosub_resolution : int = DEFAULT_JACOSUB_RESOLUTION
        self.jacosub_comment : int = 0
        self.sami_column : int|None = None

    @classmethod
    def FromFrameRates(cls, original_fps : float|None = None, sub_fps : float|None = None) -> ParseState:
        """
        Create a session state from the declared source frame rate and an optional override.
        Either rate is only used if it is at least 1.0, and the override takes precedence.
        """
        frame_duration = DEFAULT_FRAME_DURATION
        fps_override = None

        if original_fps and original_fps >= 1.0:
            frame_duration = FrameDuration(original_fps)
            logging.debug(f"Movie fps: {original_fps}")

        if sub_fps and sub_fps >= 1.0:
            frame_duration = FrameDuration(sub_fps)
            fps_override = sub_fps
            logging.debug(f"Override subtitle fps {sub_fps}")

        return cls(frame_duration=frame_duration, fps_override=fps_override)

    @property
    def has_fps_override(self) -> bool:
        return self.fps_override is not None and self.fps_override > 0.0

    def AppendHeader(self, line : str) -> None:
        self.header += f"{line}\n"

def FrameDuration(fps : float) -> int:
    """ Microseconds per frame for a frame rate, truncated to a whole number """
    return int(1000000 / fps)
