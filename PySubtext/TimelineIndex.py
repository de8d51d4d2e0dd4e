from __future__ import annotations

from collections.abc import Sequence

from PySubtext.SubtitleCue import SubtitleCue

class TimelineIndex:
    """
    Seek and position queries over a finished cue sequence.

    The duration is the stop time of the last cue, or its start time + 1 when it has no stop
    time, so that a non-empty sequence never has zero duration.

    The index also tracks a current cue, moved by SeekTime and SeekPosition, for callers that
    read the cues incrementally.
    """
    def __init__(self, cues : Sequence[SubtitleCue]):
        self.cues : Sequence[SubtitleCue] = cues
        self.duration : int = self._compute_duration(cues)
        self.current : int = 0

    def IndexAtTime(self, time_us : int) -> int|None:
        """
        Find the first cue starting at or after a time.

        Returns:
            int: Index of the cue, or None if there are no further cues
        """
        index = 0
        while index < len(self.cues) and self.cues[index].start_us < time_us:
            index += 1

        return index if index < len(self.cues) else None

    def IndexAtPosition(self, fraction : float) -> int|None:
        """
        Find the first cue starting at or after a fraction of the total duration.

        Returns:
            int: Index of the cue, or None if there are no further cues
        """
        return self.IndexAtTime(int(fraction * self.duration))

    def SeekTime(self, time_us : int) -> bool:
        """
        Move the current cue to the first one starting at or after a time.

        Returns:
            bool: False if there are no further cues
        """
        index = self.IndexAtTime(time_us)
        self.current = len(self.cues) if index is None else index
        return index is not None

    def SeekPosition(self, fraction : float) -> bool:
        return self.SeekTime(int(fraction * self.duration))

    def GetTime(self) -> int|None:
        """ Start time of the current cue, or None past the end """
        if self.current < len(self.cues):
            return self.cues[self.current].start_us
        return None

    def GetPosition(self) -> float:
        """ Position of the current cue as a fraction of the duration """
        if self.current >= len(self.cues):
            return 1.0
        if self.duration == 0:
            return 0.0
        return self.cues[self.current].start_us / self.duration

    def GetLength(self) -> int:
        return self.duration

    def __len__(self) -> int:
        return len(self.cues)

    @staticmethod
    def _compute_duration(cues : Sequence[SubtitleCue]) -> int:
        if not cues:
            return 0

        last = cues[-1]
        if last.stop_us <= 0:
            return last.start_us + 1
        return last.stop_us
