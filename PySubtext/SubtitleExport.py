import logging
from collections.abc import Sequence
from datetime import timedelta

import srt # type: ignore

from PySubtext.SubtitleCue import SubtitleCue

# Display time for a final cue with no stop time
DEFAULT_OPEN_CUE_DURATION = timedelta(seconds=1)

def ComposeSrt(cues : Sequence[SubtitleCue]) -> str:
    """
    Compose cues into SubRip text.

    Cues without text are not written. Cues without a stop time end when the next cue starts,
    or one second after they start if there is no later cue.
    """
    items : list[srt.Subtitle] = []
    empty_count = 0

    for i, cue in enumerate(cues):
        if not cue.text:
            empty_count += 1
            continue

        start = cue.start
        end = cue.end
        if end is None:
            end = _open_cue_end(cues, i)

        items.append(srt.Subtitle(index=len(items) + 1, start=start, end=end, content=cue.text.rstrip("\n")))

    if empty_count:
        logging.warning(f"{empty_count} lines were empty and were not written to the output")

    return srt.compose(items, reindex=False)

def _open_cue_end(cues : Sequence[SubtitleCue], index : int) -> timedelta:
    start = cues[index].start
    for later in cues[index + 1:]:
        if later.start > start:
            return later.start
    return start + DEFAULT_OPEN_CUE_DURATION
