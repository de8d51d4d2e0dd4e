import unittest
from datetime import timedelta

import srt # type: ignore

from PySubtext.Helpers.TestCases import LoggedTestCase
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleExport import ComposeSrt


class TestSubtitleExport(LoggedTestCase):
    def test_ComposeSrt(self):
        cues = [
            SubtitleCue(1000000, 2500000, "Line one\nLine two\n"),
            SubtitleCue(3000000, 4000000, "Second"),
        ]
        result = ComposeSrt(cues)
        items = list(srt.parse(result))

        self.assertLoggedEqual("item count", 2, len(items))
        self.assertLoggedEqual("first index", 1, items[0].index)
        self.assertLoggedEqual("first start", timedelta(seconds=1), items[0].start)
        self.assertLoggedEqual("first end", timedelta(seconds=2.5), items[0].end)
        self.assertLoggedEqual("first content", "Line one\nLine two", items[0].content)
        self.assertLoggedEqual("second content", "Second", items[1].content)

    def test_OpenEndedCues(self):
        cues = [
            SubtitleCue(1000000, 0, "Open"),
            SubtitleCue(3000000, 0, "Last"),
        ]
        items = list(srt.parse(ComposeSrt(cues)))

        self.assertLoggedEqual("ends at next cue", timedelta(seconds=3), items[0].end)
        self.assertLoggedEqual("last cue gets default duration", timedelta(seconds=4), items[1].end)

    def test_EmptyCuesSkipped(self):
        cues = [
            SubtitleCue(1000000, 2000000, ""),
            SubtitleCue(3000000, 4000000, "Kept"),
        ]
        with self.assertLogs(level='WARNING'):
            items = list(srt.parse(ComposeSrt(cues)))

        self.assertLoggedEqual("item count", 1, len(items))
        self.assertLoggedEqual("renumbered", 1, items[0].index)
        self.assertLoggedEqual("content", "Kept", items[0].content)

    def test_NoCues(self):
        self.assertLoggedEqual("empty output", "", ComposeSrt([]))


if __name__ == '__main__':
    unittest.main()
