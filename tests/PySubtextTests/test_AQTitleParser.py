import unittest

from PySubtext.Helpers.TestCases import CueTestCase, ParseCues
from PySubtext.SubtitleFormat import SubtitleFormat


class TestAQTitleParser(CueTestCase):
    def test_ParseCues(self):
        lines = [
            "-->> 100",
            "Line1",
            "Line2",
            "-->> 200",
            "Last",
        ]
        cues = ParseCues(lines, SubtitleFormat.AQTitle)
        self.assertCuesEqual("aqtitle cues", [
            (100, 0, "Line1\nLine2\n"),
            (200, 0, "Last\n"),
        ], cues)

    def test_EmptyCue(self):
        lines = [
            "-->> 1",
            "-->> 2",
            "Text",
        ]
        cues = ParseCues(lines, SubtitleFormat.AQTitle)
        self.assertCuesEqual("consecutive markers", [
            (1, 0, ""),
            (2, 0, "Text\n"),
        ], cues)

    def test_TextBeforeFirstMarker(self):
        lines = [
            "Preamble",
            "-->> 5",
            "Cue",
        ]
        cues = ParseCues(lines, SubtitleFormat.AQTitle)
        self.assertCuesEqual("preamble kept in first cue", [(5, 0, "Preamble\nCue\n")], cues)

    def test_NoMarkers(self):
        cues = ParseCues(["Just text", "More text"], SubtitleFormat.AQTitle)
        self.assertCuesEqual("unmarked text is one cue at zero", [(0, 0, "Just text\nMore text\n")], cues)


if __name__ == '__main__':
    unittest.main()
