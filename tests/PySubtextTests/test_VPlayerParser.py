import unittest

from PySubtext.Helpers.TestCases import CueTestCase, ParseCues
from PySubtext.SubtitleFormat import SubtitleFormat


class TestVPlayerParser(CueTestCase):
    def test_ParseCues(self):
        lines = [
            "00:00:01:Hello|World",
            "00:01:00 Separated by a space",
            "1:02:03:Hours",
        ]
        cues = ParseCues(lines, SubtitleFormat.VPlayer)
        self.assertCuesEqual("vplayer cues", [
            (1000000, 0, "Hello\nWorld"),
            (60000000, 0, "Separated by a space"),
            (3723000000, 0, "Hours"),
        ], cues)

    def test_SkipsInvalidLines(self):
        lines = [
            "not a cue",
            "00:00:05:",
            "00:00:06:Valid",
        ]
        cues = ParseCues(lines, SubtitleFormat.VPlayer)
        self.assertCuesEqual("only valid cue", [(6000000, 0, "Valid")], cues)


if __name__ == '__main__':
    unittest.main()
