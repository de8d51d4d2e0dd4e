import unittest

from PySubtext.Formats.MicroDvdParser import MicroDvdParser
from PySubtext.Helpers.TestCases import CueTestCase, ParseCues
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleFormat import SubtitleFormat


class TestMicroDvdParser(CueTestCase):
    def test_ParseCues(self):
        lines = [
            "{0}{25}Hello",
            "{50}{100}First line|Second line",
            "{125}{}Open ended",
        ]
        cues = ParseCues(lines, SubtitleFormat.MicroDVD)
        self.assertCuesEqual("cues at 25 fps", [
            (0, 1000000, "Hello"),
            (2000000, 4000000, "First line\nSecond line"),
            (5000000, 0, "Open ended"),
        ], cues)

    def test_FrameRateDeclaration(self):
        lines = [
            "{1}{1}23.976",
            "{100}{200}Hello",
        ]
        cues = ParseCues(lines, SubtitleFormat.MicroDVD)
        self.assertCuesEqual("declared frame rate", [
            (100 * 41708, 200 * 41708, "Hello"),
        ], cues)

    def test_FrameRateOverride(self):
        lines = [
            "{1}{1}23.976",
            "{100}{200}Hello",
        ]
        state = ParseState.FromFrameRates(original_fps=23.976, sub_fps=25.0)
        cues = ParseCues(lines, SubtitleFormat.MicroDVD, state)
        self.assertCuesEqual("override ignores declaration", [
            (4000000, 8000000, "Hello"),
        ], cues)

    def test_OriginalFrameRate(self):
        state = ParseState.FromFrameRates(original_fps=50.0)
        cues = ParseCues(["{100}{150}Hello"], SubtitleFormat.MicroDVD, state)
        self.assertCuesEqual("original frame rate", [
            (2000000, 3000000, "Hello"),
        ], cues)

    def test_InvalidDeclarationProducesNoCue(self):
        cues = ParseCues(["{1}{1}not a number", "{25}{50}Hello"], SubtitleFormat.MicroDVD)
        self.assertCuesEqual("declaration skipped, default rate kept", [
            (1000000, 2000000, "Hello"),
        ], cues)

    def test_SkipsUnrecognisedLines(self):
        lines = [
            "Title: some movie",
            "",
            "{0}{25}Hello",
            "{x}{y}Broken",
            "{25}{50}World",
        ]
        cues = ParseCues(lines, SubtitleFormat.MicroDVD)
        self.assertCuesEqual("only valid cues", [
            (0, 1000000, "Hello"),
            (1000000, 2000000, "World"),
        ], cues)

    def test_ParseLine(self):
        parser = MicroDvdParser()
        state = ParseState()
        cue = parser.parse_line("{ 10}{ 20}Spaced", state)
        self.assertCueEqual("whitespace inside braces", (400000, 800000, "Spaced"), cue)


if __name__ == '__main__':
    unittest.main()
