import unittest

from PySubtext.Formats.SubRipParser import SubRipParser
from PySubtext.Helpers.TestCases import CueTestCase, ParseCues
from PySubtext.SubtitleFormat import SubtitleFormat


class TestSubRipParser(CueTestCase):
    def test_ParseSubRip(self):
        lines = [
            "1",
            "00:00:01,000 --> 00:00:02,500",
            "Line one",
            "Line two",
            "",
            "2",
            "00:01:03,250 --> 00:01:04,000",
            "Second",
            "",
        ]
        cues = ParseCues(lines, SubtitleFormat.SubRip)
        self.assertCuesEqual("subrip cues", [
            (1000000, 2500000, "Line one\nLine two\n"),
            (63250000, 64000000, "Second\n"),
        ], cues)

    def test_CueNumbersIgnored(self):
        lines = [
            "7",
            "00:00:01,000 --> 00:00:02,000",
            "Numbered out of sequence",
            "",
            "00:00:03,000 --> 00:00:04,000",
            "Not numbered at all",
            "",
        ]
        cues = ParseCues(lines, SubtitleFormat.SubRip)
        self.assertLoggedEqual("cue count", 2, len(cues))

    def test_EmptyText(self):
        lines = [
            "1",
            "00:00:01,000 --> 00:00:02,000",
            "",
        ]
        cues = ParseCues(lines, SubtitleFormat.SubRip)
        self.assertCuesEqual("cue with no text", [(1000000, 2000000, "")], cues)

    def test_UnterminatedFinalCue(self):
        lines = [
            "1",
            "00:00:01,000 --> 00:00:02,000",
            "Complete",
            "",
            "2",
            "00:00:03,000 --> 00:00:04,000",
            "No blank line after this",
        ]
        cues = ParseCues(lines, SubtitleFormat.SubRip)
        self.assertCuesEqual("final cue dropped", [(1000000, 2000000, "Complete\n")], cues)

    def test_ParseSubViewer(self):
        lines = [
            "[INFORMATION]",
            "[TITLE]Movie",
            "[END INFORMATION]",
            "",
            "00:00:01.00,00:00:02.50",
            "Hello[br]World",
            "",
        ]
        cues = ParseCues(lines, SubtitleFormat.SubViewer)
        self.assertCuesEqual("subviewer cues", [
            (1000000, 2050000, "Hello\nWorld\n"),
        ], cues)

    def test_SubRipDoesNotReplaceBreaks(self):
        lines = [
            "1",
            "00:00:01,000 --> 00:00:02,000",
            "Hello[br]World",
            "",
        ]
        cues = ParseCues(lines, SubtitleFormat.SubRip)
        self.assertCuesEqual("break marker kept", [(1000000, 2000000, "Hello[br]World\n")], cues)

    def test_SupportedFormats(self):
        parser = SubRipParser(SubtitleFormat.SubViewer)
        self.assertLoggedEqual("parser format", SubtitleFormat.SubViewer, parser.format)
        self.assertLoggedSequenceEqual("supported formats", [SubtitleFormat.SubRip, SubtitleFormat.SubViewer], parser.get_formats())

        with self.assertRaises(ValueError):
            SubRipParser(SubtitleFormat.MicroDVD)


if __name__ == '__main__':
    unittest.main()
