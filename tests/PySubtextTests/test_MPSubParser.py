import unittest

from PySubtext.Helpers.TestCases import CueTestCase, ParseCues
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleFormat import SubtitleFormat


class TestMPSubParser(CueTestCase):
    time_lines = [
        "TITLE=Example",
        "FORMAT=TIME",
        "",
        "1.5 2.0",
        "Hello",
        "",
        "0.5 1",
        "World",
        "Second line",
        "",
    ]

    def test_RunningTotal(self):
        cues = ParseCues(self.time_lines, SubtitleFormat.MPSub)
        self.assertCuesEqual("times accumulate", [
            (1500000, 3500000, "Hello\n"),
            (4000000, 5000000, "World\nSecond line\n"),
        ], cues)

    def test_FreshSessionStartsAtZero(self):
        first = ParseCues(self.time_lines, SubtitleFormat.MPSub, ParseState())
        second = ParseCues(self.time_lines, SubtitleFormat.MPSub, ParseState())
        self.assertLoggedEqual("first cue start", first[0].start_us, second[0].start_us)
        self.assertLoggedEqual("first cue start", 1500000, second[0].start_us)

    def test_DefaultScaleIsSeconds(self):
        lines = [
            "2 1",
            "No format directive",
            "",
        ]
        cues = ParseCues(lines, SubtitleFormat.MPSub)
        self.assertCuesEqual("seconds by default", [(2000000, 3000000, "No format directive\n")], cues)

    def test_FrameFormat(self):
        lines = [
            "FORMAT=25",
            "",
            "10 20",
            "Frames",
            "",
        ]
        state = ParseState()
        cues = ParseCues(lines, SubtitleFormat.MPSub, state)
        self.assertCuesEqual("frame timings", [(100000, 300000, "Frames\n")], cues)
        self.assertLoggedEqual("declared frame rate", 25.0, state.fps_override)
        self.assertLoggedEqual("scale", 1.0, state.mpsub_scale)

    def test_FrameFormatKeepsOverride(self):
        lines = [
            "FORMAT=25",
            "",
        ]
        state = ParseState.FromFrameRates(sub_fps=30.0)
        ParseCues(lines, SubtitleFormat.MPSub, state)
        self.assertLoggedEqual("override kept", 30.0, state.fps_override)

    def test_FormatDirectiveProducesNoCue(self):
        cues = ParseCues(["FORMAT=TIME", ""], SubtitleFormat.MPSub)
        self.assertLoggedEqual("no cues", 0, len(cues))

    def test_UnterminatedFinalCue(self):
        lines = [
            "FORMAT=TIME",
            "1 1",
            "Complete",
            "",
            "1 1",
            "Incomplete",
        ]
        cues = ParseCues(lines, SubtitleFormat.MPSub)
        self.assertCuesEqual("final cue dropped", [(1000000, 2000000, "Complete\n")], cues)


if __name__ == '__main__':
    unittest.main()
