import unittest
from collections.abc import Sequence
from typing import Any

from PySubtext.CueAssembler import CueAssembler
from PySubtext.Helpers.Tests import log_input_expected_result, log_test_name
from PySubtext.LineCursor import LineCursor
from PySubtext.ParseState import ParseState
from PySubtext.SubtitleCue import SubtitleCue
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatRegistry import SubtitleFormatRegistry

class LoggedTestCase(unittest.TestCase):
    """
    TestCase that logs the name of each test and the values compared by its assertions
    """
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)

    def assertLoggedEqual(self, description : str, expected : Any, actual : Any, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, expected, actual)
        self.assertEqual(expected, actual, description)

    def assertLoggedSequenceEqual(self, description : str, expected : Sequence, actual : Sequence, input_value : Any = None) -> None:
        log_input_expected_result(input_value if input_value is not None else description, expected, actual)
        self.assertSequenceEqual(expected, actual, description)

    def assertLoggedTrue(self, description : str, value : Any) -> None:
        log_input_expected_result(description, True, value)
        self.assertTrue(value, description)

    def assertLoggedFalse(self, description : str, value : Any) -> None:
        log_input_expected_result(description, False, value)
        self.assertFalse(value, description)

    def assertLoggedIsNone(self, description : str, value : Any) -> None:
        log_input_expected_result(description, None, value)
        self.assertIsNone(value, description)

    def assertLoggedIsNotNone(self, description : str, value : Any) -> None:
        log_input_expected_result(description, "not None", value)
        self.assertIsNotNone(value, description)

    def assertLoggedIs(self, description : str, expected : Any, actual : Any) -> None:
        log_input_expected_result(description, expected, actual)
        self.assertIs(expected, actual, description)

    def assertLoggedIsInstance(self, description : str, value : Any, expected_type : type) -> None:
        log_input_expected_result(description, expected_type.__name__, type(value).__name__)
        self.assertIsInstance(value, expected_type, description)

    def assertLoggedIn(self, description : str, member : Any, container : Any) -> None:
        log_input_expected_result(description, member, container)
        self.assertIn(member, container, description)

    def assertLoggedNotIn(self, description : str, member : Any, container : Any) -> None:
        log_input_expected_result(description, f"not {member}", container)
        self.assertNotIn(member, container, description)

    def assertLoggedGreater(self, description : str, first : Any, second : Any) -> None:
        log_input_expected_result(description, f"> {second}", first)
        self.assertGreater(first, second, description)

class CueTestCase(LoggedTestCase):
    """
    TestCase with helpers for comparing parsed cues against (start, stop, text) tuples
    """
    def assertCuesEqual(self, description : str, expected : Sequence[tuple[int, int, str]], cues : Sequence[SubtitleCue]) -> None:
        actual = [ (cue.start_us, cue.stop_us, cue.text) for cue in cues ]
        log_input_expected_result(description, expected, actual)
        self.assertSequenceEqual(list(expected), actual, description)

    def assertCueEqual(self, description : str, expected : tuple[int, int, str], cue : SubtitleCue|None) -> None:
        self.assertIsNotNone(cue, description)
        if cue is None:
            return
        actual = (cue.start_us, cue.stop_us, cue.text)
        log_input_expected_result(description, expected, actual)
        self.assertEqual(expected, actual, description)

def ParseCues(lines : list[str], subtitle_format : SubtitleFormat, state : ParseState|None = None) -> list[SubtitleCue]:
    """
    Parse a list of lines with the parser for a format, returning all of the cues.
    """
    parser = SubtitleFormatRegistry.create_parser(subtitle_format)
    assembler = CueAssembler(parser, state or ParseState())
    return assembler.Assemble(LineCursor(list(lines)))
