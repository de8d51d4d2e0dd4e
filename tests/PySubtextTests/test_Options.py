import importlib
import os
import unittest
from unittest.mock import patch

from PySubtext.Helpers.TestCases import LoggedTestCase
from PySubtext.Helpers.Tests import log_input_expected_error
from PySubtext.Options import Options
from PySubtext.SettingsType import SettingsError, SettingsType
from PySubtext.SubtitleError import UnrecognizedFormatError
from PySubtext.SubtitleFormat import SubtitleFormat


class TestOptions(LoggedTestCase):
    def test_Defaults(self):
        options = Options()
        self.assertLoggedEqual("original fps", 0.0, options.original_fps)
        self.assertLoggedIn("sub type set", 'sub_type', options)
        self.assertLoggedIn("default encoding set", 'default_encoding', options)
        self.assertLoggedIn("fallback encoding set", 'fallback_encoding', options)

    def test_Settings(self):
        options = Options({'sub_type': 'SubRip', 'sub_fps': '23.976'}, original_fps=25)
        self.assertLoggedEqual("sub type", 'SubRip', options.sub_type)
        self.assertLoggedFalse("auto detect", options.auto_detect)
        self.assertLoggedEqual("format", SubtitleFormat.SubRip, options.subtitle_format)
        self.assertLoggedEqual("sub fps", 23.976, options.sub_fps)
        self.assertLoggedEqual("original fps", 25.0, options.original_fps)

    def test_AutoDetect(self):
        options = Options(sub_type='AUTO')
        self.assertLoggedTrue("auto detect", options.auto_detect)
        self.assertLoggedEqual("no explicit format", SubtitleFormat.Unknown, options.subtitle_format)

    def test_NoneValuesIgnored(self):
        options = Options(sub_type='mpl2')
        options = Options(options, sub_type=None)
        self.assertLoggedEqual("sub type kept", 'mpl2', options.sub_type)

    def test_UnknownFormat(self):
        options = Options(sub_type='webvtt')
        with self.assertRaises(UnrecognizedFormatError) as e:
            _ = options.subtitle_format
        log_input_expected_error('webvtt', UnrecognizedFormatError, e.exception)

    def test_InvalidValue(self):
        options = Options(sub_fps='fast')
        with self.assertRaises(SettingsError) as e:
            _ = options.sub_fps
        log_input_expected_error('fast', SettingsError, e.exception)

    def test_InvalidEnvironmentValue(self):
        options_module = importlib.import_module('PySubtext.Options')
        try:
            with patch.dict(os.environ, {'SUB_FPS': 'fast'}):
                options_module = importlib.reload(options_module)

            options = options_module.Options()
            with self.assertRaises(SettingsError) as e:
                _ = options.sub_fps
            log_input_expected_error('SUB_FPS=fast', SettingsError, e.exception)
        finally:
            importlib.reload(options_module)


class TestSettingsType(LoggedTestCase):
    def test_TypedGetters(self):
        settings = SettingsType({
            'flag': 'true',
            'count': '12',
            'rate': 25,
            'name': 3,
        })
        self.assertLoggedTrue("bool from string", settings.get_bool('flag'))
        self.assertLoggedEqual("int from string", 12, settings.get_int('count'))
        self.assertLoggedEqual("float from int", 25.0, settings.get_float('rate'))
        self.assertLoggedEqual("str from int", "3", settings.get_str('name'))
        self.assertLoggedIsNone("missing value", settings.get_float('missing'))

    def test_InvalidConversions(self):
        settings = SettingsType({'flag': 'maybe', 'count': 'many'})
        with self.assertRaises(SettingsError):
            settings.get_bool('flag')
        with self.assertRaises(SettingsError):
            settings.get_int('count')


if __name__ == '__main__':
    unittest.main()
