from __future__ import annotations

import os
from collections.abc import Mapping

from PySubtext.SettingsType import SettingType, SettingsType
from PySubtext.SubtitleFormat import SubtitleFormat

default_settings : dict[str, SettingType] = {
    'sub_type': os.getenv('SUB_TYPE', 'auto'),
    'original_fps': 0.0,
    'sub_fps': os.getenv('SUB_FPS', 0.0),
    'default_encoding': os.getenv('DEFAULT_ENCODING', 'utf-8'),
    'fallback_encoding': os.getenv('FALLBACK_ENCODING', 'iso-8859-1'),
}

class Options(SettingsType):
    """
    Settings for a parse session, with defaults for anything not specified.

    sub_type: format type name (e.g. 'subrip', 'ssa2-4') or 'auto' to detect it
    original_fps: declared frame rate of the video, used if >= 1.0
    sub_fps: frame rate override, used if >= 1.0, takes precedence over original_fps
    default_encoding/fallback_encoding: encodings tried when loading files
    """
    def __init__(self, settings : Mapping[str, SettingType]|None = None, **kwargs : SettingType):
        super().__init__(default_settings)

        if settings:
            self.update(settings)

        if kwargs:
            self.update(kwargs)

    @property
    def sub_type(self) -> str:
        return self.get_str('sub_type') or 'auto'

    @property
    def auto_detect(self) -> bool:
        return self.sub_type.strip().lower() == 'auto'

    @property
    def subtitle_format(self) -> SubtitleFormat:
        """ The explicitly selected format, or Unknown when the format should be detected """
        if self.auto_detect:
            return SubtitleFormat.Unknown
        return SubtitleFormat.FromName(self.sub_type)

    @property
    def original_fps(self) -> float:
        return self.get_float('original_fps') or 0.0

    @property
    def sub_fps(self) -> float:
        return self.get_float('sub_fps') or 0.0

    @property
    def default_encoding(self) -> str:
        return self.get_str('default_encoding') or 'utf-8'

    @property
    def fallback_encoding(self) -> str:
        return self.get_str('fallback_encoding') or 'iso-8859-1'
