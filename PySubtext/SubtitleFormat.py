from __future__ import annotations

from enum import Enum

from PySubtext.SubtitleError import UnrecognizedFormatError

class SubtitleFormat(Enum):
    """
    The text subtitle grammars understood by the engine.

    Values are the type names accepted by the `sub_type` option.
    """
    Unknown = "unknown"
    MicroDVD = "microdvd"
    SubRip = "subrip"
    SubViewer = "subviewer"
    SSA1 = "ssa1"
    SSA2_4 = "ssa2-4"
    ASS = "ass"
    VPlayer = "vplayer"
    SAMI = "sami"
    DVDSubtitle = "dvdsubtitle"
    MPL2 = "mpl2"
    AQTitle = "aqt"
    PJS = "pjs"
    MPSub = "mpsub"
    JacoSub = "jacosub"

    @property
    def type_name(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _display_names[self]

    @property
    def is_ssa(self) -> bool:
        """ True for the SubStation Alpha family, whose cues are forwarded with a script header """
        return self in (SubtitleFormat.SSA1, SubtitleFormat.SSA2_4, SubtitleFormat.ASS)

    @property
    def codec(self) -> str:
        return 'ssa' if self.is_ssa else 'subt'

    @classmethod
    def FromName(cls, name : str) -> SubtitleFormat:
        """
        Resolve a format from its type name (case-insensitive), e.g. 'subrip' or 'ssa2-4'
        """
        key = (name or "").strip().lower()
        for subtitle_format in cls:
            if subtitle_format is not cls.Unknown and subtitle_format.value == key:
                return subtitle_format

        available = ", ".join(cls.TypeNames())
        raise UnrecognizedFormatError(f"Unknown subtitle format: '{name}'. Available formats: {available}")

    @classmethod
    def TypeNames(cls) -> list[str]:
        return [ subtitle_format.value for subtitle_format in cls if subtitle_format is not cls.Unknown ]

_display_names : dict[SubtitleFormat, str] = {
    SubtitleFormat.Unknown: "Unknown",
    SubtitleFormat.MicroDVD: "MicroDVD",
    SubtitleFormat.SubRip: "SubRIP",
    SubtitleFormat.SubViewer: "SubViewer",
    SubtitleFormat.SSA1: "SSA-1",
    SubtitleFormat.SSA2_4: "SSA-2/3/4",
    SubtitleFormat.ASS: "SSA/ASS",
    SubtitleFormat.VPlayer: "VPlayer",
    SubtitleFormat.SAMI: "SAMI",
    SubtitleFormat.DVDSubtitle: "DVDSubtitle",
    SubtitleFormat.MPL2: "MPL2",
    SubtitleFormat.AQTitle: "AQTitle",
    SubtitleFormat.PJS: "PhoenixSub",
    SubtitleFormat.MPSub: "MPSub",
    SubtitleFormat.JacoSub: "JacoSub",
}
