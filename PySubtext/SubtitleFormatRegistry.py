import importlib
import inspect
import pkgutil
from pathlib import Path

from PySubtext.SubtitleError import UnrecognizedFormatError
from PySubtext.SubtitleFormat import SubtitleFormat
from PySubtext.SubtitleFormatParser import LineParser, SubtitleFormatParser

class SubtitleFormatRegistry:
    """
    Manages discovery and lookup of subtitle format parsers.

    Uses lazy discovery to find all subclasses of SubtitleFormatParser in the Formats package.
    Parsers are registered for each of the formats they support.
    """
    _parsers : dict[SubtitleFormat, type[SubtitleFormatParser]] = {}
    _discovered : bool = False

    @classmethod
    def register_parser(cls, parser_class : type[SubtitleFormatParser]) -> None:
        """
        Register a parser class for its supported formats. Later registrations replace earlier ones.
        """
        for subtitle_format in parser_class.SUPPORTED_FORMATS:
            cls._parsers[subtitle_format] = parser_class

    @classmethod
    def get_parser_class(cls, subtitle_format : SubtitleFormat) -> type[SubtitleFormatParser]:
        """
        Get the parser class for the given format.
        """
        cls._ensure_discovered()
        if subtitle_format not in cls._parsers:
            raise UnrecognizedFormatError(f"No parser for subtitle format {subtitle_format.display_name}. Available formats: {cls.list_available_formats()}")
        return cls._parsers[subtitle_format]

    @classmethod
    def create_parser(cls, subtitle_format : SubtitleFormat|str) -> SubtitleFormatParser:
        """
        Instantiate a parser for the given format or format type name.
        """
        if isinstance(subtitle_format, str):
            subtitle_format = SubtitleFormat.FromName(subtitle_format)

        parser_class = cls.get_parser_class(subtitle_format)
        return parser_class(subtitle_format)

    @classmethod
    def enumerate_formats(cls) -> list[SubtitleFormat]:
        """
        List all formats that have a registered parser, in declaration order.
        """
        cls._ensure_discovered()
        return [ subtitle_format for subtitle_format in SubtitleFormat if subtitle_format in cls._parsers ]

    @classmethod
    def list_available_formats(cls) -> str:
        """
        Get a comma-separated string of the type names of all supported formats.
        """
        formats = cls.enumerate_formats()
        return "None" if not formats else ", ".join(subtitle_format.type_name for subtitle_format in formats)

    @classmethod
    def disable_autodiscovery(cls) -> None:
        """ Disable automatic discovery of subtitle parsers (for testing) """
        cls.clear()
        cls._discovered = True

    @classmethod
    def enable_autodiscovery(cls) -> None:
        """ Enable automatic discovery of subtitle parsers (for testing) """
        cls._discovered = False

    @classmethod
    def discover(cls) -> None:
        """
        Discover and register all subtitle parsers in the Formats package.
        """
        package_path = Path(__file__).parent / "Formats"
        for _, module_name, _ in pkgutil.iter_modules([str(package_path)]):
            module = importlib.import_module(f"PySubtext.Formats.{module_name}")
            for _, obj in inspect.getmembers(module, inspect.isclass):
                if issubclass(obj, SubtitleFormatParser) and obj not in (SubtitleFormatParser, LineParser):
                    cls.register_parser(obj)
        cls._discovered = True

    @classmethod
    def clear(cls) -> None:
        """
        Clear all registered parsers
        """
        cls._parsers.clear()
        cls._discovered = False

    @classmethod
    def _ensure_discovered(cls) -> None:
        if not cls._discovered:
            cls.discover()
