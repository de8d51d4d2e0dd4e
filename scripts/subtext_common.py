import os
import logging

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

from PySubtext import init_options
from PySubtext.Options import Options
from PySubtext.SubtitleFormatRegistry import SubtitleFormatRegistry

@dataclass
class LoggerOptions():
    file_handler: logging.FileHandler|None
    log_path: str|None

def InitLogger(logfilename: str, debug: bool = False) -> LoggerOptions:
    """ Initialise the logger, with a file handler if LOG_DIR is set, and return the path to the log file """
    log_dir = os.getenv('LOG_DIR')
    log_path = os.path.join(log_dir, f"{logfilename}.log") if log_dir else None
    file_handler = None

    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'INFO').upper()
        logging_level = getattr(logging, level_name, logging.INFO)

    # Create console logger
    try:
        logging.basicConfig(format='%(levelname)s: %(message)s', encoding='utf-8', level=logging_level)
        logging.info("Initialising log")

    except Exception as e:
        logging.basicConfig(format='%(levelname)s: %(message)s', level=logging_level)
        logging.info("Unable to write to utf-8 log, falling back to default encoding")

    if debug:
        logging.debug("Debug logging enabled")

    if log_dir and log_path:
        try:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
            file_handler.setLevel(logging_level)
            file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
            logging.getLogger('').addHandler(file_handler)
        except Exception as e:
            logging.warning(f"Unable to create log file at {log_path}: {e}")

    return LoggerOptions(file_handler=file_handler, log_path=log_path)

def CreateArgParser(description : str) -> ArgumentParser:
    """
    Create the arg parser for the command line arguments
    """
    pre_parser = ArgumentParser(add_help=False)
    pre_parser.add_argument('--list-formats', action='store_true')
    pre_args, _ = pre_parser.parse_known_args()
    if pre_args.list_formats:
        HandleFormatListing(pre_args)

    parser = ArgumentParser(description=description)
    parser.add_argument('input', help="Path to subtitle file (see --list-formats for supported formats)")
    parser.add_argument('-o', '--output', help="Write the subtitles to this path in SubRip format")
    parser.add_argument('-t', '--type', type=str, default=None, help="Subtitle format to parse as, or 'auto' to detect it")
    parser.add_argument('--fps', type=float, default=None, help="Override the frame rate for frame-based formats")
    parser.add_argument('--original-fps', type=float, default=None, help="Frame rate of the video the subtitles belong to")
    parser.add_argument('--list-formats', action='store_true', help="List supported subtitle formats and exit")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    return parser

def HandleFormatListing(args: Namespace) -> None:
    """Print supported subtitle formats and exit if requested."""
    if getattr(args, "list_formats", False):
        formats = SubtitleFormatRegistry.list_available_formats()
        if formats:
            print(f"Supported subtitle formats: {formats}")
        else:
            print("No subtitle formats available.")
        raise SystemExit(0)

def CreateOptions(args: Namespace) -> Options:
    """ Create options from the command line arguments """
    settings = {
        'sub_type': args.type,
        'sub_fps': args.fps,
        'original_fps': args.original_fps,
    }

    return init_options(**settings)
