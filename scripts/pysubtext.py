import os
import logging
import sys

base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, base_path)

from check_imports import check_required_imports
check_required_imports(['PySubtext', 'regex', 'srt'])

from scripts.subtext_common import (
    InitLogger,
    CreateArgParser,
    CreateOptions,
)

from PySubtext import ComposeSrt, load_subtitles
from PySubtext.Helpers.Time import FormatMicroseconds
from PySubtext.Options import Options

parser = CreateArgParser("Parses a text subtitle file and lists or converts its cues")
args = parser.parse_args()

logger_options = InitLogger("pysubtext", args.debug)
if logger_options.log_path:
    logging.debug(f"Logging to {logger_options.log_path}")

try:
    options : Options = CreateOptions(args)

    data = load_subtitles(args.input, options=options)

    if args.output:
        logging.info(f"Writing {len(data.cues)} subtitles to {args.output}")
        with open(args.output, 'w', encoding='utf-8', newline='') as f:
            f.write(ComposeSrt(data.cues))
    else:
        print(f"{data.detected_format.display_name}: {len(data.cues)} cues, duration {FormatMicroseconds(data.duration)}")
        for cue in data.cues:
            stop = FormatMicroseconds(cue.stop_us) if not cue.open_ended else "..."
            print(f"{FormatMicroseconds(cue.start_us)} --> {stop}  {cue.text.rstrip()!r}")

except Exception as e:
    print("Error:", e)
    raise
