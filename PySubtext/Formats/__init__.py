"""
PySubtext.Formats - Grammar-specific cue parsers

One module per subtitle grammar (or family of closely related grammars).
"""

# Explicitly import all parser modules to ensure they're registered
# This is required for pip-installed packages where dynamic discovery may fail
from . import AQTitleParser
from . import DVDSubtitleParser
from . import JacoSubParser
from . import MicroDvdParser
from . import MPL2Parser
from . import MPSubParser
from . import PJSParser
from . import SamiParser
from . import SSAParser
from . import SubRipParser
from . import VPlayerParser
