class SubtitleError(Exception):
    """
    Base class for errors raised by the subtitle parsing engine.

    Carries a human readable message and, optionally, the underlying error that caused it.
    """
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message : str|None = message
        self.error : Exception|None = error

    def __str__(self) -> str:
        if self.error:
            return f"{self.message} ({str(self.error)})"
        return str(self.message)

class SubtitleParseError(SubtitleError):
    """ Raised when subtitle content cannot be parsed """
    pass

class EmptyInputError(SubtitleParseError):
    """ Raised when a line source yields no lines at all """
    pass

class UnrecognizedFormatError(SubtitleParseError):
    """ Raised when the subtitle format cannot be detected or an unknown format is requested """
    pass

class MalformedCueError(SubtitleParseError):
    """
    Raised when a line does not match the grammar of the format being parsed.

    Never fatal: parsers catch it, discard the line and carry on scanning for the next cue.
    """
    def __init__(self, message : str|None = None, line : str|None = None):
        super().__init__(message)
        self.line : str|None = line
