import regex

# Pattern fragments for numeric fields, allowing leading whitespace and a sign
INT = r'\s*([-+]?\d++)'
FLOAT = r'\s*((?>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?))'

_LEADING_INT_PATTERN = regex.compile(INT)
_LEADING_FLOAT_PATTERN = regex.compile(FLOAT)

def ParseLeadingInt(text : str|None, default : int = 0) -> int:
    """
    Parse an integer from the start of a string, ignoring anything after it.

    >>> ParseLeadingInt(" 12abc")
    12
    >>> ParseLeadingInt("Marked=0")
    0
    """
    if not text:
        return default

    match = _LEADING_INT_PATTERN.match(text)
    return int(match.group(1)) if match else default

def ParseLeadingFloat(text : str|None, default : float = 0.0) -> float:
    """
    Parse a decimal number from the start of a string, independent of locale.

    >>> ParseLeadingFloat("23.976 fps")
    23.976
    """
    if not text:
        return default

    match = _LEADING_FLOAT_PATTERN.match(text)
    return float(match.group(1)) if match else default

def ParseLeadingNumber(text : str, start : int = 0) -> tuple[int, int]:
    """
    Parse an optionally signed decimal integer at a position in a string.

    Returns:
        tuple[int, int]: The value (0 if there is no number) and the position after it
    """
    match = _LEADING_INT_PATTERN.match(text, start)
    if not match:
        return 0, start
    return int(match.group(1)), match.end()
