def TimeToMicroseconds(hours : int|str, minutes : int|str, seconds : int|str, milliseconds : int|str = 0) -> int:
    """
    Convert a h:m:s,ms time to microseconds.
    """
    total_ms = int(hours) * 3600 * 1000 + int(minutes) * 60 * 1000 + int(seconds) * 1000 + int(milliseconds)
    return total_ms * 1000

def CentisecondTimeToMicroseconds(hours : int|str, minutes : int|str, seconds : int|str, centiseconds : int|str) -> int:
    """
    Convert a h:m:s.cc time (hundredths of a second) to microseconds.
    """
    return TimeToMicroseconds(hours, minutes, seconds, int(centiseconds) * 10)

def FormatMicroseconds(microseconds : int) -> str:
    """
    Format a time in microseconds as h:mm:ss.mmm, for logging and display
    """
    sign = "-" if microseconds < 0 else ""
    total_ms = abs(microseconds) // 1000
    hours, remainder = divmod(total_ms, 3600 * 1000)
    minutes, remainder = divmod(remainder, 60 * 1000)
    seconds, milliseconds = divmod(remainder, 1000)
    return f"{sign}{hours}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}"
