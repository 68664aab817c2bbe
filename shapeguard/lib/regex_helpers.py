"""
Helper for composing compiled regular expressions.
"""

import re


def regex(*parts: str | re.Pattern[str]) -> re.Pattern[str]:
    """
    Merge literal fragments and compiled patterns into one pattern.

    Literal strings are inserted as-is (they are regex source, not escaped
    text); compiled patterns contribute their `.pattern` source. The flags of
    every compiled operand are combined into the flags of the result.

    Usage:
        regex("(", re.compile(r"\\d"), "|", re.compile("[a-z]", re.I), ")+")
        # re.compile(r"(\\d|[a-z])+", re.I)
    """
    pattern = ""
    flags = 0
    for part in parts:
        if isinstance(part, re.Pattern):
            pattern += part.pattern
            flags |= part.flags
        elif isinstance(part, str):
            pattern += part
        else:
            raise TypeError(
                f"Expected str or compiled pattern, got {type(part).__name__}"
            )
    # Default str patterns carry re.UNICODE, which re.ASCII excludes
    if flags & re.ASCII:
        flags &= ~re.UNICODE
    return re.compile(pattern, flags)
