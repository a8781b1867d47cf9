"""Position utilities for language file sources.

Converts character offsets to 0-based row/column positions for error
reporting. Positions are a pure function of the source and the offset, so
callers never thread row/column state through the parser.

Line Ending Support:
    - LF (Unix, \\n): one line break
    - CRLF (Windows, \\r\\n): one line break (never counted twice)
    - CR (Classic Mac, \\r): one line break
    Mixed line endings in one file are counted consistently.
"""

from lngkit.diagnostics import SourcePosition

__all__ = ["column_offset", "line_offset", "source_position"]


def _check_pos(source: str, pos: int) -> int:
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    return min(pos, len(source))  # Clamp to source length


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from character offset.

    Args:
        source: Complete source text
        pos: Character offset in source

    Returns:
        0-based line number

    Example:
        >>> line_offset("a\\r\\nb\\rc\\nd", 7)
        3
        >>> line_offset("a\\r\\nb", 2)  # between CR and LF
        1
    """
    pos = _check_pos(source, pos)
    crlf = source.count("\r\n", 0, pos)
    cr = source.count("\r", 0, pos)
    lf = source.count("\n", 0, pos)
    # Every CRLF is seen once by each of the CR and LF counts.
    return cr + lf - crlf


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from character offset.

    Args:
        source: Complete source text
        pos: Character offset in source

    Returns:
        0-based column number (characters since the last CR or LF)

    Example:
        >>> column_offset("hello\\r\\nworld", 10)
        3
    """
    pos = _check_pos(source, pos)
    line_start = max(source.rfind("\n", 0, pos), source.rfind("\r", 0, pos))
    if line_start == -1:
        return pos
    return pos - line_start - 1


def source_position(source: str, pos: int) -> SourcePosition:
    """Get row and column of a character offset as one value."""
    return SourcePosition(row=line_offset(source, pos), col=column_offset(source, pos))
