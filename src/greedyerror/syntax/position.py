"""Position utilities for rendering error frames.

Converts absolute offsets into (line, column) pairs against a list of
source lines. Lines and columns here are 0-based; callers that show
editor-style positions add one.

Offsets that do not come from the source being rendered never raise:
negative offsets clamp to the start and offsets past the last line clamp
to the end of the last line.
"""

from greedyerror.constants import LINE_DELIMITER

__all__ = ["locate", "split_lines"]


def split_lines(source: str) -> list[str]:
    """Split source into lines on LF.

    A trailing newline does not produce a final empty line, and empty
    input has no lines at all.

    Example:
        >>> split_lines("abc\\ndef")
        ['abc', 'def']
        >>> split_lines("abc\\n")
        ['abc']
        >>> split_lines("\\n")
        ['']
        >>> split_lines("")
        []
    """
    if not source:
        return []
    lines = source.split(LINE_DELIMITER)
    if source.endswith(LINE_DELIMITER):
        lines.pop()
    return lines


def locate(lines: list[str], offset: int) -> tuple[int, int]:
    """Find the 0-based line index and column of an absolute offset.

    Walks the lines, subtracting each line's length plus its newline, until
    the remaining offset fits within a line. An offset equal to a line's
    length stays on that line (end-of-line column).

    Args:
        lines: Output of split_lines(); must not be empty
        offset: Absolute offset from the start of the source

    Returns:
        (line, column) tuple, both 0-based

    Example:
        >>> locate(["abc012:::"], 6)
        (0, 6)
        >>> locate(["ab", "cd"], 2)  # End of first line
        (0, 2)
        >>> locate(["ab", "cd"], 3)
        (1, 0)
    """
    remaining = max(offset, 0)
    for index, line in enumerate(lines):
        if remaining <= len(line):
            return (index, remaining)
        remaining -= len(line) + 1
    last = len(lines) - 1
    return (last, len(lines[last]))
