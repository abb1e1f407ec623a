"""Length of the longest line in a text."""

from __future__ import annotations


def longest_line(contents: str | bytes) -> int:
    """Return the length of the longest line, not counting newline characters.

    A final line without a trailing newline is counted too.
    """
    separator = b"\n" if isinstance(contents, (bytes, bytearray)) else "\n"
    return max(map(len, contents.split(separator)), default=0)