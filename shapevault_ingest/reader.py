"""
Record reader: turns a text file into meaningful record lines.

Blank lines and comment-only lines are dropped; trailing comments are
stripped. Line numbers are the physical 1-based numbers in the file.
Bytes that are not valid UTF-8 are replaced with U+FFFD on read.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Tuple


def iter_records(lines: Iterable[str], comment_marker: str = "#") -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, text) for every non-empty, non-comment line.

    Args:
        lines: Raw lines (file object or list of strings)
        comment_marker: Start of a comment
    """
    for line_number, raw in enumerate(lines, start=1):
        text = raw.split(comment_marker, 1)[0].strip()
        if text:
            yield line_number, text


def read_records(path: Path, comment_marker: str = "#") -> List[Tuple[int, str]]:
    """Read every record line of a file."""
    with open(path, encoding="utf-8", errors="replace") as f:
        return list(iter_records(f, comment_marker))
