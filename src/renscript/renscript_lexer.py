"""
Line preprocessor for renscript.

The scripting language is line-oriented and indentation-sensitive, so the
front end works on logical lines rather than characters.

Classes:
    LineInfo: One surviving source line with its indentation metadata.
    LineStream: Forward-only cursor over preprocessed lines.

Functions:
    split_lines(source): Splits source text into physical lines.
    preprocess_lines(source): Splits source text into `LineInfo` records.

Behavior:
    - Splits on ``\\n`` and ``\\r\\n``.
    - Drops blank lines and lines whose first non-blank character is ``#``.
    - Records the 1-based line number, the indentation width, the content
      with leading whitespace removed, and the untouched original line.

Example:
    >>> stream = LineStream(preprocess_lines("label start:\\n    pass"))
    >>> stream.current().indent
    0
"""

import re
from dataclasses import dataclass

from renscript.renscript_constants import COMMENT_MARKER

_LINE_BREAK = re.compile(r"\r?\n")


@dataclass(frozen=True)
class LineInfo:
    """A logical source line.

    Attributes:
        line_number (int): 1-based line number in the original source.
        indent (int): Width of the leading whitespace.
        content (str): The line with leading whitespace stripped.
        raw (str): The original, untouched line.
    """

    line_number: int
    indent: int
    content: str
    raw: str


def split_lines(source: str) -> list[str]:
    """Physical lines of `source`, numbered the same way as `LineInfo`."""
    return _LINE_BREAK.split(source)


def preprocess_lines(source: str) -> list[LineInfo]:
    """Splits source text into logical lines, skipping blanks and comments.

    Args:
        source (str): Full script text.

    Returns:
        list[LineInfo]: Surviving lines in source order.
    """
    result: list[LineInfo] = []
    for index, raw in enumerate(split_lines(source)):
        content = raw.lstrip()
        if content == "" or content.startswith(COMMENT_MARKER):
            continue
        result.append(
            LineInfo(
                line_number=index + 1,
                indent=len(raw) - len(content),
                content=content,
                raw=raw,
            )
        )
    return result


class LineStream:
    """
    Forward-only cursor over preprocessed lines.

    The parser consumes lines strictly left to right; there is no way to move
    the cursor backwards.

    Attributes:
        lines (list[LineInfo]): The preprocessed lines.
        position (int): Index of the current line.
    """

    def __init__(self, lines: list[LineInfo]) -> None:
        self.lines = lines
        self.position = 0

    def current(self) -> LineInfo | None:
        """Returns the current line, or None once the stream is exhausted."""
        if self.position < len(self.lines):
            return self.lines[self.position]
        return None

    def advance(self) -> LineInfo | None:
        """Consumes the current line and returns the new current line."""
        if self.position < len(self.lines):
            self.position += 1
        return self.current()

    def end_of_stream(self) -> bool:
        return self.position >= len(self.lines)


__all__ = ["LineInfo", "LineStream", "preprocess_lines", "split_lines"]
