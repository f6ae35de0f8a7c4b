"""Line reader: numbered lines from a text source, optionally capped in length."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True, slots=True)
class Line:
    """A line read from the source, with its 1-based position."""

    number: int
    text: str


class LineReader:
    """Sequential reader producing numbered lines.

    A line ends after its newline or after ``max_length`` characters, whichever
    comes first. A capped read leaves the rest of the physical line for the
    next call, which returns it as a separate line.

    Numbering starts at 1 for every reader; create a new reader per file.
    """

    def __init__(self, source: TextIO, *, max_length: int | None = None) -> None:
        """Wrap a readable text source.

        Args:
            source: Text stream positioned at the start of the content.
            max_length: Maximum characters per line, or None for no cap.

        """
        if max_length is not None and max_length < 1:
            raise ValueError(f"max_length must be positive, got {max_length}")
        self._source = source
        self._limit = -1 if max_length is None else max_length
        self.line_count = 0

    def next_line(self) -> Line | None:
        """Read the next line. Returns None at end of input."""
        text = self._source.readline(self._limit)
        if not text:
            return None
        self.line_count += 1
        return Line(number=self.line_count, text=text)

    def __iter__(self) -> Iterator[Line]:
        while (line := self.next_line()) is not None:
            yield line
