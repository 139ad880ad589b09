"""Source location tracking: byte-offset spans and line/column lookup."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, order=True)
class Position:
    """A 1-based line and column position in the source text."""

    line: int
    col: int


Location = Tuple[Position, Position]


@dataclass(frozen=True)
class SourceSpan:
    """A half-open byte-offset span ``[start, end)`` into the UTF-8 source."""

    start: int
    end: int

    @classmethod
    def from_range(cls, value: range) -> SourceSpan:
        """Build a span from a ``range`` of byte offsets."""
        return cls(value.start, value.stop)

    def to_range(self) -> range:
        """Return the span as a ``range`` of byte offsets."""
        return range(self.start, self.end)

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"

    def __repr__(self) -> str:
        return f"{self.start}..{self.end}"


def _is_continuation(byte: int) -> bool:
    return 0x80 <= byte <= 0xBF


class SourceIndex:
    """Line-start index converting byte offsets into 1-based positions.

    Offsets are byte offsets into the UTF-8 encoding of the source; columns
    count characters from the start of the line.
    """

    def __init__(self, source: str) -> None:
        self._data = source.encode("utf-8")
        self._line_starts = [0]
        self._line_starts.extend(
            i + 1 for i, byte in enumerate(self._data) if byte == 0x0A
        )

    def position(self, byte_offset: int) -> Position:
        """Convert a byte offset to a 1-based position.

        An offset inside a multi-byte character snaps back to its start.
        """
        line = bisect_right(self._line_starts, byte_offset) - 1
        line_start = self._line_starts[line]
        line_bytes = self._data[line_start:]
        snapped = min(byte_offset - line_start, len(line_bytes))
        while (
            snapped > 0
            and snapped < len(line_bytes)
            and _is_continuation(line_bytes[snapped])
        ):
            snapped -= 1
        col = sum(1 for byte in line_bytes[:snapped] if not _is_continuation(byte))
        return Position(line=line + 1, col=col + 1)

    def location(self, span: SourceSpan) -> Location:
        """Convert a span to a start/end position pair with an inclusive end."""
        end = span.end - 1 if span.end > span.start else span.start
        return (self.position(span.start), self.position(end))