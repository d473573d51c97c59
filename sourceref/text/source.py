"""Named source buffers and locations into them."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Protocol

from sourceref.text.text import TextRange, slice_text_range


@dataclass(frozen=True, slots=True, order=True)
class LineColumn:
    """Zero-based line and column of an offset.

    Columns are string indices into the line text, so they can be used to
    slice what `TextBuffer.line_at` returns.
    """

    line: int
    column: int


class TextBuffer(Protocol):
    """What the reference extractor needs from a source buffer."""

    @property
    def name(self) -> str: ...

    def has_text(self) -> bool: ...

    def line_column(self, offset: int) -> LineColumn: ...

    def line_at(self, offset: int) -> str: ...


@dataclass(slots=True)
class SourceText:
    """A named source text with a lazily built line index."""

    name: str
    text: str
    _line_starts: list[int] | None = field(default=None, init=False, repr=False, compare=False)

    def has_text(self) -> bool:
        return bool(self.text)

    def line_starts(self) -> list[int]:
        if self._line_starts is None:
            starts = [0]
            index = self.text.find("\n")
            while index != -1:
                starts.append(index + 1)
                index = self.text.find("\n", index + 1)
            self._line_starts = starts
        return self._line_starts

    def line_count(self) -> int:
        return len(self.line_starts())

    def line_range(self, line: int) -> TextRange:
        """Range of `line` without its terminator."""
        starts = self.line_starts()
        if not 0 <= line < len(starts):
            raise ValueError(f"Line {line} out of range for {self.name!r} ({len(starts)} lines)")
        start = starts[line]
        end = starts[line + 1] - 1 if line + 1 < len(starts) else len(self.text)
        return TextRange(start, end)

    def line_column(self, offset: int) -> LineColumn:
        self._check_offset(offset)
        starts = self.line_starts()
        line = bisect_right(starts, offset) - 1
        return LineColumn(line, offset - starts[line])

    def line_at(self, offset: int) -> str:
        """Full line containing `offset`, without its terminator.

        An offset pointing at a newline yields the line that newline ends.
        """
        line = slice_text_range(self.text, self.line_range(self.line_column(offset).line))
        if line.endswith("\r"):
            line = line[:-1]
        return line

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset <= len(self.text):
            raise ValueError(
                f"Offset {offset} out of range for {self.name!r} (length {len(self.text)})"
            )


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """A half-open range into an optional source buffer."""

    source: TextBuffer | None
    range: TextRange

    @staticmethod
    def unknown() -> "SourceLocation":
        return SourceLocation(None, TextRange.empty(0))

    @staticmethod
    def of(source: TextBuffer, start: int, end: int) -> "SourceLocation":
        return SourceLocation(source, TextRange(start, end))

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end

    def has_text(self) -> bool:
        return self.source is not None and self.source.has_text()
