"""Source text, ranges and line/column coordinates."""

from sourceref.text.source import LineColumn, SourceLocation, SourceText, TextBuffer
from sourceref.text.text import TextRange, slice_text_range

__all__ = [
    "LineColumn",
    "SourceLocation",
    "SourceText",
    "TextBuffer",
    "TextRange",
    "slice_text_range",
]
