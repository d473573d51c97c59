"""Source reference extraction."""

from sourceref.reference.extractor import (
    extract_from_error,
    extract_from_exception,
    extract_messages,
    extract_reference,
    truncate_line,
    truncate_range,
)
from sourceref.reference.model import Message, SourceReference
from sourceref.reference.options import DEFAULT_OPTIONS, ExtractOptions

__all__ = [
    "DEFAULT_OPTIONS",
    "ExtractOptions",
    "Message",
    "SourceReference",
    "extract_from_error",
    "extract_from_exception",
    "extract_messages",
    "extract_reference",
    "truncate_line",
    "truncate_range",
]
