"""Turn compiler exceptions into display-ready source references."""

from __future__ import annotations

from collections.abc import Iterable
import dataclasses
import logging
from typing import TypeAlias

from sourceref.diagnostics import CompilerError, CompilerException
from sourceref.reference.model import Message, SourceReference
from sourceref.reference.options import DEFAULT_OPTIONS, ExtractOptions
from sourceref.text import SourceLocation

log = logging.getLogger(__name__)

Excerpt: TypeAlias = tuple[str, int, int]
"""Line text with the start and end column of the flagged range in it."""


def truncate_range(text: str, start: int, end: int, options: ExtractOptions = DEFAULT_OPTIONS) -> Excerpt:
    """Cut the middle out of a flagged range wider than `options.max_width`.

    `context` characters survive on both edges of the range; everything
    outside the range is kept.
    """
    if end - start <= options.max_width:
        return text, start, end
    head = text[: start + options.context]
    tail = text[end - options.context :]
    return head + options.separator + tail, start, start + options.collapsed_width


def truncate_line(text: str, start: int, end: int, options: ExtractOptions = DEFAULT_OPTIONS) -> Excerpt:
    """Window a line wider than `options.max_width` around the flagged range."""
    size = len(text)
    if size <= options.max_width:
        return text, start, end
    length = end - start
    before = min(start, options.context)
    after = min(length + options.context, size - start)
    window = text[start - before : start + after]
    if start + length + options.context < size:
        window += options.trailing_marker
    if start > options.context:
        window = options.separator + window
        start = options.marker_column
    return window, start, start + length


def extract_reference(
    location: SourceLocation | None,
    message: str,
    options: ExtractOptions = DEFAULT_OPTIONS,
) -> SourceReference:
    """Build the excerpt of the line `location` starts on.

    Never fails on its own; errors raised by the source buffer propagate.
    """
    if location is None or location.source is None:
        log.debug("No source for %r, message-only reference", message)
        return SourceReference.message_only(message)

    source = location.source
    if not location.has_text():
        log.debug("Source %s has no text, reference without excerpt", source.name)
        return SourceReference.message_only(message, source.name)

    interest = source.line_column(location.start)
    end = source.line_column(location.end)
    multiline = interest.line != end.line

    line = source.line_at(location.start)
    # The rest of a multiline range is on lines that are not shown.
    end_column = len(line) if multiline else end.column

    text, start_column, end_column = truncate_range(line, interest.column, end_column, options)
    if text is not line:
        log.debug("Collapsed flagged range in %s at %d:%d", source.name, interest.line, interest.column)
    shortened = text
    text, start_column, end_column = truncate_line(text, start_column, end_column, options)
    if text is not shortened:
        log.debug("Windowed long line in %s at %d:%d", source.name, interest.line, interest.column)

    return SourceReference(
        message=message,
        source_name=source.name,
        position=interest,
        multiline=multiline,
        text=text,
        start_column=min(start_column, len(text)),
        end_column=min(end_column, len(text)),
    )


def extract_from_exception(
    exception: CompilerException,
    category: str,
    options: ExtractOptions = DEFAULT_OPTIONS,
) -> Message:
    primary = extract_reference(exception.location, exception.comment or "", options)
    secondary = tuple(
        extract_reference(location, info, options)
        for info, location in (exception.secondary_locations or ())
    )
    return Message(primary=primary, category=category, secondary=secondary, error_id=None)


def extract_from_error(error: CompilerError, options: ExtractOptions = DEFAULT_OPTIONS) -> Message:
    category = "Warning" if error.is_warning else "Error"
    message = extract_from_exception(error, category, options)
    return dataclasses.replace(message, error_id=error.error_id)


def extract_messages(
    errors: Iterable[CompilerError],
    options: ExtractOptions = DEFAULT_OPTIONS,
) -> list[Message]:
    return [extract_from_error(error, options) for error in errors]
