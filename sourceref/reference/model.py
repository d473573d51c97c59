"""Display-ready diagnostic records."""

from __future__ import annotations

from dataclasses import dataclass

from sourceref.diagnostics import ErrorId
from sourceref.text import LineColumn


@dataclass(frozen=True, slots=True)
class SourceReference:
    """Excerpt of the source line a diagnostic points at.

    `start_column` and `end_column` index into `text` and always satisfy
    ``0 <= start_column <= end_column <= len(text)``. Without a `source_name`
    only `message` is meaningful; with a name but no `text` the position is
    known but there is nothing to show.
    """

    message: str
    source_name: str | None = None
    position: LineColumn | None = None
    multiline: bool = False
    text: str = ""
    start_column: int = 0
    end_column: int = 0

    @staticmethod
    def message_only(message: str, source_name: str | None = None) -> "SourceReference":
        return SourceReference(message=message, source_name=source_name)

    @property
    def has_excerpt(self) -> bool:
        return bool(self.text)


@dataclass(frozen=True, slots=True)
class Message:
    """A diagnostic ready for printing: primary excerpt plus related ones."""

    primary: SourceReference
    category: str
    secondary: tuple[SourceReference, ...] = ()
    error_id: ErrorId | None = None
