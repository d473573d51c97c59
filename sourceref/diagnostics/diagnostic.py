"""Typed compiler exceptions carrying source locations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from sourceref.diagnostics.codes import ErrorId, ErrorType, Severity, severity_of
from sourceref.text import SourceLocation


@dataclass(slots=True)
class SecondarySourceLocation:
    """Ordered (message, location) pairs pointing at related source."""

    infos: list[tuple[str, SourceLocation]] = field(default_factory=list)

    def append(self, message: str, location: SourceLocation) -> SecondarySourceLocation:
        self.infos.append((message, location))
        return self

    def __iter__(self) -> Iterator[tuple[str, SourceLocation]]:
        return iter(self.infos)

    def __len__(self) -> int:
        return len(self.infos)


class CompilerException(Exception):
    """Exception raised by compiler stages.

    Every attachment is optional: a location of the offending source, a
    human-readable comment and secondary locations explaining related code.
    """

    def __init__(
        self,
        comment: str | None = None,
        *,
        location: SourceLocation | None = None,
        secondary_locations: SecondarySourceLocation | None = None,
    ) -> None:
        super().__init__(*(() if comment is None else (comment,)))
        self.comment = comment
        self.location = location
        self.secondary_locations = secondary_locations

    def __str__(self) -> str:
        return self.comment if self.comment is not None else type(self).__name__


class CompilerError(CompilerException):
    """A reportable compiler error or warning with a stable identifier."""

    def __init__(
        self,
        error_id: ErrorId,
        type: ErrorType,
        comment: str | None = None,
        *,
        location: SourceLocation | None = None,
        secondary_locations: SecondarySourceLocation | None = None,
    ) -> None:
        super().__init__(comment, location=location, secondary_locations=secondary_locations)
        self.error_id = error_id
        self.type = type

    @property
    def is_warning(self) -> bool:
        return self.type.is_warning

    @property
    def severity(self) -> Severity:
        return severity_of(self.type)

    @property
    def type_name(self) -> str:
        return str(self.type)

    def __repr__(self) -> str:
        return f"CompilerError({self.error_id!r}, {self.type_name}, {self.comment!r})"
