"""Display limits for source excerpts."""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class ExtractOptions:
    """Widths and markers used when shortening excerpts for display.

    A flagged range or a line longer than `max_width` is shortened, keeping
    `context` characters around the interesting part and marking the cuts
    with `separator` (inside the text) or `trailing_marker` (at its end).
    """

    max_width: int = 150
    context: int = 35
    separator: str = " ... "
    trailing_marker: str = " ..."

    @property
    def collapsed_width(self) -> int:
        """Width of a flagged range after its middle was cut out."""
        return 2 * self.context + len(self.separator)

    @property
    def marker_column(self) -> int:
        """Start column of the point of interest once the line head was cut."""
        return self.context + len(self.separator)


DEFAULT_OPTIONS: Final[ExtractOptions] = ExtractOptions()
