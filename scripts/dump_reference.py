#!/usr/bin/env python
"""Print the source reference extracted for a range of a file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from sourceref.reference import ExtractOptions, SourceReference, extract_reference
from sourceref.text import SourceLocation, SourceText


def format_reference(ref: SourceReference) -> str:
    lines = [
        f"message={ref.message!r}",
        f"source_name={ref.source_name!r}",
        f"position={ref.position}",
        f"multiline={ref.multiline}",
        f"text={ref.text!r}",
        f"columns=({ref.start_column},{ref.end_column})",
    ]
    if ref.has_excerpt:
        lines.append(f"flagged={ref.text[ref.start_column : ref.end_column]!r}")
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump the source reference for a file range")
    parser.add_argument("path", type=Path, help="Source file to read")
    parser.add_argument("--start", type=int, required=True, help="Start offset of the range")
    parser.add_argument("--end", type=int, help="End offset of the range (default: start)")
    parser.add_argument("--message", default="", help="Message attached to the reference")
    parser.add_argument("--max-width", type=int, default=150, help="Truncation threshold (default: 150)")
    parser.add_argument("--context", type=int, default=35, help="Context kept around cuts (default: 35)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log truncation decisions")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    path: Path = args.path
    if not path.is_file():
        raise SystemExit(f"Not a file: {path}")

    source = SourceText(str(path), path.read_text(encoding="utf-8"))
    end = args.start if args.end is None else args.end
    options = ExtractOptions(max_width=args.max_width, context=args.context)

    ref = extract_reference(SourceLocation.of(source, args.start, end), args.message, options)
    print(format_reference(ref))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
