#!/usr/bin/env python3
"""Quick perf benchmark for source reference extraction."""

from __future__ import annotations

import argparse
from pathlib import Path
import statistics
import time

from tqdm import tqdm

from sourceref.reference import extract_reference
from sourceref.text import SourceLocation, SourceText


def _collect_sources(root: Path, pattern: str) -> list[SourceText]:
    files = sorted(path for path in root.rglob(pattern) if path.is_file())
    return [SourceText(str(path), path.read_text(encoding="utf-8", errors="replace")) for path in files]


def _run_once(sources: list[SourceText], *, label: str, show_progress: bool) -> tuple[float, int, int]:
    start = time.perf_counter()
    references = 0
    truncated = 0
    iterator = tqdm(sources, desc=label, unit="file") if show_progress else sources
    for source in iterator:
        for line in range(source.line_count()):
            line_range = source.line_range(line)
            ref = extract_reference(SourceLocation(source, line_range), "")
            references += 1
            if len(ref.text) != line_range.len():
                truncated += 1
    return time.perf_counter() - start, references, truncated


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark source reference extraction throughput")
    parser.add_argument("root", type=Path, help="Directory to scan for sources")
    parser.add_argument("--glob", default="*.sol", help="File pattern to collect (default: *.sol)")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    sources = _collect_sources(root, args.glob)
    if not sources:
        raise SystemExit(f"No {args.glob} files found under {root}")

    timings: list[float] = []
    references = truncated = 0
    for run_idx in range(max(args.runs, 1)):
        duration, references, truncated = _run_once(
            sources,
            label=f"run {run_idx + 1}/{max(args.runs, 1)}",
            show_progress=not args.no_progress,
        )
        timings.append(duration)

    mean = statistics.mean(timings)
    print(f"Files: {len(sources)}")
    print(f"References: {references} ({truncated} truncated)")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"References/s (mean): {references / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
