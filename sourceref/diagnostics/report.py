"""Helpers over collections of compiler errors."""

from __future__ import annotations

from collections.abc import Iterable

from sourceref.diagnostics.diagnostic import CompilerError


def collect_errors(*groups: Iterable[CompilerError]) -> list[CompilerError]:
    errors: list[CompilerError] = []
    for group in groups:
        errors.extend(group)
    return errors


def contains_errors(errors: Iterable[CompilerError]) -> bool:
    return any(not e.is_warning for e in errors)


def contains_only_warnings(errors: Iterable[CompilerError]) -> bool:
    return all(e.is_warning for e in errors)
