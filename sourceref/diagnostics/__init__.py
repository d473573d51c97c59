"""Diagnostics."""

from sourceref.diagnostics.codes import ErrorId, ErrorType, Severity, severity_of
from sourceref.diagnostics.diagnostic import (
    CompilerError,
    CompilerException,
    SecondarySourceLocation,
)
from sourceref.diagnostics.report import collect_errors, contains_errors, contains_only_warnings

__all__ = [
    "CompilerError",
    "CompilerException",
    "ErrorId",
    "ErrorType",
    "SecondarySourceLocation",
    "Severity",
    "collect_errors",
    "contains_errors",
    "contains_only_warnings",
    "severity_of",
]
