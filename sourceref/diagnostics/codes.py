"""Compiler error kinds and identifiers."""

from enum import StrEnum
from typing import Literal, TypeAlias

Severity = Literal["error", "warning"]

ErrorId: TypeAlias = str
"""Opaque identifier of a reported error, conventionally four digits (``"2519"``)."""


class ErrorType(StrEnum):
    """Kind of a compiler error; the value doubles as its display name."""

    CODE_GENERATION_ERROR = "CodeGenerationError"
    DECLARATION_ERROR = "DeclarationError"
    DOCSTRING_PARSING_ERROR = "DocstringParsingError"
    PARSER_ERROR = "ParserError"
    TYPE_ERROR = "TypeError"
    SYNTAX_ERROR = "SyntaxError"
    WARNING = "Warning"

    @property
    def is_warning(self) -> bool:
        return self is ErrorType.WARNING


def severity_of(error_type: ErrorType) -> Severity:
    return "warning" if error_type.is_warning else "error"
