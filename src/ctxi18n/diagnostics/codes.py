"""Diagnostic codes and the Diagnostic record carried by every error.

Each error raised by ctxi18n wraps one Diagnostic.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers for every reported problem.

    Ranges:
        1000-1999: Usage errors (API called in the wrong state)
        2000-2999: Formatting errors (template/argument mismatch)
        3000-3999: Document errors (malformed localization documents)
    """

    # Usage errors (1000-1999)
    LANGUAGE_NOT_SET = 1001

    # Formatting errors (2000-2999)
    FORMAT_FAILED = 2001

    # Document errors (3000-3999)
    MALFORMED_XML = 3001
    INVALID_ROOT_ELEMENT = 3002
    INVALID_ELEMENT = 3003
    DUPLICATE_KEY = 3004
    DUPLICATE_VALUE = 3005
    MISSING_KEY = 3006
    MISSING_ATTRIBUTE = 3007
    NESTING_DEPTH_EXCEEDED = 3008


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported problem, with enough context to locate and fix it.

    Shown to translators editing documents and to developers calling the API.

    Attributes:
        code: What went wrong
        message: Sentence describing the problem
        line: 1-based source line of the offending element (None if unknown)
        source_path: Document location, e.g. a file path (None if unknown)
        hint: How to fix it (None if there is nothing to suggest)
        severity: "error" or "warning"
    """

    code: DiagnosticCode
    message: str
    line: int | None = None
    source_path: str | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """The bare message, without line or path."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as a single line suitable for exception messages.

        Example:
            Line 12: Missing attribute 'lang' in 'Value' XML element

        Returns:
            Message prefixed with its line when known
        """
        if self.line is not None:
            return f"Line {self.line}: {self.message}"
        return self.message

    def with_source_path(self, source_path: str | None) -> "Diagnostic":
        """Return a copy of this diagnostic attributed to a document location."""
        return Diagnostic(
            code=self.code,
            message=self.message,
            line=self.line,
            source_path=source_path,
            hint=self.hint,
            severity=self.severity,
        )
