"""Localization exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Hierarchy:
    LocalizationError
    ├── UsageError
    │   └── ConfigurationError
    ├── ParseError
    │   └── DepthLimitExceededError
    └── FormattingError

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConfigurationError",
    "DepthLimitExceededError",
    "FormattingError",
    "LocalizationError",
    "ParseError",
    "UsageError",
]


class LocalizationError(Exception):
    """Base exception for all ctxi18n errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocalizationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UsageError(LocalizationError):
    """The API was called in a state that does not allow the operation.

    Programming error: surfaced immediately, never retried.
    """


class ConfigurationError(UsageError):
    """Localizer is not configured for the requested operation.

    Raised when a document is loaded before the target language is set.
    """


class ParseError(LocalizationError):
    """Malformed localization document.

    Raised eagerly; aborts the whole load. Entries written before the
    offending element stay in place.

    Attributes:
        line: 1-based source line of the offending element (None if unknown)
        source_path: Document location (None if unknown)
    """

    @property
    def line(self) -> int | None:
        """Source line of the offending element."""
        return self.diagnostic.line if self.diagnostic is not None else None

    @property
    def source_path(self) -> str | None:
        """Location of the document being loaded."""
        return self.diagnostic.source_path if self.diagnostic is not None else None


class DepthLimitExceededError(ParseError):
    """Context elements are nested deeper than the configured limit."""


class FormattingError(LocalizationError):
    """Raised when a localized format template cannot be combined with its arguments.

    The error carries a fallback_value (the unformatted template) so callers
    that catch it still have usable text to display.

    Attributes:
        fallback_value: Template that failed to format
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
