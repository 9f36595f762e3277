"""Diagnostic system for localization errors.

Provides structured error diagnostics with codes, source lines, and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigurationError,
    DepthLimitExceededError,
    FormattingError,
    LocalizationError,
    ParseError,
    UsageError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormattingError",
    "LocalizationError",
    "OutputFormat",
    "ParseError",
    "UsageError",
]
