"""ctxi18n - Context-tree localization with two-tier language fallback.

Converts language-neutral strings into language-specific localized strings.
Translations are loaded from XML documents and organized in nested contexts
that disambiguate the same neutral string in different places. Lookups fall
back from the full language ("en-us") to its primary language ("en"), from a
context to its enclosing contexts, and finally to the neutral text itself.

Public API:
    Localizer - Context-tree localizer (set language, load, localize)
    DocumentElement - Generic element tree consumed by the loader
    parse_document - Parse XML text into a DocumentElement tree
    PathResourceLoader - Load documents from a directory
    LoadSummary - Outcome of Localizer.load_resources()

Exceptions:
    LocalizationError - Base exception class
    UsageError - API misuse
    ConfigurationError - Load before the target language is set
    ParseError - Malformed localization document (carries the source line)
    FormattingError - Template/argument mismatch in localize_format()

Submodules:
    ctxi18n.runtime - Localizer and target language helpers
    ctxi18n.localization - Document loading and resource loaders
    ctxi18n.syntax - Document tree and XML reader
    ctxi18n.diagnostics - Error types, diagnostic codes and formatting
"""

from .diagnostics import (
    ConfigurationError,
    FormattingError,
    LocalizationError,
    ParseError,
    UsageError,
)
from .localization import LoadSummary, PathResourceLoader
from .runtime import Localizer
from .syntax import DocumentElement, parse_document

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("ctxi18n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "DocumentElement",
    "FormattingError",
    "LoadSummary",
    "LocalizationError",
    "Localizer",
    "ParseError",
    "PathResourceLoader",
    "UsageError",
    "__version__",
    "parse_document",
]
