"""Shared constants for ctxi18n.

This module provides centralized configuration constants used across the
syntax, localization, and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Document structure: Element and attribute names of localization documents
- Identifier syntax: Separators for context paths and language tags
- Depth limits: Recursion protection while loading nested contexts
- Languages: Default language used when none can be detected

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Document structure
    "ROOT_TAG",
    "ENTRY_TAG",
    "CONTEXT_TAG",
    "KEY_TAG",
    "VALUE_TAG",
    "LANG_ATTRIBUTE",
    "ID_ATTRIBUTE",
    # Identifier syntax
    "CONTEXT_SEPARATOR",
    "LANGUAGE_SEPARATOR",
    # Depth limits
    "MAX_DEPTH",
    # Languages
    "DEFAULT_LANGUAGE",
]

# ============================================================================
# DOCUMENT STRUCTURE
# ============================================================================

# Root element of every localization document.
ROOT_TAG: str = "I18N"

# Children allowed below the root element or a Context element.
ENTRY_TAG: str = "Entry"
CONTEXT_TAG: str = "Context"

# Children allowed below an Entry element.
KEY_TAG: str = "Key"
VALUE_TAG: str = "Value"

# Required attributes.
LANG_ATTRIBUTE: str = "lang"
ID_ATTRIBUTE: str = "id"

# ============================================================================
# IDENTIFIER SYNTAX
# ============================================================================

# Context ids are paths: "menu.file" addresses context "file" inside "menu".
CONTEXT_SEPARATOR: str = "."

# Language tags split into primary and variant parts at the first hyphen:
# "en-us" -> primary "en".
LANGUAGE_SEPARATOR: str = "-"

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Default maximum nesting of Context elements within one document.
# Deliberately tighter than the interpreter stack allows: documents nesting
# deeper than this are treated as malformed. Localizer.load_document() and
# load_resources() accept max_depth to raise it, up to the depth_clamp() bound.
MAX_DEPTH: int = 100

# ============================================================================
# LANGUAGES
# ============================================================================

# Language reported by get_system_language() when detection fails.
DEFAULT_LANGUAGE: str = "en-us"
