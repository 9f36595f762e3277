"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the package and by user code
when annotating Localizer call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "ContextId",
    "LanguageTag",
    "ResourceId",
    "XMLSource",
]

ContextId: TypeAlias = str
"""Dot-separated context path (e.g., 'menu', 'menu.file')."""

LanguageTag: TypeAlias = str
"""Case-insensitive language tag (e.g., 'en', 'en-US', 'es')."""

ResourceId: TypeAlias = str
"""Localization document identifier (e.g., 'strings.xml', 'menus/main.xml')."""

XMLSource: TypeAlias = str | bytes
"""Localization document as XML text or encoded bytes."""
