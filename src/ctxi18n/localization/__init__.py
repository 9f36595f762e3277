"""Localization document loading for Localizer trees.

Provides the document walk that populates a Localizer, resource loading
infrastructure, and load result tracking.

Submodules:
    types   - PEP 695 type aliases (ContextId, LanguageTag, ResourceId, XMLSource)
    loader  - load_document (structure validation and merge semantics)
    loading - ResourceLoader protocol, PathResourceLoader, ResourceLoadResult,
              LoadSummary, load_resources

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from ctxi18n.enums import LoadStatus
from ctxi18n.localization.loader import load_document
from ctxi18n.localization.loading import (
    LoadSummary,
    PathResourceLoader,
    ResourceLoader,
    ResourceLoadResult,
    load_resources,
)
from ctxi18n.localization.types import ContextId, LanguageTag, ResourceId, XMLSource

__all__ = [
    # Document walk
    "load_document",
    "load_resources",
    # Loader protocol and implementations
    "ResourceLoader",
    "PathResourceLoader",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "ResourceLoadResult",
    # Type aliases for user code type annotations
    "ContextId",
    "LanguageTag",
    "ResourceId",
    "XMLSource",
]
