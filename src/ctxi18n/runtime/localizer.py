"""Context-tree localizer.

A Localizer converts language-neutral strings into their localized values
for one target language. Localizers form a tree: every node holds its own
key/value mappings plus named child contexts, and a lookup that misses in a
context continues in the enclosing context up to the root. A miss at the
root returns the neutral text unchanged.

Contexts disambiguate the same neutral string in different places:

    >>> localizer = Localizer("es")
    >>> localizer.load_string('''
    ... <I18N>
    ...   <Entry><Key>Open</Key><Value lang="es">Abrir</Value></Entry>
    ...   <Context id="status">
    ...     <Entry><Key>Open</Key><Value lang="es">Abierto</Value></Entry>
    ...   </Context>
    ... </I18N>''')
    >>> localizer.localize("Open")
    'Abrir'
    >>> localizer.context("status").localize("Open")
    'Abierto'

Lookups never raise and never mutate state. Loads mutate; callers sharing a
tree across threads must serialize loads against lookups.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import IO, Any, Self, overload

from ctxi18n.constants import CONTEXT_SEPARATOR, MAX_DEPTH
from ctxi18n.diagnostics import ConfigurationError, FormattingError
from ctxi18n.diagnostics.templates import ErrorTemplate
from ctxi18n.localization.loader import load_document
from ctxi18n.localization.loading import LoadSummary, ResourceLoader, load_resources
from ctxi18n.localization.types import ContextId, LanguageTag, ResourceId, XMLSource
from ctxi18n.runtime.language import TargetLanguage, get_system_language
from ctxi18n.syntax import DocumentElement, parse_document, parse_file, parse_stream

__all__ = ["Localizer"]

logger = logging.getLogger(__name__)


class Localizer:
    """Converts language-neutral strings to language-specific localized strings.

    The object returned by the constructor is the root of a context tree.
    Nested contexts are obtained with context() and share nothing with the
    root except the parent link used for fallback lookups.

    Language matching is case-insensitive. Any string can identify a
    language; tags made of a primary code and a variant code ("en-us") also
    accept values written for the primary code ("en") when no value for the
    full tag exists.

    Example:
        >>> localizer = Localizer().set_target_language("en-US")
        >>> localizer.load_file("i18n/strings.xml")
        >>> localizer.localize("Save")
        'Save'
        >>> localizer.localize_format("{0} files deleted", 3)
        '3 files deleted'

    Attributes:
        parent: Enclosing context, None for the root
        target_language: Full target language tag, None until set
        primary_language: Primary part of the target language tag, if any
    """

    __slots__ = ("_contexts", "_language", "_localizations", "_parent")

    def __init__(self, language: LanguageTag | None = None) -> None:
        """Create a root localizer.

        Args:
            language: Target language; may also be set later with
                      set_target_language()
        """
        self._parent: Localizer | None = None
        self._language: TargetLanguage | None = None
        self._localizations: dict[str, str] = {}
        self._contexts: dict[str, Localizer] = {}
        if language is not None:
            self.set_target_language(language)

    @classmethod
    def from_system_language(cls) -> Self:
        """Create a root localizer targeting the process language.

        The language comes from the OS locale or the LC_ALL, LC_MESSAGES and
        LANG environment variables (see get_system_language()).
        """
        return cls(get_system_language())

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"Localizer(language={self.target_language!r}, "
            f"entries={len(self._localizations)}, "
            f"contexts={len(self._contexts)})"
        )

    # ------------------------------------------------------------------
    # Tree structure
    # ------------------------------------------------------------------

    @property
    def parent(self) -> Localizer | None:
        """Enclosing context, None for the root."""
        return self._parent

    @property
    def is_root(self) -> bool:
        """True for a localizer created by the caller rather than by context()."""
        return self._parent is None

    @property
    def localizations(self) -> Mapping[str, str]:
        """Read-only view of the mappings defined directly in this context."""
        return MappingProxyType(self._localizations)

    @property
    def contexts(self) -> Mapping[str, Localizer]:
        """Read-only view of the direct child contexts."""
        return MappingProxyType(self._contexts)

    def context(self, context_id: ContextId) -> Localizer:
        """Get the localizer for a context nested in this one.

        Contexts disambiguate the conversion of the same neutral string
        depending on where it is used. The id may name a chain of nested
        contexts separated by '.', outermost first; each segment is stripped
        of surrounding whitespace. Missing contexts are created and inherit
        this localizer's target language.

        Args:
            context_id: Context path, e.g. "menu" or "menu.file"

        Returns:
            Localizer for the innermost context; the same instance for
            repeated calls with the same id

        Example:
            >>> root = Localizer("fr")
            >>> root.context("menu.file") is root.context("menu").context("file")
            True
        """
        node = self
        for segment in context_id.split(CONTEXT_SEPARATOR):
            node = node._child(segment.strip())
        return node

    def _child(self, context_id: str) -> Localizer:
        child = self._contexts.get(context_id)
        if child is None:
            child = type(self)()
            child._parent = self
            child._language = self._language
            self._contexts[context_id] = child
            logger.debug("Created context: %s", context_id)
        return child

    # ------------------------------------------------------------------
    # Target language
    # ------------------------------------------------------------------

    @property
    def language(self) -> TargetLanguage | None:
        """Target language of this localizer, None until set."""
        return self._language

    @property
    def target_language(self) -> str | None:
        """Full target language tag in lower case, e.g. "en-us"."""
        return self._language.full if self._language is not None else None

    @property
    def primary_language(self) -> str | None:
        """Primary target language tag, e.g. "en" for "en-us"."""
        return self._language.primary if self._language is not None else None

    def set_target_language(self, language: LanguageTag) -> Self:
        """Set the language to which conversion will be performed.

        Only this localizer is affected; contexts created earlier keep the
        language they were created with. Set the language on the root before
        loading documents.

        Args:
            language: Name, code or identifier of the language

        Returns:
            self, to allow chaining

        Raises:
            TypeError: If language is not a string
            ValueError: If language is empty
        """
        if not isinstance(language, str):
            msg = f"Language must be a string, got {type(language).__name__}"
            raise TypeError(msg)
        if not language:
            msg = "Language cannot be empty"
            raise ValueError(msg)

        self._language = TargetLanguage.parse(language)
        logger.debug(
            "Target language set: %s (primary: %s)",
            self._language.full,
            self._language.primary,
        )
        return self

    def _require_language(self) -> TargetLanguage:
        """Target language, or ConfigurationError when none is set."""
        if self._language is None:
            raise ConfigurationError(ErrorTemplate.language_not_set())
        return self._language

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _resolve(self, text: str) -> str:
        node: Localizer | None = self
        while node is not None:
            localized = node._localizations.get(text)
            if localized is not None:
                return localized
            node = node._parent
        return text

    @overload
    def localize(self, text: str) -> str: ...  # type: ignore[overload-overlap]

    @overload
    def localize(self, text: Sequence[str]) -> list[str]: ...

    def localize(self, text: str | Sequence[str]) -> str | list[str]:
        """Localize a string, or each string of a sequence.

        The mapping of this context is tried first, then the mappings of the
        enclosing contexts up to the root.

        Args:
            text: Language-neutral string, or a sequence of them

        Returns:
            Localized string if found, text otherwise. For a sequence, a list
            of the same length and order.
        """
        if isinstance(text, str):
            return self._resolve(text)
        return [self._resolve(item) for item in text]

    def localize_format(self, format_text: str, /, *args: Any, **kwargs: Any) -> str:
        """Localize a format string, then format it with the given arguments.

        The localized template uses str.format() syntax: positional
        placeholders "{0}", "{1}" (or "{}") and named fields for keyword
        arguments. Translations may reorder placeholders.

        Args:
            format_text: Language-neutral format string
            *args: Positional format arguments
            **kwargs: Named format arguments

        Returns:
            Formatted string built from the localized template if found, or
            from format_text otherwise

        Raises:
            FormattingError: If the template and arguments do not match

        Example:
            >>> localizer.localize_format("{0} of {1}", 3, 10)
            '3 de 10'
        """
        template = self._resolve(format_text)
        try:
            return template.format(*args, **kwargs)
        except (IndexError, KeyError, ValueError, AttributeError, TypeError) as e:
            raise FormattingError(
                ErrorTemplate.format_failed(template, str(e)), fallback_value=template
            ) from e

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    # Loader hooks. ctxi18n.localization.loader is the only caller outside
    # this class; user code goes through the load_* methods.

    def _reset(self) -> None:
        """Drop the mappings and child contexts of this node.

        Contexts handed out earlier keep their parent link but are no longer
        returned by context().
        """
        self._localizations.clear()
        self._contexts.clear()

    def _store(self, key: str, value: str) -> None:
        """Map key to an already unescaped value in this node."""
        self._localizations[key] = value

    def load_document(
        self,
        document: DocumentElement,
        merge: bool = True,
        *,
        source_path: str | None = None,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Load a localization configuration from a parsed document.

        Precondition: the target language must be set.

        Args:
            document: Root element of the document
            merge: Merge with the current mappings, overriding existing keys
                   (default). When False, the current mappings and contexts
                   are replaced by the loaded ones.
            source_path: Document location reported in diagnostics
            max_depth: Maximum nesting of Context elements

        Raises:
            ConfigurationError: If the target language is not set
            ParseError: If the document cannot be parsed properly
        """
        load_document(
            self, document, merge=merge, source_path=source_path, max_depth=max_depth
        )

    def load_string(
        self,
        source: XMLSource,
        merge: bool = True,
        *,
        source_path: str | None = None,
    ) -> None:
        """Load a localization configuration from XML text or bytes.

        Raises:
            ConfigurationError: If the target language is not set
            ParseError: If the document cannot be parsed properly
        """
        self._require_language()
        document = parse_document(source, source_path=source_path)
        self.load_document(document, merge, source_path=source_path)

    def load_stream(self, stream: IO[bytes] | IO[str], merge: bool = True) -> None:
        """Load a localization configuration from an open file object.

        The stream is read to the end but not closed.

        Raises:
            ConfigurationError: If the target language is not set
            ParseError: If the document cannot be parsed properly
        """
        self._require_language()
        source_path = getattr(stream, "name", None)
        source_path = source_path if isinstance(source_path, str) else None
        document = parse_stream(stream, source_path=source_path)
        self.load_document(document, merge, source_path=source_path)

    def load_file(self, path: str | Path, merge: bool = True) -> None:
        """Load a localization configuration from a file in XML format.

        Raises:
            ConfigurationError: If the target language is not set
            ParseError: If the document cannot be parsed properly
            OSError: If the file cannot be read
        """
        self._require_language()
        document = parse_file(path)
        self.load_document(document, merge, source_path=str(path))

    def load_resources(
        self,
        resource_ids: Iterable[ResourceId],
        resource_loader: ResourceLoader,
        merge: bool = True,
        *,
        max_depth: int = MAX_DEPTH,
    ) -> LoadSummary:
        """Load several localization documents through a resource loader.

        Documents are merged in order; later documents override earlier
        keys. With merge=False the current mappings are cleared once, just
        before the first document that was found and has a valid root; if
        none does, the current mappings are kept.

        max_depth limits Context nesting in every document, as in
        load_document().

        Returns:
            LoadSummary with one result per resource id

        Raises:
            ConfigurationError: If the target language is not set
            ParseError: If a document cannot be parsed properly
        """
        self._require_language()
        return load_resources(
            self, resource_ids, resource_loader, merge=merge, max_depth=max_depth
        )
