"""Populate a Localizer tree from a parsed localization document.

Document structure:

    <I18N>
      <Entry>
        <Key>Open</Key>
        <Value lang="en-us">Open</Value>
        <Value lang="es">Abrir</Value>
      </Entry>
      <Context id="menu.file">
        <Entry> ... </Entry>
      </Context>
    </I18N>

Rules enforced while walking the tree:
- The root element must be <I18N>.
- Children of <I18N> and <Context> are <Entry> or <Context> only.
- An <Entry> has exactly one <Key> and any number of <Value lang="...">.
- At most one <Value> per entry may match the full target language, and at
  most one may match the primary target language.
- A <Context> requires an id attribute, resolved relative to the current node.

Values for other languages are skipped. An entry with no matching value
writes nothing, so a value merged in by an earlier load stays in place.

Loading is not transactional: entries written before a ParseError remain.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ctxi18n import constants
from ctxi18n.constants import ID_ATTRIBUTE, KEY_TAG, LANG_ATTRIBUTE, MAX_DEPTH, ROOT_TAG
from ctxi18n.core import DepthGuard, unescape
from ctxi18n.diagnostics import ConfigurationError, Diagnostic, ParseError
from ctxi18n.diagnostics.templates import ErrorTemplate
from ctxi18n.enums import ValueMatch

if TYPE_CHECKING:
    from ctxi18n.runtime.language import TargetLanguage
    from ctxi18n.runtime.localizer import Localizer
    from ctxi18n.syntax import DocumentElement

__all__ = ["load_document"]

logger = logging.getLogger(__name__)


def load_document(
    node: Localizer,
    document: DocumentElement,
    *,
    merge: bool = True,
    source_path: str | None = None,
    max_depth: int = MAX_DEPTH,
) -> None:
    """Load a localization document into node.

    Args:
        node: Localizer receiving the entries; its target language must be set
        document: Root element of the parsed document
        merge: Keep existing entries and contexts, overriding colliding keys
               (default). When False, node is cleared before loading.
        source_path: Document location reported in diagnostics and logs
        max_depth: Maximum nesting of Context elements

    Raises:
        ConfigurationError: If node has no target language
        ParseError: If the document structure is invalid
    """
    language = node.language
    if language is None:
        raise ConfigurationError(ErrorTemplate.language_not_set())

    loader = _DocumentLoader(language, source_path, max_depth)

    if document.tag != ROOT_TAG:
        raise loader.error(ErrorTemplate.invalid_root_element(document.line))

    if not merge:
        node._reset()

    loader.load_elements(node, document)

    logger.info(
        "Loaded localization document %s: %d entries, %d contexts "
        "(language=%s, merge=%s)",
        source_path or "<document>",
        loader.entry_count,
        loader.context_count,
        language.full,
        merge,
    )


class _DocumentLoader:
    """State of a single document walk."""

    __slots__ = ("_guard", "_language", "_source_path", "context_count", "entry_count")

    def __init__(
        self,
        language: TargetLanguage,
        source_path: str | None,
        max_depth: int,
    ) -> None:
        self._language = language
        self._source_path = source_path
        self._guard = DepthGuard(max_depth=max_depth, source_path=source_path)
        self.entry_count = 0
        self.context_count = 0

    def error(self, diagnostic: Diagnostic) -> ParseError:
        """Build a ParseError attributed to the document being loaded."""
        return ParseError(diagnostic.with_source_path(self._source_path))

    def load_elements(self, node: Localizer, element: DocumentElement) -> None:
        for child in element:
            match child.tag:
                case constants.ENTRY_TAG:
                    self._load_entry(node, child)
                case constants.CONTEXT_TAG:
                    self._load_context(node, child)
                case _:
                    raise self.error(ErrorTemplate.invalid_element(child.tag, child.line))

    def _load_entry(self, node: Localizer, element: DocumentElement) -> None:
        key: str | None = None
        value_full: str | None = None
        value_primary: str | None = None

        for child in element:
            match child.tag:
                case constants.KEY_TAG:
                    if key is not None:
                        raise self.error(ErrorTemplate.too_many_keys(child.tag, child.line))
                    key = unescape(child.text)

                case constants.VALUE_TAG:
                    match self._classify_value(child):
                        case ValueMatch.FULL:
                            if value_full is not None:
                                raise self.error(
                                    ErrorTemplate.too_many_values(child.tag, child.line)
                                )
                            value_full = unescape(child.text)
                        case ValueMatch.PRIMARY:
                            if value_primary is not None:
                                raise self.error(
                                    ErrorTemplate.too_many_values(child.tag, child.line)
                                )
                            value_primary = unescape(child.text)
                        case ValueMatch.NO_MATCH:
                            pass

                case _:
                    raise self.error(ErrorTemplate.invalid_element(child.tag, child.line))

        if key is None:
            raise self.error(ErrorTemplate.missing_key(KEY_TAG, element.line))

        value = value_full if value_full is not None else value_primary
        if value is None:
            logger.debug("No value for language '%s' in entry: %s", self._language.full, key)
            return

        node._store(key, value)
        self.entry_count += 1
        logger.debug("Registered entry at line %d: %s", element.line, key)

    def _classify_value(self, element: DocumentElement) -> ValueMatch:
        lang = element.get(LANG_ATTRIBUTE)
        if lang is None:
            raise self.error(
                ErrorTemplate.missing_attribute(LANG_ATTRIBUTE, element.tag, element.line)
            )
        return self._language.matches(lang)

    def _load_context(self, node: Localizer, element: DocumentElement) -> None:
        context_id = element.get(ID_ATTRIBUTE)
        if context_id is None:
            raise self.error(
                ErrorTemplate.missing_attribute(ID_ATTRIBUTE, element.tag, element.line)
            )

        self.context_count += 1
        with self._guard.descend(element.line):
            self.load_elements(node.context(context_id), element)

