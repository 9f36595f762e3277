"""XML reader producing DocumentElement trees with source line numbers.

xml.etree.ElementTree discards line information, which the loader needs for
its diagnostics, so the tree is built directly from expat events.

Comments, processing instructions and the XML declaration are ignored.
Parameter entities are never parsed; external DTDs are not fetched.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import IO
from xml.parsers import expat

from ctxi18n.diagnostics import ParseError
from ctxi18n.diagnostics.templates import ErrorTemplate

from .document import DocumentElement

__all__ = ["parse_document", "parse_file", "parse_stream"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _OpenElement:
    """Element whose end tag has not been seen yet."""

    tag: str
    attributes: dict[str, str]
    line: int
    parts: list[str] = field(default_factory=list)
    children: list[DocumentElement] = field(default_factory=list)

    def add_child(self, child: DocumentElement) -> None:
        self.children.append(child)
        self.parts.append(child.text)

    def close(self) -> DocumentElement:
        return DocumentElement(
            tag=self.tag,
            attributes=MappingProxyType(self.attributes),
            children=tuple(self.children),
            text="".join(self.parts),
            line=self.line,
        )


class _TreeBuilder:
    """Collects expat callbacks into a DocumentElement tree."""

    __slots__ = ("_parser", "_stack", "root")

    def __init__(self, parser: expat.XMLParserType) -> None:
        self._parser = parser
        self._stack: list[_OpenElement] = []
        self.root: DocumentElement | None = None

    def start(self, tag: str, attributes: dict[str, str]) -> None:
        self._stack.append(_OpenElement(tag, attributes, self._parser.CurrentLineNumber))

    def end(self, tag: str) -> None:
        element = self._stack.pop().close()
        if self._stack:
            self._stack[-1].add_child(element)
        else:
            self.root = element

    def data(self, text: str) -> None:
        if self._stack:
            self._stack[-1].parts.append(text)


def _create_parser() -> tuple[expat.XMLParserType, _TreeBuilder]:
    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.SetParamEntityParsing(expat.XML_PARAM_ENTITY_PARSING_NEVER)

    builder = _TreeBuilder(parser)
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    return parser, builder


def _finish(builder: _TreeBuilder, source_path: str | None) -> DocumentElement:
    if builder.root is None:
        diagnostic = ErrorTemplate.malformed_xml("no element found", None)
        raise ParseError(diagnostic.with_source_path(source_path))
    return builder.root


def _to_parse_error(error: expat.ExpatError, source_path: str | None) -> ParseError:
    diagnostic = ErrorTemplate.malformed_xml(expat.ErrorString(error.code), error.lineno)
    return ParseError(diagnostic.with_source_path(source_path))


def parse_document(source: str | bytes, *, source_path: str | None = None) -> DocumentElement:
    """Parse XML text into a DocumentElement tree.

    Args:
        source: XML document as text or encoded bytes. Bytes honour the
                encoding declared in the XML declaration (UTF-8 by default).
        source_path: Location reported in diagnostics (optional)

    Returns:
        Root element of the document

    Raises:
        ParseError: If the document is not well-formed XML

    Example:
        >>> root = parse_document("<I18N>\\n  <Entry/>\\n</I18N>")
        >>> [(child.tag, child.line) for child in root]
        [('Entry', 2)]
    """
    parser, builder = _create_parser()
    try:
        parser.Parse(source, True)
    except expat.ExpatError as e:
        raise _to_parse_error(e, source_path) from e
    return _finish(builder, source_path)


def parse_stream(
    stream: IO[bytes] | IO[str], *, source_path: str | None = None
) -> DocumentElement:
    """Parse an open file object into a DocumentElement tree.

    Binary streams are fed to expat incrementally. Text streams are read
    whole, since their encoding has already been applied.

    Args:
        stream: Readable binary or text stream positioned at the document start
        source_path: Location reported in diagnostics (optional)

    Returns:
        Root element of the document

    Raises:
        ParseError: If the document is not well-formed XML
    """
    parser, builder = _create_parser()
    try:
        first = stream.read(0)
        if isinstance(first, str):
            parser.Parse(stream.read(), True)
        else:
            parser.ParseFile(stream)
    except expat.ExpatError as e:
        raise _to_parse_error(e, source_path) from e
    return _finish(builder, source_path)


def parse_file(path: str | Path) -> DocumentElement:
    """Parse an XML file into a DocumentElement tree.

    The file is opened and closed within this call.

    Args:
        path: Filesystem path of the document

    Returns:
        Root element of the document

    Raises:
        ParseError: If the document is not well-formed XML
        OSError: If the file cannot be read
    """
    logger.debug("Parsing localization document: %s", path)
    with Path(path).open("rb") as stream:
        return parse_stream(stream, source_path=str(path))
