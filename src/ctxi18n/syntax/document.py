"""Generic document tree consumed by the localization loader.

The loader never sees XML directly. It walks DocumentElement nodes, which
carry exactly what it needs: tag, attributes, child elements, text content
and the source line used in diagnostics.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

__all__ = ["DocumentElement"]


@dataclass(frozen=True, slots=True)
class DocumentElement:
    """Immutable element of a parsed localization document.

    Attributes:
        tag: Element name, e.g. "Entry"
        attributes: Read-only attribute mapping
        children: Child elements in document order
        text: Text of this element and all descendants, in document order
              (same as ElementTree's "".join(element.itertext()))
        line: 1-based source line of the start tag
    """

    tag: str
    attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    children: tuple[DocumentElement, ...] = ()
    text: str = ""
    line: int = 1

    @classmethod
    def build(
        cls,
        tag: str,
        attributes: Mapping[str, str] | None = None,
        children: Iterable[DocumentElement] = (),
        *,
        text: str | None = None,
        line: int = 1,
    ) -> DocumentElement:
        """Construct an element programmatically.

        When text is omitted it is derived from the children, matching what
        the XML reader produces for element-only content.

        Example:
            >>> key = DocumentElement.build("Key", text="Open", line=3)
            >>> entry = DocumentElement.build("Entry", children=[key], line=2)
            >>> entry.text
            'Open'
        """
        child_tuple = tuple(children)
        if text is None:
            text = "".join(child.text for child in child_tuple)
        return cls(
            tag=tag,
            attributes=MappingProxyType(dict(attributes or {})),
            children=child_tuple,
            text=text,
            line=line,
        )

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return attribute value, or default if the attribute is absent."""
        return self.attributes.get(name, default)

    def __iter__(self) -> Iterator[DocumentElement]:
        """Iterate over direct child elements."""
        return iter(self.children)
