"""Document layer: generic element tree and the XML reader producing it.

Public API:
    DocumentElement - Immutable element with tag, attributes, text and line
    parse_document  - Parse XML text or bytes
    parse_stream    - Parse an open binary or text stream
    parse_file      - Parse a file by path

Python 3.13+. Zero external dependencies.
"""

from .document import DocumentElement
from .parser import parse_document, parse_file, parse_stream

__all__ = [
    "DocumentElement",
    "parse_document",
    "parse_file",
    "parse_stream",
]
