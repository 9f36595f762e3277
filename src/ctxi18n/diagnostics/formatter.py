"""Rendering of load diagnostics for translators and tools.

A ParseError message ("Line 5: Too many child 'Value' XML elements ...") is
enough for logs. Translators editing a document get more out of seeing the
offending line itself, so the formatter can quote it from the document
source.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic
from .errors import LocalizationError

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output styles of DiagnosticFormatter."""

    RUST = "rust"  # multi-line, compiler style, with source excerpt
    SIMPLE = "simple"  # one line per diagnostic
    JSON = "json"  # one JSON object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Formats Diagnostic objects.

    Attributes:
        output_format: Output style
        max_excerpt_length: Quoted source lines longer than this are cut
                            and end with "..."

    Example:
        >>> diagnostic = ErrorTemplate.missing_key("Key", 2).with_source_path("ui.xml")
        >>> print(DiagnosticFormatter().format(diagnostic, source="<I18N>\\n<Entry/>\\n</I18N>"))
        error[MISSING_KEY]: Missing child 'Key' XML element
          --> ui.xml:2
           |
         2 | <Entry/>
           |

        >>> print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic))
        ui.xml: MISSING_KEY: Line 2: Missing child 'Key' XML element
    """

    output_format: OutputFormat = OutputFormat.RUST
    max_excerpt_length: int = 120

    def format(self, diagnostic: Diagnostic, source: str | None = None) -> str:
        """Render one diagnostic.

        Args:
            diagnostic: Diagnostic to render
            source: Text of the document the diagnostic refers to. Used to
                    quote the offending line in RUST output and as the
                    "excerpt" field in JSON output.

        Returns:
            Rendered text
        """
        excerpt = self._excerpt(source, diagnostic.line)
        match self.output_format:
            case OutputFormat.RUST:
                return self._render_rust(diagnostic, excerpt)
            case OutputFormat.SIMPLE:
                return self._render_simple(diagnostic)
            case OutputFormat.JSON:
                return self._render_json(diagnostic, excerpt)

    def format_error(self, error: LocalizationError, source: str | None = None) -> str:
        """Render an exception raised by the package.

        Errors created from a plain message, without a Diagnostic, render as
        their message.
        """
        if error.diagnostic is None:
            return str(error)
        return self.format(error.diagnostic, source)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, separated by blank lines."""
        return "\n\n".join(self.format(diagnostic) for diagnostic in diagnostics)

    def _excerpt(self, source: str | None, line: int | None) -> str | None:
        if source is None or line is None:
            return None
        lines = source.splitlines()
        if not 1 <= line <= len(lines):
            return None
        text = lines[line - 1].rstrip()
        if len(text) > self.max_excerpt_length:
            text = text[: self.max_excerpt_length] + "..."
        return text

    def _render_rust(self, diagnostic: Diagnostic, excerpt: str | None) -> str:
        lines = [f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        location = diagnostic.source_path
        if diagnostic.line is not None:
            location = f"{location}:{diagnostic.line}" if location else f"line {diagnostic.line}"
        if location:
            lines.append(f"  --> {location}")

        if excerpt is not None:
            number = str(diagnostic.line)
            gutter = " " * (len(number) + 2)
            lines.extend([f"{gutter}|", f" {number} | {excerpt}", f"{gutter}|"])

        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        return "\n".join(lines)

    def _render_simple(self, diagnostic: Diagnostic) -> str:
        text = f"{diagnostic.code.name}: {diagnostic.format_error()}"
        if diagnostic.source_path:
            return f"{diagnostic.source_path}: {text}"
        return text

    def _render_json(self, diagnostic: Diagnostic, excerpt: str | None) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "severity": diagnostic.severity,
            "message": diagnostic.message,
        }
        optional = {
            "line": diagnostic.line,
            "source_path": diagnostic.source_path,
            "hint": diagnostic.hint,
            "excerpt": excerpt,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return json.dumps(data, ensure_ascii=False)
