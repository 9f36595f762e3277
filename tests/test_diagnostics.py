"""Tests for diagnostics: codes, templates, exceptions and formatting.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest

from ctxi18n.diagnostics import (
    ConfigurationError,
    DepthLimitExceededError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    FormattingError,
    LocalizationError,
    OutputFormat,
    ParseError,
    UsageError,
)
from ctxi18n.diagnostics.templates import ErrorTemplate


class TestDiagnostic:
    """Diagnostic data structure."""

    def test_format_error_with_line(self) -> None:
        """Line prefix is added when known."""
        diagnostic = Diagnostic(DiagnosticCode.INVALID_ELEMENT, "Invalid XML element", line=7)

        assert diagnostic.format_error() == "Line 7: Invalid XML element"

    def test_format_error_without_line(self) -> None:
        """Message alone when the line is unknown."""
        diagnostic = Diagnostic(DiagnosticCode.LANGUAGE_NOT_SET, "msg")

        assert diagnostic.format_error() == "msg"
        assert str(diagnostic) == "msg"

    def test_with_source_path(self) -> None:
        """Copy gains the path; the original is unchanged."""
        diagnostic = ErrorTemplate.missing_key("Key", 4)

        located = diagnostic.with_source_path("a.xml")

        assert located.source_path == "a.xml"
        assert located.line == 4
        assert located.code is diagnostic.code
        assert diagnostic.source_path is None

    def test_codes_unique(self) -> None:
        """Every code has a distinct numeric value."""
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))


class TestErrorTemplate:
    """Message wording of document errors."""

    @pytest.mark.parametrize(
        ("diagnostic", "code", "message"),
        [
            (
                ErrorTemplate.invalid_root_element(1),
                DiagnosticCode.INVALID_ROOT_ELEMENT,
                "Invalid XML root element",
            ),
            (
                ErrorTemplate.invalid_element("Item", 2),
                DiagnosticCode.INVALID_ELEMENT,
                "Invalid XML element",
            ),
            (
                ErrorTemplate.too_many_keys("Key", 3),
                DiagnosticCode.DUPLICATE_KEY,
                "Too many child 'Key' XML elements",
            ),
            (
                ErrorTemplate.too_many_values("Value", 4),
                DiagnosticCode.DUPLICATE_VALUE,
                "Too many child 'Value' XML elements with the same 'lang' attribute",
            ),
            (
                ErrorTemplate.missing_key("Key", 5),
                DiagnosticCode.MISSING_KEY,
                "Missing child 'Key' XML element",
            ),
            (
                ErrorTemplate.missing_attribute("id", "Context", 6),
                DiagnosticCode.MISSING_ATTRIBUTE,
                "Missing attribute 'id' in 'Context' XML element",
            ),
        ],
    )
    def test_messages(self, diagnostic: Diagnostic, code: DiagnosticCode, message: str) -> None:
        """Each template yields its code and message."""
        assert diagnostic.code is code
        assert diagnostic.message == message

    def test_invalid_element_hint_names_tag(self) -> None:
        """Hint tells which element was unexpected."""
        assert ErrorTemplate.invalid_element("Item", 2).hint == "Element <Item> is not allowed here"

    def test_nesting_depth(self) -> None:
        """Depth diagnostic includes the limit."""
        diagnostic = ErrorTemplate.nesting_depth_exceeded(10, line=12)

        assert "(10)" in diagnostic.message
        assert diagnostic.line == 12

    def test_format_failed(self) -> None:
        """Formatting diagnostic quotes the template."""
        diagnostic = ErrorTemplate.format_failed("{0} {1}", "Replacement index 1 out of range")

        assert diagnostic.code is DiagnosticCode.FORMAT_FAILED
        assert "'{0} {1}'" in diagnostic.message


class TestExceptionHierarchy:
    """Exception classes and their diagnostic payloads."""

    def test_hierarchy(self) -> None:
        """All package errors derive from LocalizationError."""
        assert issubclass(UsageError, LocalizationError)
        assert issubclass(ConfigurationError, UsageError)
        assert issubclass(ParseError, LocalizationError)
        assert issubclass(DepthLimitExceededError, ParseError)
        assert issubclass(FormattingError, LocalizationError)

    def test_plain_message(self) -> None:
        """String messages leave diagnostic unset."""
        error = LocalizationError("boom")

        assert error.diagnostic is None
        assert str(error) == "boom"

    def test_diagnostic_message(self) -> None:
        """Diagnostic messages render with the line prefix."""
        error = ParseError(ErrorTemplate.missing_key("Key", 9).with_source_path("x.xml"))

        assert str(error) == "Line 9: Missing child 'Key' XML element"
        assert error.line == 9
        assert error.source_path == "x.xml"

    def test_parse_error_without_diagnostic(self) -> None:
        """line and source_path are None for plain messages."""
        error = ParseError("bad")

        assert error.line is None
        assert error.source_path is None

    def test_formatting_error_fallback(self) -> None:
        """FormattingError keeps the failed template."""
        error = FormattingError("bad", fallback_value="{0}")

        assert error.fallback_value == "{0}"


class TestDiagnosticFormatter:
    """Rendering diagnostics for translators and tools."""

    DIAGNOSTIC = ErrorTemplate.too_many_values("Value", 5).with_source_path("strings.xml")
    SOURCE = (
        "<I18N>\n"
        "  <Entry>\n"
        "    <Key>Hello</Key>\n"
        '    <Value lang="fr">Bonjour</Value>\n'
        '    <Value lang="fr">Salut</Value>\n'
        "  </Entry>\n"
        "</I18N>\n"
    )

    def test_rust_format(self) -> None:
        """Default output is compiler style with a location arrow."""
        output = DiagnosticFormatter().format(self.DIAGNOSTIC)

        assert output == (
            "error[DUPLICATE_VALUE]: Too many child 'Value' XML elements "
            "with the same 'lang' attribute\n"
            "  --> strings.xml:5"
        )

    def test_rust_format_quotes_source_line(self) -> None:
        """The offending line is quoted when the source is given."""
        output = DiagnosticFormatter().format(self.DIAGNOSTIC, source=self.SOURCE)

        assert output.splitlines()[1:] == [
            "  --> strings.xml:5",
            "   |",
            ' 5 |     <Value lang="fr">Salut</Value>',
            "   |",
        ]

    def test_excerpt_skipped_for_out_of_range_line(self) -> None:
        """A line past the end of the source is not quoted."""
        diagnostic = ErrorTemplate.missing_key("Key", 40)

        output = DiagnosticFormatter().format(diagnostic, source=self.SOURCE)

        assert "|" not in output

    def test_long_excerpt_truncated(self) -> None:
        """Quoted lines are cut at max_excerpt_length."""
        formatter = DiagnosticFormatter(max_excerpt_length=10)
        diagnostic = ErrorTemplate.invalid_element("Item", 1)

        output = formatter.format(diagnostic, source="<I18N>" + "x" * 50)

        assert " 1 | <I18N>xxxx..." in output

    def test_rust_format_line_only(self) -> None:
        """Without a path the line is shown alone."""
        output = DiagnosticFormatter().format(ErrorTemplate.missing_key("Key", 7))

        assert output == "error[MISSING_KEY]: Missing child 'Key' XML element\n  --> line 7"

    def test_rust_format_with_hint(self) -> None:
        """Hints are rendered as help lines."""
        output = DiagnosticFormatter().format(ErrorTemplate.invalid_root_element(1))

        assert output.endswith("  = help: The document root must be <I18N>")

    def test_rust_format_path_only(self) -> None:
        """Path without a line."""
        diagnostic = ErrorTemplate.language_not_set().with_source_path("a.xml")

        assert "  --> a.xml\n" in DiagnosticFormatter().format(diagnostic)

    def test_simple_format(self) -> None:
        """Single line with code name and line prefix."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(ErrorTemplate.missing_key("Key", 7)) == (
            "MISSING_KEY: Line 7: Missing child 'Key' XML element"
        )

    def test_simple_format_with_path(self) -> None:
        """Source path prefixes the simple line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(self.DIAGNOSTIC).startswith("strings.xml: DUPLICATE_VALUE: Line 5: ")

    def test_json_format(self) -> None:
        """JSON output includes location, code details and the excerpt."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(self.DIAGNOSTIC, source=self.SOURCE))

        assert data["code"] == "DUPLICATE_VALUE"
        assert data["code_value"] == DiagnosticCode.DUPLICATE_VALUE.value
        assert data["line"] == 5
        assert data["source_path"] == "strings.xml"
        assert data["severity"] == "error"
        assert data["excerpt"] == '    <Value lang="fr">Salut</Value>'
        assert "hint" not in data

    def test_format_error_uses_diagnostic(self) -> None:
        """Exceptions carrying a diagnostic render like the diagnostic."""
        formatter = DiagnosticFormatter()
        error = ParseError(self.DIAGNOSTIC)

        assert formatter.format_error(error) == formatter.format(self.DIAGNOSTIC)

    def test_format_error_plain_message(self) -> None:
        """Exceptions without a diagnostic render as their message."""
        assert DiagnosticFormatter().format_error(UsageError("plain")) == "plain"

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [ErrorTemplate.missing_key("Key", 1), ErrorTemplate.missing_key("Key", 2)]

        assert formatter.format_all(diagnostics).count("\n\n") == 1
