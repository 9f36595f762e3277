"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from ctxi18n.constants import ID_ATTRIBUTE, LANG_ATTRIBUTE, ROOT_TAG

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Usage errors
    # ------------------------------------------------------------------

    @staticmethod
    def language_not_set() -> Diagnostic:
        """Load attempted before set_target_language().

        Returns:
            Diagnostic for LANGUAGE_NOT_SET
        """
        return Diagnostic(
            code=DiagnosticCode.LANGUAGE_NOT_SET,
            message="Language must be set before loading localization files",
            hint="Call set_target_language() on the root localizer first",
        )

    # ------------------------------------------------------------------
    # Formatting errors
    # ------------------------------------------------------------------

    @staticmethod
    def format_failed(template: str, error_msg: str) -> Diagnostic:
        """Localized template could not be combined with its arguments.

        Args:
            template: The (possibly localized) format template
            error_msg: Message of the underlying str.format() failure

        Returns:
            Diagnostic for FORMAT_FAILED
        """
        msg = f"Cannot format '{template}': {error_msg}"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_FAILED,
            message=msg,
            hint="Check that every placeholder has a matching argument",
        )

    # ------------------------------------------------------------------
    # Document errors
    # ------------------------------------------------------------------

    @staticmethod
    def malformed_xml(reason: str, line: int | None) -> Diagnostic:
        """Document is not well-formed XML.

        Args:
            reason: Description reported by the XML parser
            line: Line reported by the XML parser

        Returns:
            Diagnostic for MALFORMED_XML
        """
        msg = f"Malformed XML: {reason}"
        return Diagnostic(code=DiagnosticCode.MALFORMED_XML, message=msg, line=line)

    @staticmethod
    def invalid_root_element(line: int) -> Diagnostic:
        """Root element is not <I18N>.

        Args:
            line: Line of the root element

        Returns:
            Diagnostic for INVALID_ROOT_ELEMENT
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_ROOT_ELEMENT,
            message="Invalid XML root element",
            line=line,
            hint=f"The document root must be <{ROOT_TAG}>",
        )

    @staticmethod
    def invalid_element(tag: str, line: int) -> Diagnostic:
        """Element not allowed at this position.

        Args:
            tag: Tag of the offending element
            line: Line of the offending element

        Returns:
            Diagnostic for INVALID_ELEMENT
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_ELEMENT,
            message="Invalid XML element",
            line=line,
            hint=f"Element <{tag}> is not allowed here",
        )

    @staticmethod
    def too_many_keys(tag: str, line: int) -> Diagnostic:
        """Second Key element inside an Entry.

        Args:
            tag: Tag of the duplicate element
            line: Line of the duplicate element

        Returns:
            Diagnostic for DUPLICATE_KEY
        """
        msg = f"Too many child '{tag}' XML elements"
        return Diagnostic(code=DiagnosticCode.DUPLICATE_KEY, message=msg, line=line)

    @staticmethod
    def too_many_values(tag: str, line: int) -> Diagnostic:
        """Second Value element for the same target language inside an Entry.

        Args:
            tag: Tag of the duplicate element
            line: Line of the duplicate element

        Returns:
            Diagnostic for DUPLICATE_VALUE
        """
        msg = f"Too many child '{tag}' XML elements with the same '{LANG_ATTRIBUTE}' attribute"
        return Diagnostic(code=DiagnosticCode.DUPLICATE_VALUE, message=msg, line=line)

    @staticmethod
    def missing_key(tag: str, line: int) -> Diagnostic:
        """Entry element without a Key child.

        Args:
            tag: Tag of the missing child
            line: Line of the Entry element

        Returns:
            Diagnostic for MISSING_KEY
        """
        msg = f"Missing child '{tag}' XML element"
        return Diagnostic(code=DiagnosticCode.MISSING_KEY, message=msg, line=line)

    @staticmethod
    def missing_attribute(attribute: str, tag: str, line: int) -> Diagnostic:
        """Required attribute absent.

        Args:
            attribute: Name of the missing attribute
            tag: Tag of the element lacking it
            line: Line of the element

        Returns:
            Diagnostic for MISSING_ATTRIBUTE
        """
        msg = f"Missing attribute '{attribute}' in '{tag}' XML element"
        hint = None
        if attribute == ID_ATTRIBUTE:
            hint = "Context ids are dot-separated paths, e.g. id=\"menu.file\""
        return Diagnostic(
            code=DiagnosticCode.MISSING_ATTRIBUTE,
            message=msg,
            line=line,
            hint=hint,
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, line: int | None = None) -> Diagnostic:
        """Context elements nested beyond the depth limit.

        Args:
            max_depth: Configured maximum depth
            line: Line of the Context element that crossed the limit

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum context nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            line=line,
            hint="Use dotted context ids instead of deeply nested Context elements",
        )
