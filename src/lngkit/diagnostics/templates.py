"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case.
    """

    # ------------------------------------------------------------------
    # Syntax
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_token(expected: str, found: str) -> Diagnostic:
        """Parser found a token other than the one the grammar requires.

        Args:
            expected: Description of the expected token
            found: Description of the token actually found

        Returns:
            Diagnostic for UNEXPECTED_TOKEN
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TOKEN,
            message=f"Unexpected token: expected {expected}, found {found}",
        )

    @staticmethod
    def header_item_missing(name: str) -> Diagnostic:
        """Mandatory header item is absent.

        Args:
            name: Header key (e.g. "locale")

        Returns:
            Diagnostic for HEADER_ITEM_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.HEADER_ITEM_MISSING,
            message=f'Cannot find header item "{name}:"',
            hint=f'Add a line "{name}: ..." to the <header> block',
        )

    @staticmethod
    def header_value_invalid(name: str, value: str) -> Diagnostic:
        """Header item has a value of the wrong type."""
        return Diagnostic(
            code=DiagnosticCode.HEADER_VALUE_INVALID,
            message=f'Invalid value for header item "{name}:": {value!r}',
            hint="plural_count must be an integer",
        )

    # ------------------------------------------------------------------
    # Plural grammar
    # ------------------------------------------------------------------

    @staticmethod
    def plural_definition_invalid(reason: str | None = None) -> Diagnostic:
        """Plural definition or count cannot be compiled.

        Args:
            reason: Detail from the grammar evaluator, if any

        Returns:
            Diagnostic for PLURAL_DEFINITION_INVALID
        """
        msg = "Invalid plural form definition"
        if reason:
            msg = f"{msg}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PLURAL_DEFINITION_INVALID,
            message=msg,
            hint="Use a gettext plural expression over n, e.g. n == 1 ? 0 : 1",
        )

    # ------------------------------------------------------------------
    # Source text structure
    # ------------------------------------------------------------------

    @staticmethod
    def source_text_empty() -> Diagnostic:
        """Original text of an entry is empty."""
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TEXT_EMPTY,
            message="Translation source text is empty",
        )

    @staticmethod
    def source_encoding_invalid() -> Diagnostic:
        """Original text is not valid UTF-8."""
        return Diagnostic(
            code=DiagnosticCode.ENCODING_INVALID,
            message="Translation source text contains UTF-8 encoding error",
        )

    @staticmethod
    def translation_encoding_invalid() -> Diagnostic:
        """Translated text is not valid UTF-8."""
        return Diagnostic(
            code=DiagnosticCode.ENCODING_INVALID,
            message="Translation text contains UTF-8 encoding error",
        )

    @staticmethod
    def text_encoding_invalid() -> Diagnostic:
        """Some text of a plural entry is not valid UTF-8."""
        return Diagnostic(
            code=DiagnosticCode.ENCODING_INVALID,
            message="Text contains UTF-8 encoding error",
        )

    @staticmethod
    def plural_source_placeholder_missing() -> Diagnostic:
        """Plural original is not parameterized."""
        return Diagnostic(
            code=DiagnosticCode.PLURAL_SOURCE_PLACEHOLDER_MISSING,
            message="Plural form source text does not contain %x placeholder",
        )

    @staticmethod
    def duplicate_entry(key: object) -> Diagnostic:
        """Entry key (original text or original pair) occurs more than once."""
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_ENTRY,
            message=f"Duplicate translation entry for source text {key!r}",
        )

    # ------------------------------------------------------------------
    # Translation content
    # ------------------------------------------------------------------

    @staticmethod
    def placeholder_missing(placeholder: str, *, plural: bool = False) -> Diagnostic:
        """Placeholder of the original is absent from a translated text.

        Args:
            placeholder: "%x", "%y" or "%z"
            plural: Whether the check ran over a plural entry

        Returns:
            Diagnostic for PLACEHOLDER_MISSING
        """
        where = "text" if plural else "translation"
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_MISSING,
            message=f"Placeholder {placeholder} missing in {where}",
        )

    @staticmethod
    def plural_form_placeholder_missing(index: int) -> Diagnostic:
        """Non single-number plural form lacks %x."""
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_MISSING,
            message=f"Plural form at index position {index} is missing the %x placeholder",
        )

    @staticmethod
    def line_break_mismatch(*, plural: bool = False) -> Diagnostic:
        """One-line original with multi-line translation."""
        if plural:
            msg = (
                "Source text is a one-liner, but at least one plural form "
                "translation consists of multiple lines"
            )
        else:
            msg = "Source text is a one-liner, but translation consists of multiple lines"
        return Diagnostic(code=DiagnosticCode.LINE_BREAK_MISMATCH, message=msg)

    @staticmethod
    def accelerator_mismatch() -> Diagnostic:
        """Menu accelerator count differs or exceeds one."""
        return Diagnostic(
            code=DiagnosticCode.ACCELERATOR_MISMATCH,
            message=(
                "Source and translation both need exactly one & character to mark "
                "a menu item access key or none at all"
            ),
            hint="Write && for a literal ampersand",
        )

    @staticmethod
    def accelerator_at_end() -> Diagnostic:
        """Text ends with a single &."""
        return Diagnostic(
            code=DiagnosticCode.ACCELERATOR_AT_END,
            message=(
                "The & character to mark a menu item access key must not occur "
                "at the end of a string"
            ),
        )

    @staticmethod
    def colon_missing() -> Diagnostic:
        """Original ends with a colon, translation does not."""
        return Diagnostic(
            code=DiagnosticCode.COLON_MISSING,
            message='Source text ends with a colon character ":", but translation does not',
        )

    @staticmethod
    def period_missing() -> Diagnostic:
        """Original ends with a period, translation does not."""
        return Diagnostic(
            code=DiagnosticCode.PERIOD_MISSING,
            message=(
                'Source text ends with a punctuation mark character ".", '
                "but translation does not"
            ),
        )

    @staticmethod
    def ellipsis_missing() -> Diagnostic:
        """Original ends with an ellipsis, translation does not."""
        return Diagnostic(
            code=DiagnosticCode.ELLIPSIS_MISSING,
            message='Source text ends with an ellipsis "...", but translation does not',
        )

    @staticmethod
    def protected_term_missing(term: str) -> Diagnostic:
        """Protected product or file name was altered."""
        return Diagnostic(
            code=DiagnosticCode.PROTECTED_TERM_MISSING,
            message=f'Misspelled "{term}" in translation',
            hint=f'"{term}" must not be translated',
        )

    @staticmethod
    def space_before_punctuation(char: str) -> Diagnostic:
        """Ordinary space in front of punctuation."""
        return Diagnostic(
            code=DiagnosticCode.SPACE_BEFORE_PUNCTUATION,
            message=(
                f'Text contains a space before the "{char}" character. '
                "Are line-breaks really allowed here?"
            ),
            hint='Maybe this should be a "non-breaking space" (U+00A0)?',
        )

    @staticmethod
    def plural_form_count_mismatch(actual: int, expected: int) -> Diagnostic:
        """Number of translated plural forms differs from the grammar."""
        return Diagnostic(
            code=DiagnosticCode.PLURAL_FORM_COUNT_MISMATCH,
            message=f"Invalid number of plural forms; actual: {actual}, expected: {expected}",
        )

    @staticmethod
    def plural_form_duplicate(index: int) -> Diagnostic:
        """Two plural forms without %x are identical."""
        return Diagnostic(
            code=DiagnosticCode.PLURAL_FORM_DUPLICATE,
            message=f"Duplicate plural form translation at index position {index}",
        )

    @staticmethod
    def plural_form_number_missing(index: int, number: int) -> Diagnostic:
        """Single-number form uses neither %x nor its number."""
        return Diagnostic(
            code=DiagnosticCode.PLURAL_FORM_NUMBER_MISSING,
            message=(
                f"Plural form translation at index position {index} needs to use "
                f"the decimal number {number} or the %x placeholder"
            ),
        )
