"""Translation validation rules.

Pure functions run once per entry, after its text is parsed and before it is
stored. Each rule violation raises LngValidationError without position; the
parser re-raises it at the current scanner position.

Rules on the original text (always checked):
    - original is non-empty
    - all texts are valid UTF-8
    - plural originals: the plural phrase contains %x

Rules on the translation (only for translated entries, in order):
    - placeholders %x, %y, %z of the original are kept
    - one-line originals stay one line
    - menu accelerators: at most one "&" ("&&" is a literal ampersand) and
      the same count on both sides
    - no text ends with a single "&"
    - trailing colon, period and ellipsis are kept (locale glyphs accepted)
    - protected terms are kept verbatim
    - no ordinary space before . ! ? : ; $ #

Plural entries apply the same rules across the full set of texts (both
originals plus every form), plus form count, duplicate and number rules that
need the plural grammar.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from lngkit.constants import (
    COLON_GLYPHS,
    DEFAULT_PROTECTED_TERMS,
    ELLIPSIS_GLYPHS,
    PERIOD_GLYPHS,
    PLACEHOLDERS,
    PRIMARY_PLACEHOLDER,
    SECONDARY_PLACEHOLDERS,
    SPACE_SENSITIVE_PUNCTUATION,
)
from lngkit.diagnostics import ErrorTemplate, LngValidationError
from lngkit.plural_rules import PluralGrammar

from .model import SingularPluralPair

__all__ = [
    "accelerator_count",
    "ends_with_colon",
    "ends_with_ellipsis",
    "ends_with_single_ampersand",
    "ends_with_single_period",
    "is_valid_utf8",
    "validate_plural_translation",
    "validate_translation",
]


# ============================================================================
# TEXT PREDICATES
# ============================================================================


def is_valid_utf8(text: str) -> bool:
    """Check that text holds no undecodable bytes (surrogate escapes)."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def accelerator_count(text: str) -> int:
    """Count menu accelerator markers.

    "&&" renders as a literal ampersand and is not counted.

    Example:
        >>> accelerator_count("Save && &Exit")
        1
    """
    return text.replace("&&", "").count("&")


def ends_with_single_ampersand(text: str) -> bool:
    """A trailing single "&" breaks menu rendering."""
    return text.endswith("&") and not text.endswith("&&")


def ends_with_colon(text: str) -> bool:
    """Text ends with ":" or the full-width colon."""
    return text.endswith(COLON_GLYPHS)


def ends_with_single_period(text: str) -> bool:
    """Text ends with exactly one period glyph ("..." does not count)."""
    return text.endswith(PERIOD_GLYPHS) and not text.endswith(
        tuple(glyph * 2 for glyph in PERIOD_GLYPHS)
    )


def ends_with_ellipsis(text: str) -> bool:
    """Text ends with "..." or the ellipsis character."""
    return text.endswith(ELLIPSIS_GLYPHS)


# ============================================================================
# SINGULAR ENTRIES
# ============================================================================


def validate_translation(
    original: str,
    translation: str,
    *,
    protected_terms: Sequence[str] = DEFAULT_PROTECTED_TERMS,
) -> None:
    """Validate a singular entry.

    Args:
        original: Source text
        translation: Translated text (empty = untranslated)
        protected_terms: Names that must appear verbatim in translations

    Raises:
        LngValidationError: On the first rule violation
    """
    if not original:
        raise LngValidationError(ErrorTemplate.source_text_empty())

    if not is_valid_utf8(original):
        raise LngValidationError(ErrorTemplate.source_encoding_invalid())
    if not is_valid_utf8(translation):
        raise LngValidationError(ErrorTemplate.translation_encoding_invalid())

    if not translation:
        return

    for placeholder in PLACEHOLDERS:
        if placeholder in original and placeholder not in translation:
            raise LngValidationError(ErrorTemplate.placeholder_missing(placeholder))

    if "\n" not in original and "\n" in translation:
        raise LngValidationError(ErrorTemplate.line_break_mismatch())

    amp_count = accelerator_count(original)
    if amp_count > 1 or amp_count != accelerator_count(translation):
        raise LngValidationError(ErrorTemplate.accelerator_mismatch())

    if ends_with_single_ampersand(original) or ends_with_single_ampersand(translation):
        raise LngValidationError(ErrorTemplate.accelerator_at_end())

    if ends_with_colon(original) and not ends_with_colon(translation):
        raise LngValidationError(ErrorTemplate.colon_missing())

    if ends_with_single_period(original) and not ends_with_single_period(translation):
        raise LngValidationError(ErrorTemplate.period_missing())

    if ends_with_ellipsis(original) and not ends_with_ellipsis(translation):
        raise LngValidationError(ErrorTemplate.ellipsis_missing())

    for term in protected_terms:
        if term in original and term not in translation:
            raise LngValidationError(ErrorTemplate.protected_term_missing(term))

    for char in SPACE_SENSITIVE_PUNCTUATION:
        if " " + char in original or " " + char in translation:
            raise LngValidationError(ErrorTemplate.space_before_punctuation(char))


# ============================================================================
# PLURAL ENTRIES
# ============================================================================


def _check_plural_forms(
    original: SingularPluralPair,
    forms: Sequence[str],
    grammar: PluralGrammar,
) -> None:
    """Rules that need the plural grammar."""
    if grammar.form_count != len(forms):
        raise LngValidationError(
            ErrorTemplate.plural_form_count_mismatch(len(forms), grammar.form_count)
        )

    # Catch copy & paste errors between single-number forms
    for index, form in enumerate(forms):
        if PRIMARY_PLACEHOLDER not in form:
            for later in range(index + 1, len(forms)):
                if forms[later] == form:
                    raise LngValidationError(ErrorTemplate.plural_form_duplicate(later))

    singular = original[0]
    for index, form in enumerate(forms):
        if grammar.is_single_number_form(index):
            # Translation must spell the number if the source text does
            if PRIMARY_PLACEHOLDER in singular or "1" in singular:
                number = grammar.first_number(index)
                if PRIMARY_PLACEHOLDER not in form and str(number) not in form:
                    raise LngValidationError(
                        ErrorTemplate.plural_form_number_missing(index, number)
                    )
        elif PRIMARY_PLACEHOLDER not in form:
            raise LngValidationError(ErrorTemplate.plural_form_placeholder_missing(index))


def validate_plural_translation(
    original: SingularPluralPair,
    forms: Sequence[str],
    grammar: PluralGrammar,
    *,
    protected_terms: Sequence[str] = DEFAULT_PROTECTED_TERMS,
) -> None:
    """Validate a plural entry.

    Args:
        original: Source singular and plural phrase
        forms: Translated plural forms (empty = untranslated)
        grammar: Plural grammar declared in the file header
        protected_terms: Names that must appear verbatim in translations

    Raises:
        LngValidationError: On the first rule violation
    """
    singular, plural = original
    if not singular or not plural:
        raise LngValidationError(ErrorTemplate.source_text_empty())

    all_texts = (singular, plural, *forms)
    if not all(is_valid_utf8(text) for text in all_texts):
        raise LngValidationError(ErrorTemplate.text_encoding_invalid())

    if PRIMARY_PLACEHOLDER not in plural:
        raise LngValidationError(ErrorTemplate.plural_source_placeholder_missing())

    if not forms:
        return

    _check_plural_forms(original, forms, grammar)

    # Secondary placeholders: in both source texts (or none) and all forms
    for placeholder in SECONDARY_PLACEHOLDERS:
        if placeholder in singular or placeholder in plural:
            if any(placeholder not in text for text in all_texts):
                raise LngValidationError(
                    ErrorTemplate.placeholder_missing(placeholder, plural=True)
                )

    if "\n" not in singular and "\n" not in plural and any("\n" in form for form in forms):
        raise LngValidationError(ErrorTemplate.line_break_mismatch(plural=True))

    amp_count = accelerator_count(singular)
    if amp_count > 1 or any(accelerator_count(text) != amp_count for text in all_texts):
        raise LngValidationError(ErrorTemplate.accelerator_mismatch())

    if any(ends_with_single_ampersand(text) for text in all_texts):
        raise LngValidationError(ErrorTemplate.accelerator_at_end())

    if singular.endswith(":") or plural.endswith(":"):
        if not all(ends_with_colon(text) for text in all_texts):
            raise LngValidationError(ErrorTemplate.colon_missing())

    if ends_with_single_period(singular) or ends_with_single_period(plural):
        if not all(ends_with_single_period(text) for text in all_texts):
            raise LngValidationError(ErrorTemplate.period_missing())

    if ends_with_ellipsis(singular) or ends_with_ellipsis(plural):
        if not all(ends_with_ellipsis(text) for text in all_texts):
            raise LngValidationError(ErrorTemplate.ellipsis_missing())

    for term in protected_terms:
        if term in singular or term in plural:
            if any(term not in text for text in all_texts):
                raise LngValidationError(ErrorTemplate.protected_term_missing(term))

    for char in SPACE_SENSITIVE_PUNCTUATION:
        if any(" " + char in text for text in all_texts):
            raise LngValidationError(ErrorTemplate.space_before_punctuation(char))
