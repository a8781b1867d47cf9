"""Plural form grammar for language files.

A language file header declares its plural grammar as a form count plus a
gettext plural expression (C syntax over ``n``, e.g. ``n == 1 ? 0 : 1``).
The validator only needs three queries from it, captured by the
PluralGrammar protocol. PluralFormInfo is the default implementation.

Form classification:
    The expression is evaluated for n = 0 .. PLURAL_PROBE_LIMIT - 1. A form
    selected by exactly one n is a "single number form" (e.g. the "1 file"
    form in English); its translation may spell that number instead of %x.

Python 3.13+. Depends on Babel for per-locale gettext plural rules.
"""

import gettext
from dataclasses import dataclass
from typing import Protocol

from babel.messages.plurals import get_plural

from lngkit.constants import PLURAL_PROBE_LIMIT
from lngkit.diagnostics import ErrorTemplate, PluralGrammarError
from lngkit.locale_utils import normalize_locale

__all__ = [
    "PluralFormInfo",
    "PluralGrammar",
    "PluralGrammarFactory",
    "plural_rule_for_locale",
]


class PluralGrammar(Protocol):
    """Queries the validator runs against a plural grammar."""

    @property
    def form_count(self) -> int:
        """Total number of plural forms."""
        ...

    def is_single_number_form(self, index: int) -> bool:
        """Whether form ``index`` is used for exactly one number."""
        ...

    def first_number(self, index: int) -> int:
        """Smallest number that selects form ``index``."""
        ...


class PluralGrammarFactory(Protocol):
    """Builds a grammar from (definition, count); raises PluralGrammarError."""

    def __call__(self, definition: str, count: int) -> PluralGrammar: ...


@dataclass(frozen=True, slots=True)
class _FormUsage:
    count: int
    first_number: int


class PluralFormInfo:
    """Plural grammar compiled from a gettext plural expression.

    Example:
        >>> info = PluralFormInfo("n == 1 ? 0 : 1", 2)
        >>> info.form_count
        2
        >>> info.is_single_number_form(0), info.first_number(0)
        (True, 1)
        >>> info.is_single_number_form(1), info.first_number(1)
        (False, 0)
    """

    __slots__ = ("_definition", "_forms")

    def __init__(self, definition: str, count: int) -> None:
        """Compile and classify a plural definition.

        Args:
            definition: gettext plural expression over n
            count: Declared number of plural forms

        Raises:
            PluralGrammarError: If the expression does not compile, selects a
                form outside [0, count), or never selects some form
        """
        if count < 1:
            raise PluralGrammarError(
                ErrorTemplate.plural_definition_invalid(f"plural_count must be >= 1, got {count}")
            )
        # More forms than probed numbers: some form can never be hit
        if count > PLURAL_PROBE_LIMIT:
            raise PluralGrammarError(
                ErrorTemplate.plural_definition_invalid(
                    f"plural_count must be <= {PLURAL_PROBE_LIMIT}, got {count}"
                )
            )

        try:
            select = gettext.c2py(definition)
        except ValueError as e:
            raise PluralGrammarError(ErrorTemplate.plural_definition_invalid(str(e))) from e

        hits = [0] * count
        firsts = [-1] * count
        for n in range(PLURAL_PROBE_LIMIT):
            try:
                form = select(n)
            except ArithmeticError as e:
                raise PluralGrammarError(
                    ErrorTemplate.plural_definition_invalid(f"evaluation failed for n = {n}: {e}")
                ) from e
            if not 0 <= form < count:
                raise PluralGrammarError(
                    ErrorTemplate.plural_definition_invalid(
                        f"n = {n} selects form {form}, expected 0..{count - 1}"
                    )
                )
            if hits[form] == 0:
                firsts[form] = n
            hits[form] += 1

        unused = [index for index, hit in enumerate(hits) if hit == 0]
        if unused:
            raise PluralGrammarError(
                ErrorTemplate.plural_definition_invalid(f"plural form {unused[0]} is never used")
            )

        self._definition = definition
        self._forms = tuple(
            _FormUsage(count=hit, first_number=first)
            for hit, first in zip(hits, firsts, strict=True)
        )

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"PluralFormInfo({self._definition!r}, {len(self._forms)})"

    @property
    def definition(self) -> str:
        """The compiled plural expression."""
        return self._definition

    @property
    def form_count(self) -> int:
        """Total number of plural forms."""
        return len(self._forms)

    def is_single_number_form(self, index: int) -> bool:
        """Whether form ``index`` is used for exactly one probed number."""
        return self._forms[index].count == 1

    def first_number(self, index: int) -> int:
        """Smallest probed number that selects form ``index``."""
        return self._forms[index].first_number


def plural_rule_for_locale(locale_code: str) -> tuple[int, str]:
    """Look up the gettext plural rule of a locale in Babel's plural table.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        (plural_count, plural_definition); locales missing from the table get
        Babel's default rule (2, "(n != 1)")

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> plural_rule_for_locale("de_DE")
        (2, '(n != 1)')
    """
    rule = get_plural(normalize_locale(locale_code))
    return rule.num_plurals, rule.plural_expr
