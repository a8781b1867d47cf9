"""lngkit - Compiler for .lng translation resources.

Reads, validates and regenerates the line-oriented language files used to
localize desktop applications: a header (language, locale, flag image,
plural grammar, translator) followed by singular and plural entries.

Public API:
    parse_lng - Parse and validate a language file
    parse_header - Parse only the header of a language file
    generate_lng - Generate a language file from a header and entries
    TranslationList - Ordered entry set filled from old translations
    update_lng - Regenerate a file for the current application strings
    LngFileLoader - Load language files from a directory

Exceptions:
    LngError - Base exception class
    LngSyntaxError - Parse errors with row/column
    LngValidationError - Translation rule violations
    PluralGrammarError - Invalid plural definition

Submodules:
    lngkit.syntax - Scanner, parser, validator, model and generator
    lngkit.localization - Ordered entries, loading and update workflow
    lngkit.diagnostics - Error types, codes and formatting
    lngkit.plural_rules - Plural grammar protocol and default implementation
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    LngError,
    LngSyntaxError,
    LngValidationError,
    PluralGrammarError,
)
from .localization import LngFileLoader, TranslationList, update_lng
from .syntax import (
    LngParser,
    LngResource,
    TranslationHeader,
    generate_lng,
    parse_header,
    parse_lng,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("lngkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__recommended_encoding__ = "UTF-8"

__all__ = [
    "LngError",
    "LngFileLoader",
    "LngParser",
    "LngResource",
    "LngSyntaxError",
    "LngValidationError",
    "PluralGrammarError",
    "TranslationHeader",
    "TranslationList",
    "__recommended_encoding__",
    "__version__",
    "generate_lng",
    "parse_header",
    "parse_lng",
    "update_lng",
]
