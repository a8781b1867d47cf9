"""Shared constants for lngkit.

This module provides centralized constants used across the syntax and
localization packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Text format: Byte-order mark, whitespace set, line endings
- Validation: Placeholders, protected terms, punctuation glyphs
- Plural grammar: Probe range for form classification

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Text format
    "BYTE_ORDER_MARK",
    "WHITESPACE_CHARS",
    "OUTPUT_LINE_END",
    "LNG_FILE_SUFFIX",
    "HEADER_FIELD_ORDER",
    # Validation
    "PRIMARY_PLACEHOLDER",
    "SECONDARY_PLACEHOLDERS",
    "PLACEHOLDERS",
    "DEFAULT_PROTECTED_TERMS",
    "COLON_GLYPHS",
    "PERIOD_GLYPHS",
    "ELLIPSIS_GLYPHS",
    "SPACE_SENSITIVE_PUNCTUATION",
    # Plural grammar
    "PLURAL_PROBE_LIMIT",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in bytes (10 MB).
# Prevents DoS attacks via unbounded memory allocation from large .lng files.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# TEXT FORMAT
# ============================================================================

BYTE_ORDER_MARK: str = "\ufeff"

# ASCII whitespace only. U+00A0 (no-break space) is content, never trimmed.
WHITESPACE_CHARS: str = " \t\n\v\f\r"

# Language files are stored with Windows line endings.
OUTPUT_LINE_END: str = "\r\n"

LNG_FILE_SUFFIX: str = ".lng"

# (header key, TranslationHeader attribute) in canonical emission order.
HEADER_FIELD_ORDER: tuple[tuple[str, str], ...] = (
    ("language", "language_name"),
    ("locale", "locale"),
    ("image", "flag_file"),
    ("plural_count", "plural_count"),
    ("plural_definition", "plural_definition"),
    ("translator", "translator_name"),
)

# ============================================================================
# VALIDATION
# ============================================================================

PRIMARY_PLACEHOLDER: str = "%x"
SECONDARY_PLACEHOLDERS: tuple[str, ...] = ("%y", "%z")
PLACEHOLDERS: tuple[str, ...] = (PRIMARY_PLACEHOLDER, *SECONDARY_PLACEHOLDERS)

# Product and file names that must never be transliterated.
DEFAULT_PROTECTED_TERMS: tuple[str, ...] = (
    "FreeFileSync",
    "RealTimeSync",
    "ffs_gui",
    "ffs_batch",
    "ffs_real",
    "ffs_tmp",
    "GlobalSettings.xml",
)

COLON_GLYPHS: tuple[str, ...] = (
    ":",
    "：",  # Chinese full-width colon
)

PERIOD_GLYPHS: tuple[str, ...] = (
    ".",
    "।",  # Hindi danda
    "。",  # Chinese ideographic full stop
)

ELLIPSIS_GLYPHS: tuple[str, ...] = (
    "...",
    "…",  # horizontal ellipsis
)

# An ordinary space before one of these is most likely a missing U+00A0.
SPACE_SENSITIVE_PUNCTUATION: str = ".!?:;$#"

# ============================================================================
# PLURAL GRAMMAR
# ============================================================================

# Plural definitions are probed for n = 0 .. PLURAL_PROBE_LIMIT - 1.
# 1000 values are enough to tell single-number forms apart for every
# gettext plural rule in use.
PLURAL_PROBE_LIMIT: int = 1000
