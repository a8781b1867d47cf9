"""Hypothesis strategies for lngkit property-based testing.

Usage:
    from tests.strategies import lng_entry_lists, lng_headers
"""

from .lng import (
    lng_entry_lists,
    lng_headers,
    lng_multiline_text,
    lng_plain_text,
    lng_plural_forms,
    lng_plural_originals,
    lng_texts,
    lng_words,
)

__all__ = [
    "lng_entry_lists",
    "lng_headers",
    "lng_multiline_text",
    "lng_plain_text",
    "lng_plural_forms",
    "lng_plural_originals",
    "lng_texts",
    "lng_words",
]
