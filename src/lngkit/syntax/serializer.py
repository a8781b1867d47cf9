"""Generate canonical language files.

Converts a header plus an ordered translation set back to the byte stream
format the parser reads. Useful for:
- Refreshing language files after source strings changed
- Normalizing hand-edited files
- Property-based testing (roundtrip: parse -> generate -> parse)

Output conventions:
- Header items in fixed order, one per line, tab-indented
- One blank line before every entry
- Untranslated entries carry the <empty> marker so translators can search
  for them; optionally they are moved to the top of the file
- Windows line endings (CRLF) regardless of platform

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lngkit.constants import HEADER_FIELD_ORDER, OUTPUT_LINE_END
from lngkit.enums import TokenType

from .model import PluralEntry, SingularEntry, TranslationHeader

if TYPE_CHECKING:
    from lngkit.localization.ordered import TranslationList

__all__ = ["SerializationValidationError", "generate_lng"]

logger = logging.getLogger(__name__)


class SerializationValidationError(ValueError):
    """Raised when generated text would not survive a round trip.

    Every field must already use \\n line breaks before the final
    CRLF conversion; a stray \\r means the model was built from unnormalized
    text.
    """


def _format_header(header: TranslationHeader) -> str:
    lines = [str(TokenType.HEADER)]
    for key, attribute in HEADER_FIELD_ORDER:
        lines.append(f"\t{key}: {getattr(header, attribute)}")
    return "\n".join(lines)


def _format_singular(entry: SingularEntry) -> str:
    parts = ["\n\n", f"{TokenType.SOURCE} {entry.original}\n"]
    if "\n" in entry.original:
        parts.append("\n")
    parts.append(f"{TokenType.TARGET} {entry.translation}")
    if not entry.translation:
        parts.append(str(TokenType.EMPTY))
    return "".join(parts)


def _format_plural(entry: PluralEntry) -> str:
    singular, plural = entry.original
    parts = [
        "\n\n",
        f"{TokenType.SOURCE}\n",
        f"\t{TokenType.PLURAL} {singular}\n",
        f"\t{TokenType.PLURAL} {plural}\n",
        str(TokenType.TARGET),
    ]
    parts.extend(f"\n\t{TokenType.PLURAL} {form}" for form in entry.forms)
    if not entry.forms:
        parts.append(f" {TokenType.EMPTY}")
    return "".join(parts)


def generate_lng(
    translations: TranslationList,
    header: TranslationHeader,
    *,
    untranslated_to_top: bool = False,
) -> bytes:
    """Serialize header and entries to a language file.

    Args:
        translations: Entries in emission order
        header: File header
        untranslated_to_top: Emit untranslated entries before all others;
            order within each group is kept

    Returns:
        UTF-8 encoded file content with CRLF line endings

    Raises:
        SerializationValidationError: If any field contains a carriage return

    Example:
        >>> entries = TranslationList({"Hello": "Bonjour"})
        >>> entries.add_singular("Hello")
        >>> generate_lng(entries, header).endswith(b"<target> Bonjour")
        True
    """
    top: list[str] = []
    main: list[str] = []

    def on_singular(entry: SingularEntry) -> None:
        bucket = top if untranslated_to_top and not entry.has_translation else main
        bucket.append(_format_singular(entry))

    def on_plural(entry: PluralEntry) -> None:
        bucket = top if untranslated_to_top and not entry.has_translation else main
        bucket.append(_format_plural(entry))

    translations.for_each(on_singular, on_plural)

    output = "".join([_format_header(header), *top, *main])
    if "\r" in output:
        msg = "Generated text contains a carriage return; normalize line breaks to \\n first"
        raise SerializationValidationError(msg)

    logger.debug(
        "Generated language file for %s: %d untranslated first, %d other entries",
        header.locale,
        len(top),
        len(main),
    )
    return output.replace("\n", OUTPUT_LINE_END).encode("utf-8", errors="surrogateescape")
