"""Language file snippets shared across test modules."""

from __future__ import annotations

ENGLISH_HEADER_SOURCE = (
    "<header>\n"
    "\tlanguage: English (UK)\n"
    "\tlocale: en_GB\n"
    "\timage: england.png\n"
    "\tplural_count: 2\n"
    "\tplural_definition: n == 1 ? 0 : 1\n"
    "\ttranslator: Zenju\n"
)


def singular(original: str, translation: str = "") -> str:
    """Render one singular entry; empty translation renders <empty>."""
    target = translation if translation else "<empty>"
    return f"\n<source> {original}\n<target> {target}\n"


def plural(original: tuple[str, str], *forms: str) -> str:
    """Render one plural entry; no forms renders <empty>."""
    lines = [
        "\n<source>",
        f"\t<pluralform> {original[0]}",
        f"\t<pluralform> {original[1]}",
        "<target>",
    ]
    if forms:
        lines.extend(f"\t<pluralform> {form}" for form in forms)
    else:
        lines.append("<empty>")
    return "\n".join(lines) + "\n"


def lng_file(*entries: str, header: str = ENGLISH_HEADER_SOURCE) -> bytes:
    """Assemble a complete file from a header and rendered entries."""
    return (header + "".join(entries)).encode("utf-8")
