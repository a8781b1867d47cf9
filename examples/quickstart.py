"""Quickstart Example - Parse, Update and Generate a Language File.

Walks through the full maintenance cycle of one translation file:

1. Parse an existing file and inspect its header and entries
2. Catch a validation error with its position
3. Regenerate the file for a changed set of application strings
4. Create a brand-new file from Babel locale data

Python 3.13+.
"""

from __future__ import annotations

from lngkit import LngSyntaxError, parse_lng, update_lng
from lngkit.localization import new_header

GERMAN = """\
<header>
	language: Deutsch
	locale: de_DE
	image: germany.png
	plural_count: 2
	plural_definition: n == 1 ? 0 : 1
	translator: Max Mustermann

<source> &Open
<target> Ö&ffnen

<source>
	<pluralform> 1 file
	<pluralform> %x files
<target>
	<pluralform> 1 Datei
	<pluralform> %x Dateien

<source> Removed feature
<target> Entfernte Funktion
""".encode()


def example_1_parse() -> None:
    """Parse a file and inspect it."""
    print("=" * 60)
    print("Example 1: Parse")
    print("=" * 60)

    resource = parse_lng(GERMAN)
    print(f"Language: {resource.header.language_name} ({resource.header.locale})")
    for original, translation in resource.translations.items():
        print(f"  {original!r} -> {translation!r}")
    for (singular, plural), forms in resource.plural_translations.items():
        print(f"  {singular!r} / {plural!r} -> {forms}")


def example_2_errors() -> None:
    """Validation errors carry a code and a 0-based position."""
    print("\n" + "=" * 60)
    print("Example 2: Validation Error")
    print("=" * 60)

    broken = GERMAN.replace("Ö&ffnen".encode(), "Öffnen".encode())
    try:
        parse_lng(broken)
    except LngSyntaxError as e:
        print(e)
        print(f"row={e.row}, col={e.col}")


def example_3_update() -> None:
    """Regenerate for the strings the application uses today."""
    print("\n" + "=" * 60)
    print("Example 3: Update")
    print("=" * 60)

    wanted = ["&Open", "New feature", ("1 file", "%x files")]
    output = update_lng(GERMAN, wanted, untranslated_to_top=True)
    print(output.decode().replace("\r\n", "\n"))


def example_4_new_file() -> None:
    """Start a translation for a new locale."""
    print("\n" + "=" * 60)
    print("Example 4: New File")
    print("=" * 60)

    header = new_header("pl-PL", translator="Jan", flag_file="poland.png")
    output = update_lng(None, ["&Open", ("1 file", "%x files")], header=header)
    print(output.decode().replace("\r\n", "\n"))


if __name__ == "__main__":
    example_1_parse()
    example_2_errors()
    example_3_update()
    example_4_new_file()
