"""Language File Checker Example - Validating a Directory of .lng Files.

Demonstrates how to build a small CI check on top of lngkit:

1. Discover every .lng file in a directory
2. Parse and validate each one (never raises; failures become results)
3. Print diagnostics in Rust, simple or JSON style
4. Report untranslated entries per file

Usage:
    python examples/lng_checker.py Languages/
    python examples/lng_checker.py Languages/ --format json

Exit status is 1 if any file fails to parse.

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys

from lngkit.diagnostics import DiagnosticFormatter, LngError, OutputFormat
from lngkit.localization import LngFileLoader, LngLoadResult


def describe_failure(result: LngLoadResult, formatter: DiagnosticFormatter) -> str:
    """Render the error of a failed load."""
    match result.error:
        case LngError(diagnostic=diagnostic) if diagnostic is not None:
            return formatter.format(diagnostic, path=result.path)
        case error:
            return str(error)


def check_directory(root: str, output_format: OutputFormat) -> int:
    """Check all language files below root; return the number of failures."""
    loader = LngFileLoader(root)
    formatter = DiagnosticFormatter(output_format=output_format, sanitize=True)
    failures = 0

    names = loader.available()
    if not names:
        print(f"No language files found in {root}")
        return 0

    for result in loader.load_all():
        if result.is_success and result.resource is not None:
            resource = result.resource
            untranslated = sum(1 for text in resource.translations.values() if not text)
            untranslated += sum(1 for forms in resource.plural_translations.values() if not forms)
            total = len(resource.translations) + len(resource.plural_translations)
            print(
                f"[OK]    {result.path}: {resource.header.language_name} "
                f"({total} entries, {untranslated} untranslated)"
            )
        else:
            failures += 1
            print(f"[FAIL]  {result.path}")
            print(describe_failure(result, formatter))

    print(f"\n{len(names) - failures}/{len(names)} files passed")
    return failures


def main() -> None:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Validate .lng translation files")
    parser.add_argument("directory", help="Directory containing .lng files")
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Diagnostic output style",
    )
    parser.add_argument("--verbose", action="store_true", help="Show library log messages")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.ERROR)
    failures = check_directory(args.directory, OutputFormat(args.format))
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
