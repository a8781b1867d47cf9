"""Rendering of diagnostics for terminals, editors and tools.

Three styles:
    rust   - multi-line, with location arrow, optional source excerpt and hint
    simple - one line, ``path:row:col: CODE: message`` (editor quickfix lists)
    json   - one JSON object per diagnostic

Rows and columns are printed 0-based, exactly as stored in SourcePosition.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_RED = "\033[1;31m"
_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Diagnostic rendering style."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Renders Diagnostic objects.

    Attributes:
        output_format: Rendering style
        sanitize: Shorten messages longer than max_content_length; entry texts
            quoted in messages can be arbitrarily long
        color: Highlight the "error" label with ANSI escape codes
        max_content_length: Message length limit when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> formatter.format(ErrorTemplate.source_text_empty())
        'SOURCE_TEXT_EMPTY: Translation source text is empty'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(
        self,
        diagnostic: Diagnostic,
        *,
        source: str | None = None,
        path: str | None = None,
    ) -> str:
        """Render one diagnostic.

        Args:
            diagnostic: Diagnostic to render
            source: Decoded file content; enables the source excerpt in rust style
            path: File name shown in front of the location
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._rust(diagnostic, source, path)
            case OutputFormat.SIMPLE:
                return self._simple(diagnostic, path)
            case OutputFormat.JSON:
                return self._json(diagnostic, path)

    def format_all(self, diagnostics: Iterable[Diagnostic], *, path: str | None = None) -> str:
        """Render several diagnostics, separated by blank lines."""
        return "\n\n".join(self.format(item, path=path) for item in diagnostics)

    def _rust(self, diagnostic: Diagnostic, source: str | None, path: str | None) -> str:
        """Example output:
            error[COLON_MISSING]: Source text ends with a colon character ":", ...
              --> german.lng, row 4, column 0
               |
             4 | <target> Nom
               | ^
        """
        label = f"{_RED}error{_RESET}" if self.color else "error"
        lines = [f"{label}[{diagnostic.code.name}]: {self._shorten(diagnostic.message)}"]

        position = diagnostic.position
        if position is not None:
            where = f"row {position.row}, column {position.col}"
            lines.append(f"  --> {path}, {where}" if path else f"  --> {where}")
            if source is not None:
                lines.extend(_excerpt(source, position.row, position.col))
        elif path:
            lines.append(f"  --> {path}")

        if diagnostic.hint:
            lines.append(f"  = help: {self._shorten(diagnostic.hint)}")
        return "\n".join(lines)

    def _simple(self, diagnostic: Diagnostic, path: str | None) -> str:
        """Example output:
            german.lng:3:17: PLACEHOLDER_MISSING: Placeholder %x missing in translation
        """
        text = f"{diagnostic.code.name}: {self._shorten(diagnostic.message)}"
        position = diagnostic.position
        if position is None:
            return f"{path}: {text}" if path else text
        if path:
            return f"{path}:{position.row}:{position.col}: {text}"
        return f"{text} ({position.row}:{position.col})"

    def _json(self, diagnostic: Diagnostic, path: str | None) -> str:
        record: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._shorten(diagnostic.message),
        }
        if path:
            record["path"] = path
        if diagnostic.position is not None:
            record["row"] = diagnostic.position.row
            record["col"] = diagnostic.position.col
        if diagnostic.hint:
            record["hint"] = self._shorten(diagnostic.hint)
        return json.dumps(record, ensure_ascii=False)

    def _shorten(self, text: str) -> str:
        if not self.sanitize or len(text) <= self.max_content_length:
            return text
        return text[: self.max_content_length] + "..."


def _excerpt(source: str, row: int, col: int) -> list[str]:
    """Source line at row with a caret under col; empty if row is out of range."""
    source_lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if row >= len(source_lines):
        return []
    gutter = " " * len(str(row))
    return [
        f" {gutter} |",
        f" {row} | {source_lines[row]}",
        f" {gutter} | {' ' * col}^",
    ]
