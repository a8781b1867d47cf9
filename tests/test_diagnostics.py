"""Tests for diagnostics: codes, positions, exceptions and formatting."""

from __future__ import annotations

import json

import pytest

from lngkit.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    LngError,
    LngSyntaxError,
    LngValidationError,
    OutputFormat,
    PluralGrammarError,
    SourcePosition,
)


class TestDiagnosticCode:
    """Codes are unique and grouped by range."""

    def test_unique_values(self) -> None:
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    def test_ranges(self) -> None:
        assert 3000 <= DiagnosticCode.UNEXPECTED_TOKEN.value < 4000
        assert 4000 <= DiagnosticCode.PLURAL_DEFINITION_INVALID.value < 5000
        assert 5000 <= DiagnosticCode.COLON_MISSING.value < 6000


class TestSourcePosition:
    """Positions are 0-based and non-negative."""

    @pytest.mark.parametrize(("row", "col"), [(-1, 0), (0, -1)])
    def test_negative_rejected(self, row: int, col: int) -> None:
        with pytest.raises(ValueError, match="must be >= 0"):
            SourcePosition(row=row, col=col)


class TestDiagnostic:
    """Diagnostic values and relocation."""

    def test_at_returns_located_copy(self) -> None:
        diagnostic = ErrorTemplate.colon_missing()
        located = diagnostic.at(SourcePosition(3, 4))
        assert diagnostic.position is None
        assert located.position == SourcePosition(3, 4)
        assert located.message == diagnostic.message
        assert located.code == diagnostic.code

    def test_str_is_message(self) -> None:
        assert str(ErrorTemplate.source_text_empty()) == "Translation source text is empty"

    def test_format_error(self) -> None:
        diagnostic = ErrorTemplate.placeholder_missing("%x").at(SourcePosition(12, 8))
        assert diagnostic.format_error() == (
            "error[PLACEHOLDER_MISSING]: Placeholder %x missing in translation\n"
            "  --> row 12, column 8"
        )


class TestExceptions:
    """Exception hierarchy and positional accessors."""

    def test_hierarchy(self) -> None:
        assert issubclass(LngSyntaxError, LngError)
        assert issubclass(LngValidationError, LngSyntaxError)
        assert issubclass(PluralGrammarError, LngError)
        assert not issubclass(PluralGrammarError, LngSyntaxError)

    def test_plain_message(self) -> None:
        error = LngSyntaxError("boom")
        assert error.message == "boom"
        assert error.diagnostic is None
        assert error.position is None
        assert error.row is None
        assert error.col is None

    def test_at_keeps_type(self) -> None:
        error = LngValidationError(ErrorTemplate.colon_missing())
        located = error.at(SourcePosition(2, 5))
        assert type(located) is LngValidationError
        assert (located.row, located.col) == (2, 5)
        assert "--> row 2, column 5" in str(located)

    def test_at_without_diagnostic(self) -> None:
        error = LngSyntaxError("boom")
        assert error.at(SourcePosition(1, 1)) is error


class TestTemplates:
    """Messages carry the offending values."""

    def test_header_item_missing(self) -> None:
        assert ErrorTemplate.header_item_missing("locale").message == (
            'Cannot find header item "locale:"'
        )

    def test_plural_form_count_mismatch(self) -> None:
        assert ErrorTemplate.plural_form_count_mismatch(1, 3).message == (
            "Invalid number of plural forms; actual: 1, expected: 3"
        )

    def test_plural_form_number_missing(self) -> None:
        message = ErrorTemplate.plural_form_number_missing(0, 1).message
        assert "index position 0" in message
        assert "decimal number 1" in message

    def test_plural_definition_invalid_without_reason(self) -> None:
        assert ErrorTemplate.plural_definition_invalid().message == (
            "Invalid plural form definition"
        )


class TestFormatter:
    """Rust, simple and JSON output styles."""

    DIAGNOSTIC = ErrorTemplate.protected_term_missing("FreeFileSync").at(SourcePosition(4, 0))

    def test_rust_with_hint(self) -> None:
        output = DiagnosticFormatter().format(self.DIAGNOSTIC)
        assert output.splitlines() == [
            'error[PROTECTED_TERM_MISSING]: Misspelled "FreeFileSync" in translation',
            "  --> row 4, column 0",
            '  = help: "FreeFileSync" must not be translated',
        ]

    def test_rust_color(self) -> None:
        output = DiagnosticFormatter(color=True).format(self.DIAGNOSTIC)
        assert output.startswith("\033[1;31merror\033[0m")

    def test_simple(self) -> None:
        output = DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(self.DIAGNOSTIC)
        assert output == 'PROTECTED_TERM_MISSING: Misspelled "FreeFileSync" in translation (4:0)'

    def test_simple_without_position(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(ErrorTemplate.source_text_empty()) == (
            "SOURCE_TEXT_EMPTY: Translation source text is empty"
        )

    def test_json(self) -> None:
        output = DiagnosticFormatter(output_format=OutputFormat.JSON).format(self.DIAGNOSTIC)
        data = json.loads(output)
        assert data["code"] == "PROTECTED_TERM_MISSING"
        assert data["code_value"] == DiagnosticCode.PROTECTED_TERM_MISSING.value
        assert (data["row"], data["col"]) == (4, 0)
        assert set(data) == {"code", "code_value", "message", "row", "col", "hint"}
        assert "hint" in data

    def test_sanitize_truncates(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.DUPLICATE_ENTRY, message="x" * 200)
        output = DiagnosticFormatter(sanitize=True, max_content_length=10).format(diagnostic)
        assert output == "error[DUPLICATE_ENTRY]: xxxxxxxxxx..."

    def test_format_all(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all(
            [ErrorTemplate.source_text_empty(), ErrorTemplate.colon_missing()]
        )
        assert output.count("\n\n") == 1

    def test_simple_with_path(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format(self.DIAGNOSTIC, path="german.lng")
        assert output.startswith("german.lng:4:0: PROTECTED_TERM_MISSING: ")

    def test_json_with_path(self) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(self.DIAGNOSTIC, path="german.lng"))
        assert data["path"] == "german.lng"

    def test_rust_source_excerpt(self) -> None:
        source = "<header>\n</header>\n\n<source>A</source>\n<target>Nom\n"
        diagnostic = ErrorTemplate.colon_missing().at(SourcePosition(4, 2))
        output = DiagnosticFormatter().format(diagnostic, source=source, path="german.lng")
        lines = output.splitlines()
        assert lines[1] == "  --> german.lng, row 4, column 2"
        assert lines[2:5] == ["   |", " 4 | <target>Nom", "   |   ^"]

    def test_rust_source_excerpt_row_out_of_range(self) -> None:
        diagnostic = ErrorTemplate.colon_missing().at(SourcePosition(9, 0))
        output = DiagnosticFormatter().format(diagnostic, source="one line")
        assert "|" not in output
