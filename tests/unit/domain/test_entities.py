import pytest

from flutter_a11y_linter.domain.entities import (
    Edit,
    FileReport,
    LineIndex,
    Position,
    RuleId,
    ScanSummary,
    Severity,
    SourceSpan,
    TextDocument,
    Violation,
)


def _violation(start: int = 0, end: int = 6) -> Violation:
    return Violation(
        rule_id=RuleId.MISSING_SEMANTICS,
        message="Switch should be wrapped in Semantics for accessibility",
        severity=Severity.WARNING,
        span=SourceSpan(start, end),
        construct="Switch",
    )


class TestSourceSpan:
    @pytest.mark.parametrize("start,end", [(-1, 2), (5, 4)])
    def test_invalid_span_raises(self, start: int, end: int) -> None:
        with pytest.raises(ValueError):
            SourceSpan(start, end)

    def test_span_helpers(self) -> None:
        span = SourceSpan(2, 5)
        assert span.length == 3
        assert not span.is_empty
        assert span.slice("abcdefg") == "cde"
        assert span.fits("abcde") and not span.fits("abcd")


class TestEdit:
    def test_insert_is_zero_length(self) -> None:
        edit = Edit.insert(3, "XY", "Insert")
        assert edit.is_insertion
        assert edit.apply("abcdef") == "abcXYdef"

    def test_replace(self) -> None:
        edit = Edit.replace(SourceSpan(1, 3), "ZZZ")
        assert not edit.is_insertion
        assert edit.apply("abcdef") == "aZZZdef"

    def test_apply_outside_text_raises(self) -> None:
        with pytest.raises(ValueError):
            Edit.replace(SourceSpan(0, 10), "x").apply("short")

    def test_to_dict(self) -> None:
        edit = Edit.insert(4, "x", "Add")
        assert edit.to_dict() == {"title": "Add", "start": 4, "end": 4, "replacement": "x"}


class TestLineIndex:
    def test_positions(self) -> None:
        index = LineIndex("ab\ncd\n")
        assert index.line_count == 3
        assert index.position_at(0) == Position(1, 0)
        assert index.position_at(3) == Position(2, 0)
        assert index.position_at(5) == Position(2, 2)
        assert index.position_at(6) == Position(3, 0)

    def test_offsets_are_clamped(self) -> None:
        index = LineIndex("ab\ncd")
        assert index.offset_at(Position(2, 1)) == 4
        assert index.offset_at(Position(9, 9)) == 5
        assert index.position_at(99) == Position(2, 2)

    def test_position_str(self) -> None:
        assert str(Position(3, 7)) == "3:7"


class TestSerialization:
    def test_violation_to_dict(self) -> None:
        assert _violation().to_dict() == {
            "rule_id": "missing-semantics",
            "message": "Switch should be wrapped in Semantics for accessibility",
            "severity": "warning",
            "start": 0,
            "end": 6,
            "construct": "Switch",
            "source": "flutter-a11y",
        }

    def test_file_report_adds_positions(self) -> None:
        text = "x\n  Switch(v)"
        report = FileReport(label="a.dart", uri="/a.dart", text=text, violations=[_violation(4, 13)])
        entry = report.to_dict()["violations"][0]
        assert (entry["line"], entry["column"]) == (2, 2)
        assert (entry["end_line"], entry["end_column"]) == (2, 11)

    def test_scan_summary_lists_only_files_with_violations(self) -> None:
        clean = FileReport(label="clean.dart", uri="/clean.dart", text="")
        dirty = FileReport(label="a.dart", uri="/a.dart", text="Switch", violations=[_violation()])
        summary = ScanSummary(
            total_files=2, processed_files=2, violation_count=1,
            files_with_issues=["a.dart"], reports=[clean, dirty],
        )
        data = summary.to_dict()
        assert summary.has_violations()
        assert [f["label"] for f in data["files"]] == ["a.dart"]
        assert data["cancelled"] is False

    def test_empty_summary(self) -> None:
        summary = ScanSummary()
        assert not summary.has_violations()
        assert summary.to_dict()["files_with_issues"] == []


def test_text_document_language() -> None:
    assert TextDocument(uri="a.dart", text="").is_dart
    assert not TextDocument(uri="a.py", text="", language_id="python").is_dart
