"""Unit tests for ScanWorkspaceUseCase."""

from unittest.mock import Mock, call

import pytest

from flutter_a11y_linter.domain.config import ConfigurationLoader
from flutter_a11y_linter.use_cases.analyze_document import AnalyzeDocumentUseCase
from flutter_a11y_linter.use_cases.scan_workspace import DocumentSource, ScanWorkspaceUseCase


def _source(label: str, text: str) -> DocumentSource:
    return DocumentSource(label=label, uri=f"/proj/lib/{label}", read=lambda: text)


def _failing(label: str, exc: Exception) -> DocumentSource:
    def read() -> str:
        raise exc

    return DocumentSource(label=label, uri=f"/proj/lib/{label}", read=read)


@pytest.fixture
def telemetry() -> Mock:
    return Mock()


@pytest.fixture
def filesystem() -> Mock:
    return Mock()


@pytest.fixture
def use_case(telemetry: Mock, filesystem: Mock) -> ScanWorkspaceUseCase:
    return ScanWorkspaceUseCase(
        analyzer=AnalyzeDocumentUseCase(),
        telemetry=telemetry,
        filesystem=filesystem,
        config_loader=ConfigurationLoader({}),
    )


class TestExecute:
    def test_zero_documents_returns_empty_summary(self, use_case: ScanWorkspaceUseCase) -> None:
        on_progress = Mock()
        is_cancelled = Mock(return_value=False)
        summary = use_case.execute([], is_cancelled=is_cancelled, on_progress=on_progress)
        assert summary.total_files == 0
        assert summary.processed_files == 0
        assert summary.violation_count == 0
        on_progress.assert_not_called()

    def test_counts_and_progress(self, use_case: ScanWorkspaceUseCase) -> None:
        on_progress = Mock()
        documents = [
            _source("a.dart", "GestureDetector(onTap: f)"),
            _source("b.dart", "Text('clean')"),
            _source("c.dart", "TextButton(child: c)"),
        ]
        summary = use_case.execute(documents, on_progress=on_progress)
        assert summary.total_files == 3
        assert summary.processed_files == 3
        assert summary.violation_count == 3
        assert summary.files_with_issues == ["a.dart", "c.dart"]
        assert not summary.cancelled
        assert on_progress.call_args_list == [
            call(1, 3, "a.dart"),
            call(2, 3, "b.dart"),
            call(3, 3, "c.dart"),
        ]

    def test_reports_keep_the_scanned_text(self, use_case: ScanWorkspaceUseCase) -> None:
        summary = use_case.execute([_source("a.dart", "Switch(value: v)")])
        report = summary.reports[0]
        assert report.text == "Switch(value: v)"
        assert report.uri == "/proj/lib/a.dart"
        assert len(report.violations) == 1

    def test_failing_file_is_recorded_and_scan_continues(
        self, use_case: ScanWorkspaceUseCase, telemetry: Mock
    ) -> None:
        on_progress = Mock()
        documents = [
            _failing("broken.dart", OSError("permission denied")),
            _source("ok.dart", "Switch(value: v)"),
        ]
        summary = use_case.execute(documents, on_progress=on_progress)
        assert summary.processed_files == 2
        assert summary.violation_count == 1
        assert [f.label for f in summary.failures] == ["broken.dart"]
        assert "permission denied" in summary.failures[0].error
        telemetry.error.assert_called_once()
        assert on_progress.call_count == 2

    def test_any_reader_error_is_isolated(
        self, use_case: ScanWorkspaceUseCase, telemetry: Mock
    ) -> None:
        on_progress = Mock()
        documents = [
            _failing("remote.dart", RuntimeError("buffer disposed")),
            _source("ok.dart", "Switch(value: v)"),
        ]
        summary = use_case.execute(documents, on_progress=on_progress)
        assert summary.processed_files == 2
        assert summary.files_with_issues == ["ok.dart"]
        assert [(f.label, f.error) for f in summary.failures] == [("remote.dart", "buffer disposed")]
        telemetry.error.assert_called_once_with("Error processing /proj/lib/remote.dart: buffer disposed")
        assert on_progress.call_count == 2

    def test_decode_error_is_isolated(self, use_case: ScanWorkspaceUseCase) -> None:
        error = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        summary = use_case.execute([_failing("bad.dart", error), _source("ok.dart", "")])
        assert summary.processed_files == 2
        assert len(summary.failures) == 1

    def test_cancellation_is_polled_before_each_file(
        self, use_case: ScanWorkspaceUseCase, telemetry: Mock
    ) -> None:
        on_progress = Mock()
        is_cancelled = Mock(side_effect=[False, True])
        documents = [
            _source("a.dart", "Switch(value: v)"),
            _source("b.dart", "Switch(value: v)"),
            _source("c.dart", "Switch(value: v)"),
        ]
        summary = use_case.execute(documents, is_cancelled=is_cancelled, on_progress=on_progress)
        assert summary.cancelled
        assert summary.total_files == 3
        assert summary.processed_files == 1
        assert summary.files_with_issues == ["a.dart"]
        on_progress.assert_called_once_with(1, 3, "a.dart")
        telemetry.step.assert_called_once_with("Scan cancelled after 1 files.")

    def test_cancelled_before_start(self, use_case: ScanWorkspaceUseCase) -> None:
        read = Mock(return_value="Switch(value: v)")
        source = DocumentSource(label="a.dart", uri="/a.dart", read=read)
        summary = use_case.execute([source], is_cancelled=lambda: True)
        assert summary.cancelled
        assert summary.processed_files == 0
        read.assert_not_called()

    def test_non_dart_documents_have_no_violations(self, use_case: ScanWorkspaceUseCase) -> None:
        source = DocumentSource(
            label="notes.txt", uri="/notes.txt", read=lambda: "Switch(", language_id="plaintext"
        )
        summary = use_case.execute([source])
        assert summary.processed_files == 1
        assert summary.violation_count == 0


class TestDiscover:
    def test_discover_uses_configured_globs(
        self, telemetry: Mock, filesystem: Mock
    ) -> None:
        filesystem.glob_dart_files.return_value = ["/p/lib/a.dart", "/p/lib/b.dart"]
        filesystem.basename.side_effect = lambda path: path.rsplit("/", 1)[-1]
        filesystem.read_text.side_effect = lambda path: f"// {path}"
        use_case = ScanWorkspaceUseCase(
            analyzer=AnalyzeDocumentUseCase(),
            telemetry=telemetry,
            filesystem=filesystem,
            config_loader=ConfigurationLoader({"exclude": ["**/gen/**"], "max_files": 10}),
        )

        documents = use_case.discover("/p")

        filesystem.glob_dart_files.assert_called_once_with(
            "/p", include="**/*.dart", exclude=["**/gen/**"], limit=10
        )
        assert [d.label for d in documents] == ["a.dart", "b.dart"]
        assert [d.read() for d in documents] == ["// /p/lib/a.dart", "// /p/lib/b.dart"]
        telemetry.debug.assert_called_once_with("Found 2 Dart files to scan")

    def test_discover_does_not_read_files(self, use_case: ScanWorkspaceUseCase, filesystem: Mock) -> None:
        filesystem.glob_dart_files.return_value = ["/p/a.dart"]
        filesystem.basename.return_value = "a.dart"
        use_case.discover("/p")
        filesystem.read_text.assert_not_called()
