"""Use Case: Scan Workspace - batch analysis over many documents with progress and cancellation."""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from flutter_a11y_linter.domain.config import ConfigurationLoader
from flutter_a11y_linter.domain.constants import DART_LANGUAGE_ID
from flutter_a11y_linter.domain.entities import (
    FileFailure,
    FileReport,
    ScanSummary,
    TextDocument,
)
from flutter_a11y_linter.domain.protocols import FileSystemProtocol, TelemetryPort
from flutter_a11y_linter.use_cases.analyze_document import AnalyzeDocumentUseCase

ProgressCallback = Callable[[int, int, str], None]
CancellationCheck = Callable[[], bool]


@dataclass(frozen=True)
class DocumentSource:
    """A document to scan: display label, identifier and a deferred text reader."""

    label: str
    uri: str
    read: Callable[[], str]
    language_id: str = DART_LANGUAGE_ID


class ScanWorkspaceUseCase:
    """Run the rule engine over every document, isolating per-file failures."""

    def __init__(
        self,
        analyzer: AnalyzeDocumentUseCase,
        telemetry: TelemetryPort,
        filesystem: FileSystemProtocol,
        config_loader: ConfigurationLoader,
    ) -> None:
        self.analyzer = analyzer
        self.telemetry = telemetry
        self.filesystem = filesystem
        self.config_loader = config_loader

    def discover(self, target_path: str) -> list[DocumentSource]:
        """Enumerate candidate files under target_path using the configured globs."""
        paths = self.filesystem.glob_dart_files(
            target_path,
            include=self.config_loader.include,
            exclude=self.config_loader.exclude,
            limit=self.config_loader.max_files,
        )
        self.telemetry.debug(f"Found {len(paths)} Dart files to scan")
        return [self._source_for(path) for path in paths]

    def _source_for(self, path: str) -> DocumentSource:
        return DocumentSource(
            label=self.filesystem.basename(path),
            uri=path,
            read=lambda: self.filesystem.read_text(path),
        )

    def execute(
        self,
        documents: Sequence[DocumentSource],
        is_cancelled: Optional[CancellationCheck] = None,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ScanSummary:
        """
        Scan documents in order.

        Cancellation is polled before each file, never during one. on_progress
        receives (processed, total, label) after every file, including files
        that failed. Any error raised while reading or analysing a file is
        recorded in the summary and the scan moves on.
        """
        total = len(documents)
        if total == 0:
            return ScanSummary()

        processed = 0
        violation_count = 0
        files_with_issues: list[str] = []
        failures: list[FileFailure] = []
        reports: list[FileReport] = []
        cancelled = False

        for source in documents:
            if is_cancelled is not None and is_cancelled():
                cancelled = True
                self.telemetry.step(f"Scan cancelled after {processed} files.")
                break
            try:
                document = TextDocument(
                    uri=source.uri, text=source.read(), language_id=source.language_id)
                report = self.analyzer.report(document, source.label)
            except Exception as exc:
                self.telemetry.error(f"Error processing {source.uri}: {exc}")
                failures.append(FileFailure(label=source.label, error=str(exc)))
            else:
                reports.append(report)
                if report.violations:
                    files_with_issues.append(source.label)
                    violation_count += len(report.violations)
            processed += 1
            if on_progress is not None:
                on_progress(processed, total, source.label)

        return ScanSummary(
            total_files=total,
            processed_files=processed,
            violation_count=violation_count,
            files_with_issues=files_with_issues,
            failures=failures,
            reports=reports,
            cancelled=cancelled,
        )
