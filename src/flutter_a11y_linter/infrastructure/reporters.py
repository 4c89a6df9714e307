"""Scan reporters: rich terminal tables and machine-readable JSON."""

import json
import sys
from typing import Optional, TextIO

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from flutter_a11y_linter.domain.entities import (
    CodeAction,
    FileReport,
    LineIndex,
    ScanSummary,
    Severity,
)
from flutter_a11y_linter.domain.protocols import ScanReporterProtocol

_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
}


class TerminalScanReporter(ScanReporterProtocol):
    """Terminal reporter using rich for diagnostics tables and summary panels."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def report_file(self, report: FileReport) -> None:
        if not report.violations:
            self.console.print(f"[green]No accessibility issues found in {escape(report.label)}.[/]")
            return
        table = Table(title=report.label, box=box.SIMPLE, title_justify="left")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Location", no_wrap=True)
        table.add_column("Rule", style="cyan", no_wrap=True)
        table.add_column("Severity")
        table.add_column("Message")
        for number, (violation, start, _end) in enumerate(report.positioned(), start=1):
            table.add_row(
                str(number),
                str(start),
                violation.rule_id.value,
                Text(violation.severity.value, style=_SEVERITY_STYLES[violation.severity]),
                violation.message,
            )
        self.console.print(table)

    def report_scan(self, summary: ScanSummary) -> None:
        if summary.total_files == 0:
            self.console.print("No Dart files found in workspace to scan.")
            return
        for report in summary.reports:
            if report.violations:
                self.report_file(report)

        if summary.failures:
            failures = Table(title="Unreadable files", box=box.SIMPLE, title_justify="left")
            failures.add_column("File", style="red")
            failures.add_column("Error")
            for failure in summary.failures:
                failures.add_row(failure.label, failure.error)
            self.console.print(failures)

        if summary.cancelled:
            self.console.print(f"[yellow]Scan cancelled after {summary.processed_files} files.[/]")

        if summary.has_violations():
            message = (
                f"Accessibility scan completed: Found {summary.violation_count} potential issues "
                f"in {len(summary.files_with_issues)} files."
            )
            listing = "\n".join(
                f"{index}. {escape(label)}"
                for index, label in enumerate(summary.files_with_issues, start=1)
            )
            self.console.print(Panel(
                f"{message}\n\n{listing}",
                title="Flutter A11y Scanner",
                border_style="yellow",
                expand=False,
            ))
        elif not summary.cancelled:
            self.console.print(Panel(
                f"No accessibility issues found in {summary.processed_files} dart files.",
                border_style="green",
                expand=False,
            ))

    def report_fixes(
        self,
        report: FileReport,
        actions: list[list[CodeAction]],
        numbers: Optional[list[int]] = None,
    ) -> None:
        if not report.violations:
            self.console.print(f"[green]No accessibility issues found in {escape(report.label)}.[/]")
            return
        index = LineIndex(report.text)
        labels = numbers or list(range(1, len(report.violations) + 1))
        for number, violation, candidates in zip(labels, report.violations, actions):
            start = index.position_at(violation.span.start)
            self.console.print(
                f"[bold]{number}.[/] {escape(report.label)}:{start} "
                f"[cyan]{violation.rule_id.value}[/] {escape(violation.message)}"
            )
            if not candidates:
                self.console.print("   [dim]no automatic fix[/]")
            for choice, action in enumerate(candidates, start=1):
                self.console.print(f"   [green]{choice})[/] {escape(action.title)}")
                preview = TerminalScanReporter._preview(report.text, action)
                self.console.print(Syntax(preview, "dart", theme="ansi_dark", word_wrap=True), style="dim")

    @staticmethod
    def _preview(text: str, action: CodeAction) -> str:
        """The violating construct as it reads after the edit, printable on any UTF-8 console."""
        edit = action.edit
        if edit.is_insertion:
            span = action.violation.span
            preview = text[span.start:edit.span.start] + edit.replacement + text[edit.span.start:span.end]
        else:
            preview = edit.replacement
        # Undecodable bytes arrive as lone surrogates; show them as U+FFFD
        return preview.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class JsonScanReporter(ScanReporterProtocol):
    """Emits diagnostics and summaries as JSON documents."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def _emit(self, payload: object) -> None:
        stream = self.stream or sys.stdout
        json.dump(payload, stream, indent=2)
        stream.write("\n")

    def report_file(self, report: FileReport) -> None:
        self._emit(report.to_dict())

    def report_scan(self, summary: ScanSummary) -> None:
        self._emit(summary.to_dict())

    def report_fixes(
        self,
        report: FileReport,
        actions: list[list[CodeAction]],
        numbers: Optional[list[int]] = None,
    ) -> None:
        file_payload = report.to_dict()
        labels = numbers or list(range(1, len(report.violations) + 1))
        for number, entry, candidates in zip(labels, file_payload["violations"], actions):
            entry["number"] = number
            entry["fixes"] = [action.edit.to_dict() for action in candidates]
        self._emit(file_payload)
