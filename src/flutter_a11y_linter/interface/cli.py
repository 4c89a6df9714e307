"""CLI entry points for flutter-a11y - Thin Controller using Typer."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn

from flutter_a11y_linter.domain.constants import DART_LANGUAGE_ID
from flutter_a11y_linter.domain.entities import (
    FileReport,
    LineIndex,
    Position,
    SourceSpan,
    TextDocument,
)
from flutter_a11y_linter.domain.exceptions import A11yLinterError
from flutter_a11y_linter.domain.protocols import (
    FileSystemProtocol,
    GuidanceServiceProtocol,
    ScanReporterProtocol,
    TelemetryPort,
)
from flutter_a11y_linter.interface.cancellation import InterruptCancellation
from flutter_a11y_linter.use_cases.analyze_document import AnalyzeDocumentUseCase
from flutter_a11y_linter.use_cases.apply_fix import ApplyFixUseCase
from flutter_a11y_linter.use_cases.plan_fix import PlanFixUseCase
from flutter_a11y_linter.use_cases.scan_workspace import ScanWorkspaceUseCase

EXIT_VIOLATIONS = 1
EXIT_USAGE = 2

_FORMAT_OPTION = typer.Option("text", "--format", "-f", help="Output format: text or json")


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    telemetry: TelemetryPort
    filesystem: FileSystemProtocol
    guidance_service: GuidanceServiceProtocol
    analyzer: AnalyzeDocumentUseCase
    scan_workspace: ScanWorkspaceUseCase
    plan_fix: PlanFixUseCase
    apply_fix: ApplyFixUseCase
    text_reporter: ScanReporterProtocol
    json_reporter: ScanReporterProtocol

    def reporter(self, output_format: str) -> ScanReporterProtocol:
        return self.json_reporter if output_format == "json" else self.text_reporter


class CLIAppFactory:
    """Creates the Typer app. No top-level functions."""

    @staticmethod
    def resolve_target_path(path: Optional[Path]) -> str:
        """Resolve target path: explicit path, else '.'."""
        if path and str(path) != ".":
            return str(path)
        return "."

    @staticmethod
    def language_for(path: str) -> str:
        """Language tag from the file suffix (``dart`` for .dart files)."""
        suffix = Path(path).suffix.lstrip(".").lower()
        return DART_LANGUAGE_ID if suffix == DART_LANGUAGE_ID else suffix or "plaintext"

    @staticmethod
    def load_document(deps: CLIDependencies, file: Path) -> TextDocument:
        """Read file into a TextDocument or exit with a usage error."""
        path = str(file)
        if not deps.filesystem.exists(path) or deps.filesystem.is_directory(path):
            deps.telemetry.error(f"File not found: {path}")
            raise typer.Exit(code=EXIT_USAGE)
        try:
            text = deps.filesystem.read_text(path)
        except OSError as exc:
            deps.telemetry.error(f"Cannot read {path}: {exc}")
            raise typer.Exit(code=EXIT_USAGE) from exc
        return TextDocument(uri=path, text=text, language_id=CLIAppFactory.language_for(path))

    @staticmethod
    def line_span(text: str, line: int) -> Optional[SourceSpan]:
        """Span of the 1-based line in text, or None past the last line."""
        index = LineIndex(text)
        if not 1 <= line <= index.line_count:
            return None
        start = index.offset_at(Position(line=line, column=0))
        if line == index.line_count:
            return SourceSpan(start, len(text))
        return SourceSpan(start, index.offset_at(Position(line=line + 1, column=0)))

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="flutter-a11y",
            help="Flutter A11y: accessibility diagnostics and quick-fixes for Flutter widget trees",
            add_completion=False,
            no_args_is_help=True,
        )

        @app.callback()
        def main(
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details"),
        ) -> None:
            """Flutter accessibility linter."""
            logging.basicConfig(
                level=logging.DEBUG if verbose else logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            )

        @app.command()
        def scan(
            path: Optional[Path] = typer.Argument(None, help="Directory or file to scan (default: .)"),  # noqa: B008
            output_format: str = _FORMAT_OPTION,
        ) -> None:
            """Scan every Dart file under PATH for accessibility issues."""
            reporter = deps.reporter(output_format)
            if output_format != "json":
                deps.telemetry.handshake()
            target_path = CLIAppFactory.resolve_target_path(path)
            if not deps.filesystem.exists(target_path):
                deps.telemetry.error(f"Path not found: {target_path}")
                raise typer.Exit(code=EXIT_USAGE)
            documents = deps.scan_workspace.discover(target_path)
            deps.telemetry.step(f"Scanning {len(documents)} Dart files in {target_path}")

            with InterruptCancellation() as cancellation:
                if output_format == "json" or not documents:
                    summary = deps.scan_workspace.execute(documents, is_cancelled=cancellation)
                else:
                    with Progress(
                        TextColumn("[progress.description]{task.description}"),
                        BarColumn(),
                        MofNCompleteColumn(),
                        transient=True,
                    ) as progress:
                        task = progress.add_task("Scanning", total=len(documents))

                        def on_progress(processed: int, total: int, label: str) -> None:
                            progress.update(
                                task, completed=processed, description=f"Scanned {label}")

                        summary = deps.scan_workspace.execute(
                            documents, is_cancelled=cancellation, on_progress=on_progress
                        )

            reporter.report_scan(summary)
            if summary.has_violations():
                raise typer.Exit(code=EXIT_VIOLATIONS)

        @app.command()
        def check(
            file: Path = typer.Argument(..., help="Dart file to analyze"),  # noqa: B008
            output_format: str = _FORMAT_OPTION,
        ) -> None:
            """Report accessibility diagnostics for a single file."""
            document = CLIAppFactory.load_document(deps, file)
            if not document.is_dart:
                deps.telemetry.warning(f"{file} is not a Dart document; nothing to check.")
            report = deps.analyzer.report(document, deps.filesystem.basename(str(file)))
            deps.reporter(output_format).report_file(report)
            if report.violations:
                raise typer.Exit(code=EXIT_VIOLATIONS)

        @app.command()
        def fixes(
            file: Path = typer.Argument(..., help="Dart file to plan fixes for"),  # noqa: B008
            line: Optional[int] = typer.Option(None, "--line", "-l", help="Only violations touching this line"),
            output_format: str = _FORMAT_OPTION,
        ) -> None:
            """List candidate quick-fixes, numbered for use with 'fix'."""
            document = CLIAppFactory.load_document(deps, file)
            if line is None:
                violations, actions = deps.plan_fix.list_fixes(document)
                numbers = list(range(1, len(violations) + 1))
            else:
                requested = CLIAppFactory.line_span(document.text, line)
                all_violations = deps.analyzer.execute(document)
                numbers, violations, actions = [], [], []
                for number, violation in enumerate(all_violations, start=1):
                    if requested is None or not deps.plan_fix.touches(violation, requested):
                        continue
                    numbers.append(number)
                    violations.append(violation)
                    actions.append(deps.plan_fix.actions_for(document, [violation], requested))
            report = FileReport(
                label=deps.filesystem.basename(str(file)),
                uri=document.uri,
                text=document.text,
                violations=violations,
            )
            deps.reporter(output_format).report_fixes(report, actions, numbers)

        @app.command()
        def fix(
            file: Path = typer.Argument(..., help="Dart file to fix"),  # noqa: B008
            violation: int = typer.Argument(..., help="Violation number as listed by 'fixes'"),
            choice: int = typer.Option(1, "--choice", "-c", help="Quick-fix number for that violation"),
            no_backup: bool = typer.Option(False, "--no-backup", help="Skip creating a .bak backup file"),
        ) -> None:
            """Apply one quick-fix to FILE."""
            document = CLIAppFactory.load_document(deps, file)
            try:
                action = deps.apply_fix.execute(
                    str(file), violation, choice,
                    create_backup=not no_backup, language_id=document.language_id)
            except A11yLinterError as exc:
                deps.telemetry.error(str(exc))
                raise typer.Exit(code=EXIT_USAGE) from exc
            typer.echo(f"Applied: {action.title}")

        @app.command()
        def checklist() -> None:
            """Show the Flutter accessibility checklist."""
            typer.echo("Flutter Accessibility Checklist:")
            for item in deps.guidance_service.get_checklist():
                typer.echo(f"- {item}")

        @app.command()
        def explain(
            rule: str = typer.Argument(..., help="Rule id, e.g. missing-semantics"),
        ) -> None:
            """Describe a rule and how to fix it by hand."""
            entry = deps.guidance_service.get_entry(rule)
            if not entry:
                known = ", ".join(deps.guidance_service.get_rule_ids())
                deps.telemetry.error(f"Unknown rule '{rule}'. Known rules: {known}")
                raise typer.Exit(code=EXIT_USAGE)
            typer.echo(f"{entry.get('display_name', rule)} [{entry.get('severity', 'warning')}]")
            typer.echo("")
            typer.echo(entry.get("short_description", "").strip())
            typer.echo("")
            typer.echo(deps.guidance_service.get_manual_instructions(rule))
            fix_titles = entry.get("fix_titles", [])
            if fix_titles:
                typer.echo("")
                typer.echo(f"Quick-fixes: {', '.join(fix_titles)}")
            for reference in entry.get("references", []):
                typer.echo(f"See: {reference}")

        return app
