from typing import TYPE_CHECKING, Optional, Protocol

from flutter_a11y_linter.domain.registry_types import RuleRegistryEntry

if TYPE_CHECKING:
    from flutter_a11y_linter.domain.entities import (
        CodeAction,
        FileReport,
        ScanSummary,
    )


class TelemetryPort(Protocol):
    """Status lines for the user plus a log trail."""

    def handshake(self) -> None:
        ...

    def step(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...

    def debug(self, message: str) -> None:
        ...


class FileSystemProtocol(Protocol):
    def resolve_path(self, path: str) -> str:
        ...

    def is_directory(self, path: str) -> bool:
        ...

    def exists(self, path: str) -> bool:
        ...

    def glob_dart_files(
        self, path: str, include: str, exclude: list[str], limit: int
    ) -> list[str]:
        """Candidate files under path, sorted, excluding matches of exclude, at most limit."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        ...

    def copy_file(self, source: str, destination: str) -> None:
        ...

    def basename(self, path: str) -> str:
        ...


class GuidanceServiceProtocol(Protocol):
    """Rule descriptions, manual-fix guidance and the accessibility checklist."""

    def get_entry(self, rule_id: str) -> Optional[RuleRegistryEntry]:
        ...

    def get_rule_ids(self) -> list[str]:
        ...

    def get_manual_instructions(self, rule_id: str) -> str:
        ...

    def get_checklist(self) -> list[str]:
        ...


class ScanReporterProtocol(Protocol):
    """Renders scan results; never touches documents."""

    def report_file(self, report: "FileReport") -> None:
        ...

    def report_scan(self, summary: "ScanSummary") -> None:
        ...

    def report_fixes(
        self,
        report: "FileReport",
        actions: list[list["CodeAction"]],
        numbers: Optional[list[int]] = None,
    ) -> None:
        """Render violations with their quick-fixes; numbers label them (default 1..n)."""
        ...
