"""Use Case: Apply Fix - write one selected quick-fix back to a file."""

from flutter_a11y_linter.domain.constants import DART_LANGUAGE_ID
from flutter_a11y_linter.domain.entities import CodeAction, TextDocument
from flutter_a11y_linter.domain.protocols import FileSystemProtocol, TelemetryPort
from flutter_a11y_linter.use_cases.plan_fix import PlanFixUseCase


class ApplyFixUseCase:
    """Reads the file, picks the requested code action, applies its single edit."""

    def __init__(
        self,
        plan_fix: PlanFixUseCase,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
    ) -> None:
        self.plan_fix = plan_fix
        self.filesystem = filesystem
        self.telemetry = telemetry

    def execute(
        self,
        file_path: str,
        violation_number: int,
        choice: int = 1,
        create_backup: bool = True,
        language_id: str = DART_LANGUAGE_ID,
    ) -> CodeAction:
        text = self.filesystem.read_text(file_path)
        document = TextDocument(uri=file_path, text=text, language_id=language_id)
        action = self.plan_fix.select(document, violation_number, choice)
        new_text = action.edit.apply(text)
        if create_backup:
            backup_path = f"{file_path}.bak"
            self.filesystem.copy_file(file_path, backup_path)
            self.telemetry.debug(f"Backup written to {backup_path}")
        self.filesystem.write_text(file_path, new_text)
        self.telemetry.step(
            f"Applied '{action.title}' to {action.violation.construct} in {file_path}"
        )
        return action
