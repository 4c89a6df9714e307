from typing import TYPE_CHECKING, Any, cast

from flutter_a11y_linter.domain.config import ConfigurationLoader
from flutter_a11y_linter.domain.engine import RuleEngine
from flutter_a11y_linter.domain.fixes import FixSynthesizer
from flutter_a11y_linter.infrastructure.config_file_loader import ConfigFileLoader
from flutter_a11y_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from flutter_a11y_linter.infrastructure.reporters import JsonScanReporter, TerminalScanReporter
from flutter_a11y_linter.infrastructure.services.guidance_service import GuidanceService
from flutter_a11y_linter.interface.telemetry import ProjectTelemetry
from flutter_a11y_linter.use_cases.analyze_document import AnalyzeDocumentUseCase
from flutter_a11y_linter.use_cases.apply_fix import ApplyFixUseCase
from flutter_a11y_linter.use_cases.plan_fix import PlanFixUseCase
from flutter_a11y_linter.use_cases.scan_workspace import ScanWorkspaceUseCase

if TYPE_CHECKING:
    from flutter_a11y_linter.domain.protocols import (
        FileSystemProtocol,
        GuidanceServiceProtocol,
        ScanReporterProtocol,
        TelemetryPort,
    )


class A11yContainer:
    """Dependency Injection Container for the Flutter A11y Linter."""

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_loader = ConfigurationLoader(ConfigFileLoader.load_config_from_fs())
        self.register_singleton("ConfigurationLoader", config_loader)

        telemetry = ProjectTelemetry("FLUTTER-A11Y", "cyan", "Accessibility scanner online")
        self.register_singleton("TelemetryPort", telemetry)
        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        self.register_singleton("GuidanceService", GuidanceService())

        # Core: one engine and one synthesizer serve every use case
        analyzer = AnalyzeDocumentUseCase(RuleEngine())
        self.register_singleton("AnalyzeDocumentUseCase", analyzer)
        self.register_singleton(
            "ScanWorkspaceUseCase",
            ScanWorkspaceUseCase(
                analyzer=analyzer,
                telemetry=telemetry,
                filesystem=filesystem,
                config_loader=config_loader,
            ),
        )
        plan_fix = PlanFixUseCase(analyzer, FixSynthesizer())
        self.register_singleton("PlanFixUseCase", plan_fix)
        self.register_singleton(
            "ApplyFixUseCase",
            ApplyFixUseCase(plan_fix=plan_fix, filesystem=filesystem, telemetry=telemetry),
        )

        # Interface
        self.register_singleton("TerminalScanReporter", TerminalScanReporter())
        self.register_singleton("JsonScanReporter", JsonScanReporter())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_guidance_service(self) -> "GuidanceServiceProtocol":
        """Return the guidance service (rule registry)."""
        return cast("GuidanceServiceProtocol", self.get("GuidanceService"))

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_analyzer(self) -> AnalyzeDocumentUseCase:
        return cast(AnalyzeDocumentUseCase, self.get("AnalyzeDocumentUseCase"))

    def get_scan_workspace(self) -> ScanWorkspaceUseCase:
        return cast(ScanWorkspaceUseCase, self.get("ScanWorkspaceUseCase"))

    def get_plan_fix(self) -> PlanFixUseCase:
        return cast(PlanFixUseCase, self.get("PlanFixUseCase"))

    def get_apply_fix(self) -> ApplyFixUseCase:
        return cast(ApplyFixUseCase, self.get("ApplyFixUseCase"))

    def get_reporter(self, output_format: str = "text") -> "ScanReporterProtocol":
        """Return the reporter for output_format ('text' or 'json')."""
        key = "JsonScanReporter" if output_format == "json" else "TerminalScanReporter"
        return cast("ScanReporterProtocol", self.get(key))
