"""Pytest configuration: shared wiring for CLI and use case tests.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
on the import path.
"""

from unittest.mock import MagicMock

import pytest

from flutter_a11y_linter.domain.config import ConfigurationLoader
from flutter_a11y_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from flutter_a11y_linter.infrastructure.reporters import JsonScanReporter, TerminalScanReporter
from flutter_a11y_linter.infrastructure.services.guidance_service import GuidanceService
from flutter_a11y_linter.interface.cli import CLIDependencies
from flutter_a11y_linter.use_cases.analyze_document import AnalyzeDocumentUseCase
from flutter_a11y_linter.use_cases.apply_fix import ApplyFixUseCase
from flutter_a11y_linter.use_cases.plan_fix import PlanFixUseCase
from flutter_a11y_linter.use_cases.scan_workspace import ScanWorkspaceUseCase


@pytest.fixture
def cli_deps() -> CLIDependencies:
    """Real use cases over the real filesystem; telemetry is a mock so output stays on stdout."""
    telemetry = MagicMock()
    filesystem = FileSystemGateway()
    analyzer = AnalyzeDocumentUseCase()
    plan_fix = PlanFixUseCase(analyzer)
    return CLIDependencies(
        telemetry=telemetry,
        filesystem=filesystem,
        guidance_service=GuidanceService(),
        analyzer=analyzer,
        scan_workspace=ScanWorkspaceUseCase(
            analyzer=analyzer,
            telemetry=telemetry,
            filesystem=filesystem,
            config_loader=ConfigurationLoader({}),
        ),
        plan_fix=plan_fix,
        apply_fix=ApplyFixUseCase(plan_fix=plan_fix, filesystem=filesystem, telemetry=telemetry),
        text_reporter=TerminalScanReporter(),
        json_reporter=JsonScanReporter(),
    )
