"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from flutter_a11y_linter.infrastructure.di.container import A11yContainer
from flutter_a11y_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = A11yContainer()

    deps = CLIDependencies(
        telemetry=container.get_telemetry_port(),
        filesystem=container.get_filesystem_gateway(),
        guidance_service=container.get_guidance_service(),
        analyzer=container.get_analyzer(),
        scan_workspace=container.get_scan_workspace(),
        plan_fix=container.get_plan_fix(),
        apply_fix=container.get_apply_fix(),
        text_reporter=container.get_reporter("text"),
        json_reporter=container.get_reporter("json"),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
