"""Visual telemetry: rich console status lines mirrored into the logging trail."""

import logging
import os
import sys

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from flutter_a11y_linter.domain.constants import A11Y_BANNER
from flutter_a11y_linter.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Handles console announcements and the matching log records."""

    def __init__(self, project_name: str, color: str, welcome: str, quiet: bool = False) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome
        self.quiet = quiet
        self.console = Console(stderr=True, no_color=bool(os.getenv("NO_COLOR")))
        self.logger = logging.getLogger("flutter_a11y_linter")

    def handshake(self) -> None:
        """
        Announce the tool.
        - Banner: interactive TTY with color enabled.
        - One tagged line otherwise.
        - Nothing when quiet.
        """
        self.logger.info("%s: %s", self.project_name, self.welcome)
        if self.quiet:
            return
        if sys.stderr.isatty() and not os.getenv("NO_COLOR"):
            self.console.print(Text.from_ansi(A11Y_BANNER))
        else:
            tag = f"[{self.project_name}]"
            self.console.print(f"[bold {self.color}]{escape(tag)}[/] {escape(self.welcome)}")

    def step(self, message: str) -> None:
        self.logger.info(message)
        if not self.quiet:
            self.console.print(f"[{self.color}]>[/] {escape(message)}", highlight=False)

    def warning(self, message: str) -> None:
        self.logger.warning(message)
        self.console.print(f"[yellow]! {escape(message)}[/]", highlight=False)

    def error(self, message: str) -> None:
        self.logger.error(message)
        self.console.print(f"[bold red]x {escape(message)}[/]", highlight=False)

    def debug(self, message: str) -> None:
        self.logger.debug(message)
