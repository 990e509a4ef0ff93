"""Console telemetry: every message is printed through rich and mirrored to logging."""

import logging

from rich.console import Console
from rich.markup import escape

from severity_registry.domain.constants import SEVERITY_BANNER
from severity_registry.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """TelemetryPort backed by a rich Console and a stdlib logger named after the project."""

    def __init__(self, project_name: str, color: str, welcome: str) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome
        self.console = Console(stderr=True)
        self.logger = logging.getLogger(project_name.lower())

    def handshake(self) -> None:
        """Print the banner and the welcome line."""
        self.console.print(SEVERITY_BANNER)
        self.console.print(f"[bold {self.color}]{self.project_name}[/] :: {self.welcome}")
        self.logger.info("%s handshake: %s", self.project_name, self.welcome)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]>>[/] {escape(message)}")
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[bold yellow]WARNING:[/] {escape(message)}")
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]ERROR:[/] {escape(message)}")
        self.logger.error(message)

    def debug(self, message: str) -> None:
        # Debug detail goes to the log only.
        self.logger.debug(message)
