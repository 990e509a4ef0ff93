"""Terminal reporting of severity entries, registration passes and fix actions."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from severity_registry.domain.entities import (
    FixAction,
    RegistrationReport,
    Severity,
    SeverityEntry,
)

_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.SUGGESTION: "#00EEFF",
    Severity.HINT: "green",
    Severity.INFO: "blue",
    Severity.DO_NOT_SHOW: "dim",
}


class SeverityReporter:
    """Renders registry data as rich tables."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @staticmethod
    def severity_cell(severity: Severity) -> str:
        return f"[{_SEVERITY_STYLES[severity]}]{severity.value}[/]"

    def report_entries(self, entries: list[SeverityEntry], group: str | None = None) -> None:
        """Print entries grouped by group label, optionally filtered by a group substring."""
        if group:
            entries = [e for e in entries if group.lower() in e.group.lower()]
        if not entries:
            self.console.print("No severity entries registered.")
            return
        table = Table(title="Configurable Severities", header_style="bold #007BFF")
        table.add_column("Group", style="#00EEFF")
        table.add_column("Rule")
        table.add_column("Key", style="dim")
        table.add_column("Severity")
        for entry in sorted(entries, key=lambda e: (e.group, e.key)):
            table.add_row(
                escape(entry.group),
                escape(entry.title),
                escape(entry.key),
                self.severity_cell(entry.severity),
            )
        self.console.print(table)

    def report_registration(self, report: RegistrationReport) -> None:
        if not report.source_available:
            self.console.print("Registration skipped: analyzer rules are unavailable.")
            return
        table = Table(title="Severity Registration", header_style="bold #007BFF")
        table.add_column("Outcome")
        table.add_column("Count", justify="right")
        table.add_row("Registered", str(len(report.registered)))
        table.add_row("Already present", str(len(report.skipped)))
        if report.default_severity is not None:
            table.add_row("Default severity", self.severity_cell(report.default_severity))
        self.console.print(table)

    def report_fixes(self, rule_id: str, actions: list[FixAction]) -> None:
        table = Table(title=f"Fixes for {escape(rule_id)}", header_style="bold #007BFF")
        table.add_column("#", justify="right")
        table.add_column("Action", style="#00EEFF")
        table.add_column("Description")
        for index, action in enumerate(actions, start=1):
            table.add_row(str(index), action.action_id, escape(action.description))
        self.console.print(table)
