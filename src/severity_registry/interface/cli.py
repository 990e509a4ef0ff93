"""CLI entry points for the severity registry - Thin Controller using Typer."""

from dataclasses import dataclass

import typer

from severity_registry.domain.config import ConfigurationLoader
from severity_registry.domain.entities import Severity
from severity_registry.domain.errors import (
    InvalidArgumentError,
    StoreUnavailableError,
    UnsupportedRuleError,
)
from severity_registry.domain.naming import RuleLabels
from severity_registry.domain.protocols import (
    FixCatalogProtocol,
    RuleSourceProtocol,
    SettingsStoreProtocol,
    TelemetryPort,
)
from severity_registry.interface.reporters import SeverityReporter
from severity_registry.use_cases.dispatch_fix import FixDispatcher
from severity_registry.use_cases.register_rules import RegisterRulesUseCase
from severity_registry.use_cases.resolve_severity import SeverityResolver

EXIT_NO_FIX = 1
EXIT_FAILURE = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    labels: RuleLabels
    store: SettingsStoreProtocol
    rule_source: RuleSourceProtocol
    fix_catalog: FixCatalogProtocol
    reporter: SeverityReporter


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def parse_severity(value: str) -> Severity:
        """Parse a severity option, turning bad input into a usage error."""
        try:
            return Severity.parse(value)
        except InvalidArgumentError as exc:
            raise typer.BadParameter(str(exc)) from exc

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="severity-registry",
            help="Rule severity registry. Run 'severity-registry register' once to populate the settings store.",
            add_completion=False,
        )

        def _fail(exc: Exception) -> typer.Exit:
            deps.telemetry.error(str(exc))
            return typer.Exit(code=EXIT_FAILURE)

        @app.command()
        def register() -> None:
            """Register the default severity and every analyzer rule (existing entries are kept)."""
            deps.telemetry.handshake()
            use_case = RegisterRulesUseCase(labels=deps.labels, telemetry=deps.telemetry)
            try:
                report = use_case.execute(deps.store, deps.rule_source)
            except StoreUnavailableError as exc:
                raise _fail(exc) from exc
            deps.reporter.report_registration(report)

        @app.command(name="list")
        def list_entries(
            group: str | None = typer.Option(None, help="Only show groups containing this text"),
        ) -> None:
            """Show every stored severity entry."""
            try:
                entries = deps.store.list_entries()
            except StoreUnavailableError as exc:
                raise _fail(exc) from exc
            deps.reporter.report_entries(entries, group=group)

        @app.command(name="set")
        def set_severity(
            rule_id: str = typer.Argument(..., help="Rule id, e.g. SA1600"),
            severity: str = typer.Argument(..., help="error, warning, suggestion, hint, info or none"),
        ) -> None:
            """Override the severity of a registered rule."""
            parsed = CLIAppFactory.parse_severity(severity)
            resolver = SeverityResolver(deps.store, deps.labels)
            try:
                key = resolver.override(rule_id, parsed)
            except (InvalidArgumentError, StoreUnavailableError) as exc:
                raise _fail(exc) from exc
            deps.telemetry.step(f"{key} set to {parsed.value}")

        @app.command()
        def resolve(rule_id: str = typer.Argument(..., help="Rule id, e.g. SA1600")) -> None:
            """Print the effective severity of a rule (its own entry, else the default)."""
            resolver = SeverityResolver(deps.store, deps.labels)
            try:
                severity = resolver.resolve(rule_id)
            except (InvalidArgumentError, StoreUnavailableError) as exc:
                raise _fail(exc) from exc
            typer.echo(f"{rule_id}: {severity.value}")

        @app.command()
        def fixes(
            rule_id: str = typer.Argument(..., help="Rule id of the violation"),
            message: str = typer.Option("", help="Violation tooltip shown in the fix description"),
            classification: str = typer.Option(
                "warning", help="Severity the violation is currently shown with"),
        ) -> None:
            """List the automated fixes offered for a violation of RULE_ID."""
            parsed = CLIAppFactory.parse_severity(classification)
            try:
                dispatcher = FixDispatcher.for_rule(
                    deps.fix_catalog, rule_id, message=message, classification=parsed
                )
                actions = dispatcher.dispatch()
            except InvalidArgumentError as exc:
                raise _fail(exc) from exc
            except UnsupportedRuleError as exc:
                deps.telemetry.warning(str(exc))
                raise typer.Exit(code=EXIT_NO_FIX) from exc
            deps.reporter.report_fixes(rule_id, actions)

        return app
