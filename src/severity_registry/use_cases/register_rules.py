"""Use case: register every analyzer rule as a configurable severity entry."""

from severity_registry.domain.constants import DEFAULT_SEVERITY_TITLE
from severity_registry.domain.entities import RegistrationReport, Severity
from severity_registry.domain.errors import StoreUnavailableError
from severity_registry.domain.naming import RuleLabels
from severity_registry.domain.protocols import (
    RuleSourceProtocol,
    SettingsStoreProtocol,
    TelemetryPort,
)


class RegisterRulesUseCase:
    """
    One-shot registration of the severity catalog, invoked once by the host's startup.

    Registration is skip-on-exists: an entry already in the store (possibly
    edited by the user) is never overwritten, while rules that appear for the
    first time get an entry seeded with the current default severity.

    The existence check and the write are separate store calls. Callers must
    serialize invocations against one store; there is no internal locking.
    """

    def __init__(self, labels: RuleLabels, telemetry: TelemetryPort) -> None:
        self.labels = labels
        self.telemetry = telemetry

    def execute(
        self, store: SettingsStoreProtocol, rule_source: RuleSourceProtocol
    ) -> RegistrationReport:
        """Register all rules if the analyzer engine is available; otherwise do nothing."""
        if not rule_source.is_available():
            self.telemetry.warning(
                "Analyzer rules unavailable; skipping severity registration.")
            return RegistrationReport(source_available=False)
        return self.register_all_rules(store, rule_source)

    def ensure_default_registered(self, store: SettingsStoreProtocol) -> bool:
        """Register the default severity entry (SUGGESTION) if absent. Returns True if written."""
        key = self.labels.default_key
        if store.get_severity(key) is not None:
            return False
        store.register_configurable_severity(
            key,
            self.labels.default_group,
            DEFAULT_SEVERITY_TITLE,
            self.labels.default_description,
            Severity.SUGGESTION,
        )
        self.telemetry.debug(f"Registered default severity at {key}")
        return True

    def register_all_rules(
        self, store: SettingsStoreProtocol, rule_source: RuleSourceProtocol
    ) -> RegistrationReport:
        """
        Register one entry per rule, grouped by analyzer.

        Returns:
            RegistrationReport with the keys written and the keys skipped
            because they already existed (the default key is listed too). A rule
            whose key equals the reserved default key is warned about and dropped.

        Raises:
            StoreUnavailableError: If the store fails a read or write. Entries
                written before the failure stay in the store.
        """
        analyzer_rules = rule_source.get_rules()

        registered: list[str] = []
        skipped: list[str] = []
        if self.ensure_default_registered(store):
            registered.append(self.labels.default_key)
        else:
            skipped.append(self.labels.default_key)

        default_severity = store.get_severity(self.labels.default_key)
        if default_severity is None:
            raise StoreUnavailableError(
                "Default severity could not be read back after registration.",
                key=self.labels.default_key,
            )

        for analyzer, rules in analyzer_rules.items():
            group = self.labels.group_label(analyzer.name)
            for rule in rules:
                key = self.labels.configuration_key(rule.rule_id)
                if key == self.labels.default_key:
                    self.telemetry.warning(
                        f"Rule id '{rule.rule_id}' of {analyzer.name} collides with the "
                        f"reserved default key {key}; rule not registered."
                    )
                    continue
                if store.get_severity(key) is not None:
                    skipped.append(key)
                    continue
                store.register_configurable_severity(
                    key,
                    group,
                    self.labels.rule_label(rule.rule_id, rule.name),
                    rule.description,
                    default_severity,
                )
                registered.append(key)

        self.telemetry.step(
            f"Severity registration complete: {len(registered)} registered, "
            f"{len(skipped)} already present (default: {default_severity.value})."
        )
        return RegistrationReport(
            default_severity=default_severity,
            registered=registered,
            skipped=skipped,
        )
