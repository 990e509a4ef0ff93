"""Use case: effective severity lookup and user overrides."""

from severity_registry.domain.entities import Severity
from severity_registry.domain.errors import InvalidArgumentError
from severity_registry.domain.naming import RuleLabels
from severity_registry.domain.protocols import SettingsStoreProtocol


class SeverityResolver:
    """Resolves a rule's effective severity: its own entry, else the default entry, else SUGGESTION."""

    def __init__(self, store: SettingsStoreProtocol, labels: RuleLabels) -> None:
        self.store = store
        self.labels = labels

    def resolve(self, rule_id: str) -> Severity:
        """Return the severity a violation of rule_id should be shown with."""
        own = self.store.get_severity(self.labels.configuration_key(rule_id))
        if own is not None:
            return own
        return self.default_severity()

    def default_severity(self) -> Severity:
        return self.store.get_severity(self.labels.default_key) or Severity.SUGGESTION

    def override(self, rule_id: str, severity: Severity) -> str:
        """
        Set a user severity for an already registered rule. Returns the store key.

        Raises:
            InvalidArgumentError: If rule_id is empty or not registered.
        """
        key = self.labels.configuration_key(rule_id)
        if self.store.get_severity(key) is None:
            raise InvalidArgumentError(
                f"Rule '{rule_id}' is not registered; run 'severity-registry register' first."
            )
        self.store.set_severity(key, severity)
        return key
