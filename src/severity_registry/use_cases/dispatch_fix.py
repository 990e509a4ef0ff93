"""Use case: select the fix actions for one detected violation."""

from severity_registry.domain.entities import FixAction, Severity, Violation
from severity_registry.domain.errors import InvalidArgumentError, UnsupportedRuleError
from severity_registry.domain.protocols import FixCatalogProtocol


class FixDispatcher:
    """
    Built once per violation being remediated; holds nothing but that violation.

    Fixes are selected by rule id alone. The violation's classification
    (error, warning, suggestion, hint, info) is a presentation concern of the
    host and never changes which fixes are offered.
    """

    def __init__(self, violation: Violation, catalog: FixCatalogProtocol) -> None:
        if not violation.rule_id:
            raise InvalidArgumentError("violation.rule_id must be a non-empty string")
        self.violation = violation
        self.catalog = catalog

    @classmethod
    def for_rule(
        cls,
        catalog: FixCatalogProtocol,
        rule_id: str,
        message: str = "",
        classification: Severity = Severity.WARNING,
    ) -> "FixDispatcher":
        """Build a dispatcher for hosts that only hold a rule id and its tooltip."""
        return cls(
            Violation(rule_id=rule_id, message=message, classification=classification),
            catalog,
        )

    def dispatch(self) -> list[FixAction]:
        """
        Return the ordered fix actions for the violation's rule.

        Raises:
            UnsupportedRuleError: If the catalog has no fix for the rule.
        """
        rule_id = self.violation.rule_id
        templates = self.catalog.lookup(rule_id)
        if not templates:
            raise UnsupportedRuleError(rule_id)
        return [t.render(rule_id, self.violation.message) for t in templates]
