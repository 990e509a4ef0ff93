"""Error taxonomy for the registry and the fix dispatcher."""

from typing import Optional


class SeverityRegistryError(Exception):
    """Base class for all registry errors."""


class InvalidArgumentError(SeverityRegistryError, ValueError):
    """Malformed or empty input, e.g. an empty rule identifier."""


class StoreUnavailableError(SeverityRegistryError):
    """The settings store failed a read or a write.

    Entries committed earlier in the same registration pass are not rolled back.
    """

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        super().__init__(message)
        self.key = key


class UnsupportedRuleError(SeverityRegistryError):
    """No catalog entry exists for the rule. Recoverable: report 'no automated fix'."""

    def __init__(self, rule_id: str) -> None:
        super().__init__(f"No automated fix available for rule '{rule_id}'.")
        self.rule_id = rule_id
