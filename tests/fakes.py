"""Shared fakes for unit tests."""

from severity_registry.domain.entities import Analyzer, Rule


class StaticRuleSource:
    """Rule source returning a fixed mapping; counts get_rules() calls."""

    def __init__(
        self, rules: dict[Analyzer, list[Rule]] | None = None, available: bool = True
    ) -> None:
        self._rules = rules or {}
        self._available = available
        self.calls = 0

    def is_available(self) -> bool:
        return self._available

    def get_rules(self) -> dict[Analyzer, list[Rule]]:
        self.calls += 1
        return self._rules


def spacing_source() -> StaticRuleSource:
    """One analyzer 'SpacingRules' owning SA1001."""
    return StaticRuleSource(
        {
            Analyzer("SpacingRules"): [
                Rule("SA1001", "CommaMustBeFollowedBySpace", "A comma is not followed by a space."),
            ]
        }
    )
