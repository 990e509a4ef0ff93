"""Pure key and label derivation for severity entries. No I/O."""

import re

from severity_registry.domain.constants import (
    DEFAULT_NAMESPACE,
    DEFAULT_SEVERITY_DESCRIPTION,
    DEFAULT_SEVERITY_GROUP_TEMPLATE,
    DEFAULT_SEVERITY_SUFFIX,
    GROUP_TITLE_TEMPLATE,
    HIGHLIGHT_ID_TEMPLATE,
)
from severity_registry.domain.errors import InvalidArgumentError

_CAPITAL = re.compile(r"([A-Z])")


class RuleLabels:
    """
    Derives configuration keys and human-readable labels within one namespace.

    Keys must be stable across runs: the same rule id always maps to the same
    store key, so user edits survive restarts.
    """

    def __init__(self, namespace: str = DEFAULT_NAMESPACE) -> None:
        if not namespace:
            raise InvalidArgumentError("namespace must be a non-empty string")
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    @staticmethod
    def split_camel_case(text: str) -> str:
        """Insert a space before every capital letter, e.g. 'NamingRules' -> 'Naming Rules'."""
        return _CAPITAL.sub(r" \1", text).strip()

    def configuration_key(self, rule_id: str | None) -> str:
        """Return '<namespace>.<rule_id>'. Raises InvalidArgumentError on None or ''."""
        if not rule_id:
            raise InvalidArgumentError("rule_id must be a non-empty string")
        return HIGHLIGHT_ID_TEMPLATE.format(rule_id, namespace=self._namespace)

    @property
    def default_key(self) -> str:
        """Reserved key of the default severity entry."""
        return self.configuration_key(DEFAULT_SEVERITY_SUFFIX)

    @property
    def default_group(self) -> str:
        return DEFAULT_SEVERITY_GROUP_TEMPLATE.format(namespace=self._namespace)

    @property
    def default_description(self) -> str:
        return DEFAULT_SEVERITY_DESCRIPTION.format(namespace=self._namespace)

    def group_label(self, analyzer_name: str) -> str:
        """'NamingRules' -> '<namespace> - Naming Rules'."""
        return GROUP_TITLE_TEMPLATE.format(
            self.split_camel_case(analyzer_name), namespace=self._namespace
        )

    def rule_label(self, rule_id: str, rule_name: str) -> str:
        """'SA1001', 'CommaMustBeFollowedBySpace' -> 'SA1001: Comma Must Be Followed By Space'."""
        return f"{rule_id}: {self.split_camel_case(rule_name)}"
