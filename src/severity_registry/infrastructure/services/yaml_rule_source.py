"""YamlRuleSource: loads analyzers and their rules from rule catalog YAML files."""

import logging
from typing import TYPE_CHECKING

import yaml

from severity_registry.domain.entities import Analyzer, Rule
from severity_registry.domain.protocols import RuleSourceProtocol

if TYPE_CHECKING:
    from severity_registry.domain.protocols import FileSystemProtocol

logger = logging.getLogger(__name__)


class YamlRuleSource(RuleSourceProtocol):
    """
    Rule source backed by one or more catalogs of the form:

        analyzers:
          - name: SpacingRules
            rules:
              - id: SA1001
                name: CommaMustBeFollowedBySpace
                description: ...

    Catalogs are read once, on first use, in the order given. Analyzers with the
    same name across catalogs are merged; a catalog that fails to load is
    logged and skipped. The source is available if any catalog loaded.
    """

    def __init__(self, catalogs: list[tuple["FileSystemProtocol", str]]) -> None:
        self._catalogs = catalogs
        self._rules: dict[Analyzer, list[Rule]] | None = None
        self._loaded_count = 0

    def is_available(self) -> bool:
        self._ensure_loaded()
        return self._loaded_count > 0

    def get_rules(self) -> dict[Analyzer, list[Rule]]:
        """Return analyzer -> rules in catalog order."""
        rules = self._ensure_loaded()
        return {analyzer: list(items) for analyzer, items in rules.items()}

    def _ensure_loaded(self) -> dict[Analyzer, list[Rule]]:
        if self._rules is not None:
            return self._rules
        rules: dict[Analyzer, list[Rule]] = {}
        for filesystem, path in self._catalogs:
            try:
                if not filesystem.exists(path):
                    logger.warning("Rule catalog not found: %s", path)
                    continue
                data = yaml.safe_load(filesystem.read_text(path))
            except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
                logger.warning("Rule catalog %s could not be loaded: %s", path, exc)
                continue
            self._merge(rules, data, path)
            self._loaded_count += 1
        self._rules = rules
        return rules

    @staticmethod
    def _merge(rules: dict[Analyzer, list[Rule]], data: object, path: str) -> None:
        analyzers = data.get("analyzers", []) if isinstance(data, dict) else []
        if not isinstance(analyzers, list):
            logger.warning("Rule catalog %s: 'analyzers' must be a list", path)
            return
        for raw_analyzer in analyzers:
            if not isinstance(raw_analyzer, dict) or not raw_analyzer.get("name"):
                continue
            analyzer = Analyzer(name=str(raw_analyzer["name"]))
            bucket = rules.setdefault(analyzer, [])
            for raw_rule in raw_analyzer.get("rules") or []:
                if not isinstance(raw_rule, dict) or not raw_rule.get("id"):
                    logger.debug("Skipping rule without id in %s", path)
                    continue
                bucket.append(
                    Rule(
                        rule_id=str(raw_rule["id"]),
                        name=str(raw_rule.get("name") or raw_rule["id"]),
                        description=str(raw_rule.get("description") or "").strip(),
                        analyzer=analyzer.name,
                    )
                )
